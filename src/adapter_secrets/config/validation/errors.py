"""Config validation errors.

Settings may hold credentials (``VAULT_TOKEN``), so these errors name the
offending setting and never carry its raw value.
"""
from adapter_secrets.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Client configuration could not be loaded or is unusable."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Setting '{setting_name}' is required", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """*setting_name* is present but unusable; *reason* says what is expected of it."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
