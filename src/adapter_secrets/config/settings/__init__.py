"""Config settings – 12-factor env-based configuration."""
from adapter_secrets.config.settings.base import Settings, VaultSettings
from adapter_secrets.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "VaultSettings"]
