"""Config settings – Settings base class and VaultSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from adapter_secrets.config.validation import InvalidSettingValueError
from adapter_secrets.kernel.security import REDACTED


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class VaultSettings(Settings):
    """Connection settings for the Vault KV v2 backend (``VAULT_*`` variables).

    Transport concerns (TLS, timeouts) are handed to :class:`hvac.Client` as-is.
    """

    _prefix: ClassVar[str] = "VAULT"

    url: str
    token: str | None = None
    namespace: str | None = None
    timeout: int = 30
    verify: bool = True

    def _validate(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("url", "must be an http(s) URL")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", "must be positive")

    def __repr__(self) -> str:
        token = REDACTED if self.token else None
        return (
            f"VaultSettings(url={self.url!r}, token={token!r}, namespace={self.namespace!r}, "
            f"timeout={self.timeout!r}, verify={self.verify!r})"
        )


__all__ = ["Settings", "VaultSettings"]
