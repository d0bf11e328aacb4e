"""Config secrets – SecretRef, SecretValue, SecretObj and VersionedSecret.

Every type that carries secret material overrides ``__repr__``/``__str__``
so that values never reach logs, tracebacks or error messages.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping

from adapter_secrets.kernel.security import REDACTED, redacted_keys


@dataclasses.dataclass(frozen=True)
class SecretRef:
    """Identifies one secret: the *key* inside the record stored at *path*.

    Example: ``SecretRef(path="tinkoff-merchant-882347345", key="PASSWORD")``.
    """
    path: str
    key: str

    def __str__(self) -> str:
        return f"{self.path}/{self.key}"


@dataclasses.dataclass(frozen=True)
class SecretValue:
    """A resolved secret. Only :attr:`value` exposes the raw string."""
    value: str

    def __repr__(self) -> str:
        return f"SecretValue(value={REDACTED})"


@dataclasses.dataclass(frozen=True)
class SecretObj:
    """Full set of key → secret pairs to persist under *path*."""
    path: str
    values: Mapping[str, str]

    def __repr__(self) -> str:
        return f"SecretObj(path={self.path!r}, values={redacted_keys(self.values)})"


@dataclasses.dataclass(frozen=True)
class VersionedSecret:
    """Secrets resolved from one path together with the store's version counter."""
    secrets: dict[str, SecretValue]
    version: int

    def __repr__(self) -> str:
        return f"VersionedSecret(secrets={redacted_keys(self.secrets)}, version={self.version!r})"


__all__ = ["SecretObj", "SecretRef", "SecretValue", "VersionedSecret"]
