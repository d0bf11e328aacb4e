"""Application secrets – domain errors raised by :class:`SecretService`.

Hierarchy::

    DomainError
    └── SecretError
        ├── SecretPathNotFoundError     (also NotFoundError)
        ├── SecretsNotFoundError        (also NotFoundError)
        ├── SecretNotFoundError         (also NotFoundError)
        ├── HexDecodeError              (also ValidationError)
        └── SecretAlreadyModifiedError  (also ConflictError)
"""
from __future__ import annotations

from typing import Any

from adapter_secrets.config.secrets import SecretRef
from adapter_secrets.kernel.errors import ConflictError, DomainError, NotFoundError, ValidationError


class SecretError(DomainError):
    """Marker base for every secret-store domain error."""

    default_code = "secret_error"


class SecretPathNotFoundError(NotFoundError, SecretError):
    """No record exists at *path* (plain bulk read)."""

    default_code = "secret_path_not_found"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__("Secret path", path, detail={"path": path}, **kwargs)
        self.path = path


class SecretsNotFoundError(NotFoundError, SecretError):
    """No record exists at *path*, or every value in it is blank (versioned read)."""

    default_code = "secrets_not_found"

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__("Secrets at path", path, detail={"path": path}, **kwargs)
        self.path = path


class SecretNotFoundError(NotFoundError, SecretError):
    """The record at ``ref.path`` is missing, or has no ``ref.key``."""

    default_code = "secret_not_found"

    def __init__(self, ref: SecretRef, **kwargs: Any) -> None:
        super().__init__("Secret", str(ref), detail={"path": ref.path, "key": ref.key}, **kwargs)
        self.ref = ref


class HexDecodeError(ValidationError, SecretError):
    """The secret referenced by *ref* is not a valid hex string."""

    default_code = "hex_decode_error"

    def __init__(self, ref: SecretRef, **kwargs: Any) -> None:
        super().__init__(
            f"Secret must be in hex-format: {ref}",
            detail={"path": ref.path, "key": ref.key},
            **kwargs,
        )
        self.ref = ref


class SecretAlreadyModifiedError(ConflictError, SecretError):
    """A check-and-set write lost: the stored version is no longer *expected_version*."""

    default_code = "secret_already_modified"

    def __init__(self, path: str, expected_version: int, **kwargs: Any) -> None:
        super().__init__(
            f"Secret at path '{path}' was modified: expected version {expected_version} is stale",
            detail={"path": path, "expected_version": expected_version},
            **kwargs,
        )
        self.path = path
        self.expected_version = expected_version


__all__ = [
    "HexDecodeError",
    "SecretAlreadyModifiedError",
    "SecretError",
    "SecretNotFoundError",
    "SecretPathNotFoundError",
    "SecretsNotFoundError",
]
