"""Observability – SensitiveFieldsFilter.

Masks secret material in structured log events before they are rendered.
A value is masked when its key names a sensitive field, or when it is a
:class:`SecretValue` wherever it sits in the event.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from adapter_secrets.config.secrets import SecretValue
from adapter_secrets.kernel.security import DEFAULT_SENSITIVE_FIELDS


class SensitiveFieldsFilter:
    """Replace sensitive values with ``[REDACTED]``.

    Usable directly (``redact``/``redact_deep``) or as a structlog processor.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, field: str) -> bool:
        return field.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Mask top-level sensitive keys only."""
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Mask sensitive keys and :class:`SecretValue` objects at any depth."""
        return {k: (self.REDACTED if self.is_sensitive(k) else self._scrub(v)) for k, v in data.items()}

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, SecretValue):
            return self.REDACTED
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if isinstance(value, list):
            return [self._scrub(v) for v in value]
        if isinstance(value, tuple):
            return tuple(self._scrub(v) for v in value)
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["SensitiveFieldsFilter"]
