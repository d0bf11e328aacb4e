"""Kernel security – redaction markers and default sensitive fields."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "secrets", "token", "api_key", "apikey",
    "authorization", "value", "values", "hex_secret", "key_bytes",
})

#: Placeholder rendered instead of secret material in ``repr``/``str``.
REDACTED = "***"


def redacted_keys(values: object) -> str:
    """Render a mapping as ``{'a': ***, 'b': ***}``, exposing only its keys."""
    keys = getattr(values, "keys", None)
    if keys is None:
        return REDACTED
    return "{" + ", ".join(f"{k!r}: {REDACTED}" for k in keys()) + "}"


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "REDACTED", "redacted_keys"]
