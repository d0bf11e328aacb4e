"""Kernel security – secret redaction helpers."""
from adapter_secrets.kernel.security.redaction import DEFAULT_SENSITIVE_FIELDS, REDACTED, redacted_keys

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "REDACTED", "redacted_keys"]
