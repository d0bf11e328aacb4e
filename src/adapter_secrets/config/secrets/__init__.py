"""Config secrets – secret value types and the versioned store port."""
from adapter_secrets.config.secrets.port import VersionedKeyValueStore, VersionedRecord, WriteResult
from adapter_secrets.config.secrets.values import SecretObj, SecretRef, SecretValue, VersionedSecret

__all__ = [
    "SecretObj",
    "SecretRef",
    "SecretValue",
    "VersionedKeyValueStore",
    "VersionedRecord",
    "VersionedSecret",
    "WriteResult",
]
