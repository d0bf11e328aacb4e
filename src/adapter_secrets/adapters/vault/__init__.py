"""HashiCorp Vault adapter – versioned KV v2 store."""
from adapter_secrets.adapters.vault.store import CAS_MISMATCH_MARKER, VaultKeyValueStore

__all__ = ["CAS_MISMATCH_MARKER", "VaultKeyValueStore"]
