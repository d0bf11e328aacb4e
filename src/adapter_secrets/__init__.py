"""
adapter_secrets – Versioned secret access and keyed signing for payment adapters.

Import path convention::

    from adapter_secrets.application.secrets import SecretService, HmacAlgorithm
    from adapter_secrets.config.secrets import SecretRef, SecretObj
    from adapter_secrets.adapters.vault import VaultKeyValueStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
