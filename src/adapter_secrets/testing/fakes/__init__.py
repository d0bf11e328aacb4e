"""Testing fakes – in-memory implementations of the store port."""
from adapter_secrets.testing.fakes.secrets import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore"]
