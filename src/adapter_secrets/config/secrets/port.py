"""Config secrets – VersionedKeyValueStore port and its result types."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from typing import Any

from adapter_secrets.kernel.errors import ConflictError
from adapter_secrets.kernel.security import redacted_keys


@dataclasses.dataclass(frozen=True)
class VersionedRecord:
    """Raw record read from a store: the data map and its current version."""
    data: dict[str, Any]
    version: int

    def __repr__(self) -> str:
        return f"VersionedRecord(data={redacted_keys(self.data)}, version={self.version!r})"


@dataclasses.dataclass(frozen=True)
class WriteResult:
    """Outcome of :meth:`VersionedKeyValueStore.write_versioned`.

    A rejected check-and-set is reported as ``conflict=True`` rather than
    raised, so callers never inspect store-specific exceptions.
    """
    version: int | None = None
    conflict: bool = False
    expected_version: int | None = None

    @classmethod
    def written(cls, version: int) -> "WriteResult":
        return cls(version=version)

    @classmethod
    def version_conflict(cls, expected_version: int) -> "WriteResult":
        return cls(conflict=True, expected_version=expected_version)

    def unwrap(self) -> int:
        """Return the new version, or raise :class:`ConflictError` for a rejected write."""
        if self.conflict or self.version is None:
            raise ConflictError(
                "Write was rejected by the store",
                detail={"expected_version": self.expected_version},
            )
        return self.version


class VersionedKeyValueStore(abc.ABC):
    """Port: a versioned key-value store partitioned by namespace.

    ``namespace`` is the service's secret namespace (a KV mount in Vault).
    """

    @abc.abstractmethod
    async def read_versioned(self, namespace: str, path: str) -> VersionedRecord | None:
        """Return the current record at *path*, or ``None`` when there is none."""

    @abc.abstractmethod
    async def write_versioned(
        self,
        namespace: str,
        path: str,
        data: Mapping[str, str],
        *,
        expected_version: int | None = None,
    ) -> WriteResult:
        """Replace the record at *path* and return the new version.

        When *expected_version* is given, the store must compare it with the
        current version and swap atomically; ``0`` means "path must not exist".
        """


__all__ = ["VersionedKeyValueStore", "VersionedRecord", "WriteResult"]
