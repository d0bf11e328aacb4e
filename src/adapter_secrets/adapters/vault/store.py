"""HashiCorp Vault adapter – VaultKeyValueStore over the KV v2 engine."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from adapter_secrets.config.secrets import VersionedKeyValueStore, VersionedRecord, WriteResult
from adapter_secrets.config.settings import VaultSettings

logger = logging.getLogger(__name__)

#: Fragment of the error Vault returns when a ``cas`` precondition fails.
CAS_MISMATCH_MARKER = "check-and-set parameter did not match the current version"


def _require_hvac() -> Any:
    try:
        import hvac  # type: ignore[import-untyped]
        return hvac
    except ImportError as exc:
        raise ImportError("Install 'adapter-secrets[vault]' (hvac) to use the Vault adapter") from exc


class VaultKeyValueStore(VersionedKeyValueStore):
    """HashiCorp Vault KV v2 backend.

    Each secret namespace is a KV v2 mount point, so
    ``read_versioned("adapter-vtb", "terminal-1")`` reads ``adapter-vtb/data/terminal-1``.
    Authentication, TLS and retries stay with :class:`hvac.Client`.
    """

    def __init__(self, url: str = "http://127.0.0.1:8200", token: str | None = None, **kwargs: Any) -> None:
        self._hvac = _require_hvac()
        self._client = self._hvac.Client(url=url, token=token, **kwargs)

    @classmethod
    def from_settings(cls, settings: VaultSettings) -> "VaultKeyValueStore":
        kwargs: dict[str, Any] = {"timeout": settings.timeout, "verify": settings.verify}
        if settings.namespace:
            kwargs["namespace"] = settings.namespace
        return cls(url=settings.url, token=settings.token, **kwargs)

    async def read_versioned(self, namespace: str, path: str) -> VersionedRecord | None:
        return await asyncio.get_running_loop().run_in_executor(None, self._sync_read, namespace, path)

    def _sync_read(self, namespace: str, path: str) -> VersionedRecord | None:
        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=path,
                mount_point=namespace,
                raise_on_deleted_version=True,
            )
        except self._hvac.exceptions.InvalidPath:
            # also raised for a soft-deleted or destroyed latest version
            logger.debug("vault.path_missing mount=%s path=%s", namespace, path)
            return None
        data: dict[str, Any] = response["data"]["data"]
        version: int = response["data"]["metadata"]["version"]
        return VersionedRecord(data=data, version=version)

    async def write_versioned(
        self,
        namespace: str,
        path: str,
        data: Mapping[str, str],
        *,
        expected_version: int | None = None,
    ) -> WriteResult:
        return await asyncio.get_running_loop().run_in_executor(
            None, self._sync_write, namespace, path, dict(data), expected_version
        )

    def _sync_write(
        self,
        namespace: str,
        path: str,
        data: dict[str, str],
        expected_version: int | None,
    ) -> WriteResult:
        try:
            response = self._client.secrets.kv.v2.create_or_update_secret(
                path=path,
                secret=data,
                cas=expected_version,
                mount_point=namespace,
            )
        except self._hvac.exceptions.InvalidRequest as exc:
            if expected_version is not None and CAS_MISMATCH_MARKER in str(exc):
                logger.debug("vault.cas_mismatch mount=%s path=%s expected=%d", namespace, path, expected_version)
                return WriteResult.version_conflict(expected_version)
            raise
        version: int = response["data"]["version"]
        logger.debug("vault.written mount=%s path=%s version=%d", namespace, path, version)
        return WriteResult.written(version)


__all__ = ["CAS_MISMATCH_MARKER", "VaultKeyValueStore"]
