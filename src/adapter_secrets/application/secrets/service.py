"""Application secrets – SecretService.

Single entry point for reading and writing a service's secrets and for
deriving signatures from them. Every call is one round trip to the
:class:`~adapter_secrets.config.secrets.VersionedKeyValueStore`; nothing is
cached and nothing is retried.

Usage::

    service = SecretService(VaultKeyValueStore.from_settings(settings))
    ref = SecretRef(path="terminal-882347345", key="HMAC_KEY")
    signature = await service.hmac("adapter-vtb", "amount=100", ref, HmacAlgorithm.HMAC_SHA_256)
"""
from __future__ import annotations

from typing import Any

from adapter_secrets.application.secrets.algorithms import DigestAlgorithm, HmacAlgorithm
from adapter_secrets.application.secrets.errors import (
    HexDecodeError,
    SecretAlreadyModifiedError,
    SecretNotFoundError,
    SecretPathNotFoundError,
    SecretsNotFoundError,
)
from adapter_secrets.application.secrets.signing import DigestSigner, HmacSigner, decode_hex
from adapter_secrets.config.secrets import (
    SecretObj,
    SecretRef,
    SecretValue,
    VersionedKeyValueStore,
    VersionedSecret,
)
from adapter_secrets.observability.logging import get_logger

logger = get_logger(__name__)

__all__ = ["SecretService"]


def _to_secret_values(data: dict[str, Any]) -> dict[str, SecretValue]:
    # ``None`` entries count as absent keys
    return {k: SecretValue(str(v)) for k, v in data.items() if v is not None}


class SecretService:
    """Resolves secrets from a versioned store and signs data with them."""

    def __init__(self, store: VersionedKeyValueStore) -> None:
        self._store = store

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_secrets(self, service_name: str, path: str) -> dict[str, SecretValue]:
        """Return every secret stored at *path*.

        Raises:
            SecretPathNotFoundError: the store has no record at *path*.
        """
        record = await self._store.read_versioned(service_name, path)
        if record is None:
            raise SecretPathNotFoundError(path)
        logger.debug("secrets.read", service=service_name, path=path, version=record.version)
        return _to_secret_values(record.data)

    async def get_versioned_secrets(self, service_name: str, path: str) -> VersionedSecret:
        """Return every secret stored at *path* with the store's version counter.

        A record whose values are all blank is as unusable as a missing one.

        Raises:
            SecretsNotFoundError: no record, or nothing but blank values.
        """
        record = await self._store.read_versioned(service_name, path)
        if record is None:
            raise SecretsNotFoundError(path)
        secrets = _to_secret_values(record.data)
        if not any(s.value.strip() for s in secrets.values()):
            logger.debug("secrets.blank_record", service=service_name, path=path, version=record.version)
            raise SecretsNotFoundError(path)
        logger.debug("secrets.read", service=service_name, path=path, version=record.version)
        return VersionedSecret(secrets=secrets, version=record.version)

    async def get_secret(self, service_name: str, secret_ref: SecretRef) -> SecretValue:
        """Return the single secret identified by *secret_ref*.

        Raises:
            SecretNotFoundError: the path has no record or the key is absent.
        """
        return SecretValue(await self._resolve(service_name, secret_ref))

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    async def hmac(
        self,
        service_name: str,
        data: str,
        secret_ref: SecretRef,
        hmac_algorithm: HmacAlgorithm,
    ) -> str:
        """Return the lower-case hex HMAC of *data* keyed by the hex-encoded secret.

        Raises:
            SecretNotFoundError: the secret cannot be resolved.
            HexDecodeError: the secret is empty or not valid hex.
        """
        key = await self._resolve_hex_key(service_name, secret_ref)
        return HmacSigner.sign(data, key, hmac_algorithm)

    async def verify_hmac(
        self,
        service_name: str,
        data: str,
        secret_ref: SecretRef,
        hmac_algorithm: HmacAlgorithm,
        signature: str,
    ) -> bool:
        """Check *signature* against :meth:`hmac` in constant time."""
        key = await self._resolve_hex_key(service_name, secret_ref)
        return HmacSigner.verify(data, key, hmac_algorithm, signature)

    async def digest(
        self,
        service_name: str,
        data: str,
        secret_ref: SecretRef,
        digest_algorithm: DigestAlgorithm,
    ) -> str:
        """Return the lower-case hex ``hash(data + secret)``.

        Raises:
            SecretNotFoundError: the secret cannot be resolved.
        """
        secret = await self._resolve(service_name, secret_ref)
        return DigestSigner.sign(data, secret, digest_algorithm)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def write_secret(self, service_name: str, secret_obj: SecretObj) -> None:
        """Create or overwrite the record at ``secret_obj.path``."""
        await self.write_versioned_secret(service_name, secret_obj)

    async def write_versioned_secret(self, service_name: str, secret_obj: SecretObj) -> int:
        """Create or overwrite the record at ``secret_obj.path`` and return the new version."""
        result = await self._store.write_versioned(service_name, secret_obj.path, secret_obj.values)
        version = result.unwrap()
        logger.info("secrets.write", service=service_name, path=secret_obj.path, version=version)
        return version

    async def write_with_cas(self, service_name: str, secret_obj: SecretObj, expected_version: int) -> int:
        """Write only if the stored version still equals *expected_version*.

        The comparison happens inside the store, in the same operation as the
        write. ``expected_version=0`` means the path must not exist yet.

        Raises:
            SecretAlreadyModifiedError: the stored version moved on.
        """
        result = await self._store.write_versioned(
            service_name,
            secret_obj.path,
            secret_obj.values,
            expected_version=expected_version,
        )
        if result.conflict:
            logger.warning(
                "secrets.cas_conflict",
                service=service_name,
                path=secret_obj.path,
                expected_version=expected_version,
            )
            raise SecretAlreadyModifiedError(secret_obj.path, expected_version)
        version = result.unwrap()
        logger.info("secrets.write", service=service_name, path=secret_obj.path, version=version)
        return version

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _resolve(self, service_name: str, secret_ref: SecretRef) -> str:
        record = await self._store.read_versioned(service_name, secret_ref.path)
        if record is None or record.data.get(secret_ref.key) is None:
            raise SecretNotFoundError(secret_ref)
        return str(record.data[secret_ref.key])

    async def _resolve_hex_key(self, service_name: str, secret_ref: SecretRef) -> bytes:
        hex_secret = await self._resolve(service_name, secret_ref)
        try:
            return decode_hex(hex_secret)
        except ValueError:
            logger.warning("secrets.hex_decode_failed", service=service_name, path=secret_ref.path, key=secret_ref.key)
            raise HexDecodeError(secret_ref) from None
