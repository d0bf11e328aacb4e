"""Application secrets – stateless HMAC and salted-digest signers.

Both signers return lower-case hex and are pure functions of their inputs.
"""
from __future__ import annotations

import binascii
import hmac

from adapter_secrets.application.secrets.algorithms import DigestAlgorithm, HmacAlgorithm

__all__ = ["DigestSigner", "HmacSigner", "decode_hex"]


def decode_hex(hex_secret: str) -> bytes:
    """Decode *hex_secret* strictly.

    Raises :class:`ValueError` for empty input, odd length, whitespace,
    non-hex digits or non-ASCII input. Upper- and lower-case digits are both
    accepted.
    """
    if not hex_secret:
        raise ValueError("secret is empty")
    try:
        return binascii.unhexlify(hex_secret)
    except ValueError:
        # binascii messages may quote the input
        raise ValueError("secret is not a valid hex string") from None


class HmacSigner:
    """Computes HMAC signatures keyed by raw key bytes."""

    @classmethod
    def sign(cls, data: str, key: bytes, algorithm: HmacAlgorithm) -> str:
        """Return the lower-case hex HMAC of UTF-8 *data*."""
        return hmac.new(key, data.encode("utf-8"), algorithm.hash_name).hexdigest()

    @classmethod
    def verify(cls, data: str, key: bytes, algorithm: HmacAlgorithm, signature: str) -> bool:
        """Verify hex *signature* (any case) using constant-time comparison."""
        expected = cls.sign(data, key, algorithm)
        return hmac.compare_digest(expected.encode(), signature.lower().encode())


class DigestSigner:
    """Computes ``hash(data + secret)``; the secret is appended, never prepended."""

    @classmethod
    def sign(cls, data: str, secret: str, algorithm: DigestAlgorithm) -> str:
        return algorithm.new_hash((data + secret).encode("utf-8")).hexdigest()
