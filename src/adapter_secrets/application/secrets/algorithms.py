"""Application secrets – HMAC and digest algorithm selectors."""
from __future__ import annotations

import enum
import hashlib
from typing import Any


class _HashAlgorithm(enum.Enum):
    """Member value is the canonical algorithm name; ``hash_name`` drives :mod:`hashlib`."""

    def __new__(cls, canonical_name: str, hash_name: str) -> "_HashAlgorithm":
        member = object.__new__(cls)
        member._value_ = canonical_name
        member.hash_name = hash_name
        return member

    @property
    def canonical_name(self) -> str:
        return self.value

    def new_hash(self, data: bytes = b"") -> Any:
        return hashlib.new(self.hash_name, data)


class HmacAlgorithm(_HashAlgorithm):
    HMAC_MD5 = ("HmacMD5", "md5")
    HMAC_SHA_1 = ("HmacSHA1", "sha1")
    HMAC_SHA_256 = ("HmacSHA256", "sha256")
    HMAC_SHA_512 = ("HmacSHA512", "sha512")


class DigestAlgorithm(_HashAlgorithm):
    MD5 = ("MD5", "md5")
    SHA256 = ("SHA-256", "sha256")


__all__ = ["DigestAlgorithm", "HmacAlgorithm"]
