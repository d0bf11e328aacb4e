"""Application secrets – secret resolution, keyed signing and the error taxonomy."""
from adapter_secrets.application.secrets.algorithms import DigestAlgorithm, HmacAlgorithm
from adapter_secrets.application.secrets.errors import (
    HexDecodeError,
    SecretAlreadyModifiedError,
    SecretError,
    SecretNotFoundError,
    SecretPathNotFoundError,
    SecretsNotFoundError,
)
from adapter_secrets.application.secrets.service import SecretService
from adapter_secrets.application.secrets.signing import DigestSigner, HmacSigner, decode_hex

__all__ = [
    "DigestAlgorithm",
    "DigestSigner",
    "HexDecodeError",
    "HmacAlgorithm",
    "HmacSigner",
    "SecretAlreadyModifiedError",
    "SecretError",
    "SecretNotFoundError",
    "SecretPathNotFoundError",
    "SecretService",
    "SecretsNotFoundError",
    "decode_hex",
]
