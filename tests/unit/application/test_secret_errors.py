"""Unit tests for the secret-store error taxonomy."""

from __future__ import annotations

import json

import pytest

from adapter_secrets.application.secrets import (
    HexDecodeError,
    SecretAlreadyModifiedError,
    SecretError,
    SecretNotFoundError,
    SecretPathNotFoundError,
    SecretsNotFoundError,
)
from adapter_secrets.config.secrets import SecretRef
from adapter_secrets.kernel.errors import ConflictError, NotFoundError, ValidationError


REF = SecretRef(path="terminal-1", key="PASSWORD")


class TestTaxonomy:
    @pytest.mark.parametrize(
        ("error", "parent", "code"),
        [
            (SecretPathNotFoundError("terminal-1"), NotFoundError, "secret_path_not_found"),
            (SecretsNotFoundError("terminal-1"), NotFoundError, "secrets_not_found"),
            (SecretNotFoundError(REF), NotFoundError, "secret_not_found"),
            (HexDecodeError(REF), ValidationError, "hex_decode_error"),
            (SecretAlreadyModifiedError("terminal-1", 3), ConflictError, "secret_already_modified"),
        ],
    )
    def test_parent_and_code(self, error: SecretError, parent: type, code: str) -> None:
        assert isinstance(error, parent)
        assert isinstance(error, SecretError)
        assert error.code == code

    def test_kinds_are_distinct(self) -> None:
        assert not isinstance(SecretNotFoundError(REF), SecretPathNotFoundError)
        assert not isinstance(SecretsNotFoundError("p"), SecretNotFoundError)
        assert not isinstance(HexDecodeError(REF), NotFoundError)


class TestMessages:
    def test_path_not_found_message(self) -> None:
        err = SecretPathNotFoundError("kekek")
        assert err.message == "Secret path 'kekek' not found"
        assert err.detail == {"path": "kekek"}

    def test_secret_not_found_names_ref(self) -> None:
        err = SecretNotFoundError(REF)
        assert "terminal-1/PASSWORD" in err.message
        assert err.detail == {"path": "terminal-1", "key": "PASSWORD"}

    def test_hex_decode_names_ref(self) -> None:
        err = HexDecodeError(REF)
        assert err.message == "Secret must be in hex-format: terminal-1/PASSWORD"

    def test_already_modified_carries_version(self) -> None:
        err = SecretAlreadyModifiedError("terminal-1", 3)
        assert err.expected_version == 3
        assert err.to_dict()["detail"] == {"path": "terminal-1", "expected_version": 3}

    def test_str_is_json(self) -> None:
        payload = json.loads(str(SecretsNotFoundError("p")))
        assert payload["code"] == "secrets_not_found"
        assert payload["detail"] == {"path": "p"}
