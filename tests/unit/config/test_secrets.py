"""Unit tests for secret value types and the store port result types."""

from __future__ import annotations

import dataclasses

import pytest

from adapter_secrets.config.secrets import (
    SecretObj,
    SecretRef,
    SecretValue,
    VersionedKeyValueStore,
    VersionedRecord,
    VersionedSecret,
    WriteResult,
)
from adapter_secrets.kernel.errors import ConflictError


# ---------------------------------------------------------------------------
# SecretRef
# ---------------------------------------------------------------------------


class TestSecretRef:
    def test_str_representation(self) -> None:
        assert str(SecretRef(path="terminal-1", key="PASSWORD")) == "terminal-1/PASSWORD"

    def test_is_frozen(self) -> None:
        ref = SecretRef(path="p", key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ref.path = "other"  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert SecretRef("x", "y") == SecretRef("x", "y")
        assert len({SecretRef("x", "y"), SecretRef("x", "y")}) == 1


# ---------------------------------------------------------------------------
# Redaction of secret-carrying types
# ---------------------------------------------------------------------------


class TestRedaction:
    def test_secret_value_repr_and_str_hide_value(self) -> None:
        value = SecretValue("s3cr3t")
        assert "s3cr3t" not in repr(value)
        assert "s3cr3t" not in str(value)
        assert "s3cr3t" not in f"{value}"
        assert value.value == "s3cr3t"

    def test_secret_value_equality_by_value(self) -> None:
        assert SecretValue("a") == SecretValue("a")
        assert SecretValue("a") != SecretValue("b")

    def test_secret_obj_repr_lists_keys_only(self) -> None:
        obj = SecretObj(path="terminal-1", values={"PASSWORD": "s3cr3t", "LOGIN": "user11"})
        rendered = repr(obj)
        assert "PASSWORD" in rendered and "LOGIN" in rendered
        assert "s3cr3t" not in rendered and "user11" not in rendered
        assert "terminal-1" in str(obj)

    def test_versioned_secret_repr_hides_values(self) -> None:
        versioned = VersionedSecret(secrets={"PASSWORD": SecretValue("s3cr3t")}, version=42)
        rendered = repr(versioned)
        assert "s3cr3t" not in rendered
        assert "42" in rendered

    def test_versioned_secret_values_in_container_reprs(self) -> None:
        rendered = repr([{"k": SecretValue("s3cr3t")}])
        assert "s3cr3t" not in rendered

    def test_versioned_record_repr_hides_values(self) -> None:
        assert "s3cr3t" not in repr(VersionedRecord(data={"k": "s3cr3t"}, version=1))


# ---------------------------------------------------------------------------
# WriteResult
# ---------------------------------------------------------------------------


class TestWriteResult:
    def test_written(self) -> None:
        result = WriteResult.written(4)
        assert result.version == 4
        assert result.conflict is False

    def test_version_conflict(self) -> None:
        result = WriteResult.version_conflict(3)
        assert result.conflict is True
        assert result.version is None
        assert result.expected_version == 3

    def test_unwrap_returns_written_version(self) -> None:
        assert WriteResult.written(4).unwrap() == 4

    def test_unwrap_of_conflict_raises(self) -> None:
        with pytest.raises(ConflictError) as exc_info:
            WriteResult.version_conflict(3).unwrap()
        assert exc_info.value.detail == {"expected_version": 3}


class TestVersionedKeyValueStorePort:
    def test_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            VersionedKeyValueStore()  # type: ignore[abstract]
