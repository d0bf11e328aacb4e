"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from adapter_secrets.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_is_chained_but_serialised_by_type_only(self) -> None:
        cause = ValueError("Non-hexadecimal digit found in s3cr3t")
        err = BaseError("wrapper", cause=cause)
        assert err.to_dict()["cause"] == "ValueError"
        assert "s3cr3t" not in str(err)
        assert err.__cause__ is cause

    def test_detail_is_copied(self) -> None:
        detail = {"path": "terminal-1"}
        err = BaseError("m", detail=detail)
        detail["key"] = "PASSWORD"
        assert err.detail == {"path": "terminal-1"}

    def test_str_is_json(self) -> None:
        assert json.loads(str(BaseError("m")))["message"] == "m"

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestDomainErrors:
    def test_hierarchy(self) -> None:
        for cls in (ValidationError, ConflictError):
            assert issubclass(cls, DomainError)
        assert issubclass(NotFoundError, DomainError)
        assert not issubclass(ApplicationError, DomainError)

    def test_not_found_message_with_identifier(self) -> None:
        err = NotFoundError("Secret", "p/k")
        assert err.message == "Secret 'p/k' not found"
        assert err.resource == "Secret"
        assert err.identifier == "p/k"

    def test_not_found_message_without_identifier(self) -> None:
        assert NotFoundError("Secret").message == "Secret not found"

    def test_codes(self) -> None:
        assert ConflictError("x").code == "conflict"
        assert ValidationError("x").code == "validation_error"
        assert NotFoundError("x").code == "not_found"
