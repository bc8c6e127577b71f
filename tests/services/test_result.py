"""Tests for ServiceResult, ServiceError, and the result builders."""

import json

import pytest

from bookstore.services.result import ServiceError, ServiceResult, failure, success


class TestServiceResult:
    def test_success_builder(self) -> None:
        result = success("read_book", lines=["alice reading Dune by Herbert"], title="Dune")
        assert result.ok is True
        assert result.op == "read_book"
        assert result.lines == ["alice reading Dune by Herbert"]
        assert result.data["title"] == "Dune"
        assert result.error is None

    def test_success_without_lines(self) -> None:
        result = success("inventory", books=[])
        assert result.lines == []
        assert "lines" not in result.data

    def test_failure_builder(self) -> None:
        result = failure("add_book", "DUPLICATE_BOOK", "Book already exists", title="Dune")
        assert result.ok is False
        assert result.error == ServiceError(
            code="DUPLICATE_BOOK", message="Book already exists", detail={"title": "Dune"}
        )
        assert result.lines == []

    def test_json_serialization(self) -> None:
        result = success("notify_subscribers", lines=["x"], price="25")
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"] == {"lines": ["x"], "price": "25"}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


def test_error_default_detail() -> None:
    assert ServiceError(code="E", message="bad").detail == {}
