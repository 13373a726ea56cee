"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from gointernal.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check", data={"count": 0})
        assert result.ok is True
        assert result.data == {"count": 0}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="PATH_NOT_FOUND", message="No such file")
        result = ServiceResult(ok=False, op="check", error=error)
        assert result.error is not None
        assert result.error.code == "PATH_NOT_FOUND"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="explain", data={"allowed": False}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["allowed"] is False
        assert parsed["warnings"] == ["w"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="check")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
