"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from wirecoerce.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="decode", data={"model": "relation-tuple"})
        assert result.ok is True
        assert result.op == "decode"
        assert result.data == {"model": "relation-tuple"}
        assert result.warnings == []
        assert result.error is None

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure(
            "decode", ErrorCode.TYPE_MISMATCH, "bad", path="scopes", expected="List"
        )
        assert result.ok is False
        assert result.error == ServiceError(
            code=ErrorCode.TYPE_MISMATCH,
            message="bad",
            detail={"path": "scopes", "expected": "List"},
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult.failure("decode", ErrorCode.INVALID_JSON, "nope", line=1)
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "INVALID_JSON"
        assert parsed["error"]["detail"] == {"line": 1}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_unknown_error_code_rejected(self) -> None:
        with pytest.raises(Exception):
            ServiceError(code="E999", message="x")  # type: ignore[arg-type]
