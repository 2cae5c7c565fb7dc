"""Tests for format_result and OutputSettings."""

import json

from wirecoerce.output.formatters import OutputSettings, format_result
from wirecoerce.services.result import ErrorCode, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult.failure(op, ErrorCode.INVALID_JSON, msg)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("decode", model="x"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "decode"
        assert data["data"]["model"] == "x"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("decode", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"
        assert data["error"]["code"] == "INVALID_JSON"

    def test_json_mode_keeps_warnings(self) -> None:
        result = ServiceResult(ok=True, op="decode", warnings=["scopes: expected List"])
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["warnings"] == ["scopes: expected List"]


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        assert "OK" in format_result(_ok("custom", key="value"))

    def test_error(self) -> None:
        output = format_result(_err("decode", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output
