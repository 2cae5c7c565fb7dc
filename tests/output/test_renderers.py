"""Tests for the Rich renderers."""

from __future__ import annotations

import json

from wirecoerce.output.renderers import render_result
from wirecoerce.services.decode import DecodeService
from wirecoerce.services.result import ErrorCode, ServiceResult


class TestRenderDecode:
    def test_prints_record_json(self) -> None:
        result = DecodeService().decode_value({"action": "view"}, "authorization-request")
        assert json.loads(render_result(result)) == {"action": "view"}

    def test_many_prints_records(self) -> None:
        result = DecodeService().decode_value(
            [{"namespace": "a"}, {"namespace": "b"}], "relation-tuple", many=True
        )
        assert json.loads(render_result(result)) == [{"namespace": "a"}, {"namespace": "b"}]

    def test_long_values_not_wrapped(self) -> None:
        secret = "s" * 300
        result = DecodeService().decode_value({"secret": secret}, "authorization-request")
        assert json.loads(render_result(result)) == {"secret": secret}

    def test_verbose_header(self) -> None:
        result = DecodeService().decode_value({"action": "view"}, "authorization-request")
        output = render_result(result, verbose=True)
        assert output.startswith("OK")
        assert "model: authorization-request" in output
        assert "set: action" in output


class TestRenderDescribe:
    def test_tree(self) -> None:
        output = render_result(DecodeService().describe("authorization-request"))
        assert output.splitlines()[0].strip() == "authorization-request (AuthorizationRequest)"
        assert "context: Mapping[Any]" in output
        assert "scopes: List[String]" in output

    def test_nested_objects_expanded(self) -> None:
        output = render_result(DecodeService().describe("get-relation-tuples-response"))
        assert "relation_tuples: List[RelationTuple]" in output
        assert "subject_set: SubjectSet" in output
        assert "subject_id: String" in output


class TestRenderListModels:
    def test_table(self) -> None:
        output = render_result(DecodeService().list_models())
        assert "Model" in output
        assert "authorization-request" in output


class TestRenderGenericAndError:
    def test_generic(self) -> None:
        output = render_result(ServiceResult(ok=True, op="custom", data={"n": 1, "xs": [1]}))
        assert "OK" in output
        assert "n: 1" in output

    def test_error_verbose_detail(self) -> None:
        result = ServiceResult.failure("decode", ErrorCode.TYPE_MISMATCH, "bad", path="scopes")
        output = render_result(result, verbose=True)
        assert "ERROR" in output
        assert "TYPE_MISMATCH" in output
        assert "path: scopes" in output

    def test_error_terse(self) -> None:
        result = ServiceResult.failure("decode", ErrorCode.TYPE_MISMATCH, "bad", path="scopes")
        assert "path" not in render_result(result)
