"""DecodeService: parse, coerce, and report on wire payloads.

Wraps the coercion engine for callers that start from raw JSON text and
a model name (the CLI, scripts).  Lenient pass-throughs become warnings
on the result; strict-mode mismatches become ``TYPE_MISMATCH`` errors.
"""

from __future__ import annotations

import json
from typing import Any

import structlog

from wirecoerce.config.models import DecodeConfig
from wirecoerce.domain.descriptors import ListOf, descriptor_to_dict
from wirecoerce.domain.errors import TypeMismatch
from wirecoerce.engine import Coercer
from wirecoerce.models import UnknownModelError, WireModel, get_model, list_models
from wirecoerce.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)


class DecodeService:
    """Decode JSON payloads into registered wire models.

    Args:
        config: Engine options; defaults to lenient with date parsing.
    """

    def __init__(self, config: DecodeConfig | None = None) -> None:
        self._config = config or DecodeConfig()

    def decode_text(self, text: str, model_name: str, *, many: bool = False) -> ServiceResult:
        """Parse *text* as JSON, then decode it with :meth:`decode_value`."""
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            return ServiceResult.failure(
                "decode",
                ErrorCode.INVALID_JSON,
                f"Invalid JSON: {exc.msg}",
                line=exc.lineno,
                column=exc.colno,
            )
        except RecursionError:
            return ServiceResult.failure(
                "decode", ErrorCode.INVALID_JSON, "Invalid JSON: nesting too deep"
            )
        return self.decode_value(value, model_name, many=many)

    def decode_value(self, value: Any, model_name: str, *, many: bool = False) -> ServiceResult:
        """Decode an already-parsed JSON *value* as *model_name*.

        With *many*, *value* must be a list of objects.
        """
        op = "decode"
        try:
            model = get_model(model_name)
        except UnknownModelError as exc:
            return ServiceResult.failure(op, ErrorCode.UNKNOWN_MODEL, str(exc), model=model_name)

        warnings: list[str] = []
        coercer = Coercer(
            strict=self._config.strict,
            parse_dates=self._config.parse_dates,
            on_mismatch=lambda m: warnings.append(_describe_passthrough(m)),
        )
        descriptor = ListOf(model.descriptor()) if many else model.descriptor()
        log.debug("decode.start", model=model.wire_name, many=many, strict=self._config.strict)

        try:
            with structlog.contextvars.bound_contextvars(model=model.wire_name):
                decoded = coercer.coerce(value, descriptor)
        except TypeMismatch as exc:
            log.debug("decode.mismatch", path=exc.path, expected=exc.expected)
            return ServiceResult.failure(
                op,
                ErrorCode.TYPE_MISMATCH,
                str(exc),
                expected=exc.expected,
                path=exc.path,
                actual=_jsonable(exc.actual),
            )

        if many:
            if not isinstance(decoded, list) or not all(
                isinstance(item, WireModel) for item in decoded
            ):
                return _not_an_object(op, model.wire_name, value, many=True)
            data: dict[str, Any] = {
                "model": model.wire_name,
                "count": len(decoded),
                "records": [item.to_wire() for item in decoded],
            }
        else:
            if not isinstance(decoded, WireModel):
                return _not_an_object(op, model.wire_name, value, many=False)
            data = {
                "model": model.wire_name,
                "record": decoded.to_wire(),
                "set_fields": sorted(decoded.model_fields_set),
            }

        log.debug("decode.done", model=model.wire_name, warnings=len(warnings))
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def describe(self, model_name: str) -> ServiceResult:
        """Return the descriptor tree of *model_name*."""
        try:
            model = get_model(model_name)
        except UnknownModelError as exc:
            return ServiceResult.failure(
                "describe", ErrorCode.UNKNOWN_MODEL, str(exc), model=model_name
            )
        tree = descriptor_to_dict(model.descriptor())
        return ServiceResult(
            ok=True,
            op="describe",
            data={"model": model.wire_name, "descriptor": tree},
        )

    def list_models(self) -> ServiceResult:
        """Return every registered model name with its field count."""
        items = [
            {"name": name, "fields": len(get_model(name).descriptor().fields)}
            for name in list_models()
        ]
        return ServiceResult(ok=True, op="list_models", data={"items": items, "count": len(items)})


def _describe_passthrough(mismatch: TypeMismatch) -> str:
    where = mismatch.path or "<root>"
    return (
        f"{where}: expected {mismatch.expected}, "
        f"kept {type(mismatch.actual).__name__} unchanged"
    )


def _not_an_object(op: str, model_name: str, value: Any, *, many: bool) -> ServiceResult:
    expected = "a JSON array of objects" if many else "a JSON object"
    return ServiceResult.failure(
        op,
        ErrorCode.NOT_AN_OBJECT,
        f"Expected {expected} for '{model_name}', got {type(value).__name__}",
        model=model_name,
    )


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return repr(value)
