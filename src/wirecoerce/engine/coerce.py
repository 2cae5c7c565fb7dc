"""Recursive, descriptor-directed coercion of decoded JSON.

The engine reinterprets a value that a JSON parser already produced
(``None``, bool, int, float, str, list, dict) according to a
:mod:`~wirecoerce.domain.descriptors` descriptor.

Lenient by default: when a value cannot usefully take the described
shape it is returned unchanged.  Strict mode raises
:class:`~wirecoerce.domain.errors.TypeMismatch` at the first such value.

INVARIANT: Inputs are never mutated.  Lists and dicts are always rebuilt.
INVARIANT: An ``ObjectOf`` field is set iff its key is in the input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, TypeVar

from pydantic import BaseModel

from wirecoerce.domain.descriptors import (
    Descriptor,
    ListOf,
    MappingOf,
    ObjectOf,
    Primitive,
    PrimitiveKind,
    describe,
)
from wirecoerce.domain.errors import TypeMismatch

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


class _Unchanged(Exception):
    """Internal signal: the value could not be coerced."""


class Coercer:
    """Coercion options bound once, applied to many values.

    Stateless between calls; a single instance may be shared across threads.

    Args:
        strict: Raise ``TypeMismatch`` instead of passing values through.
        parse_dates: Parse ISO 8601 strings under ``Date`` descriptors.
        on_mismatch: Called with an unraised ``TypeMismatch`` for every
            value passed through in lenient mode.
    """

    def __init__(
        self,
        *,
        strict: bool = False,
        parse_dates: bool = True,
        on_mismatch: Callable[[TypeMismatch], None] | None = None,
    ) -> None:
        self.strict = strict
        self.parse_dates = parse_dates
        self.on_mismatch = on_mismatch

    def coerce(self, value: Any, descriptor: Descriptor, *, target: Any = None) -> Any:
        """Coerce *value* to the shape of *descriptor*.

        Args:
            value: A decoded-JSON value.
            descriptor: The expected shape.
            target: Existing model instance to populate in place.
                Only valid with an ``ObjectOf`` descriptor.
        """
        if target is not None:
            if not isinstance(descriptor, ObjectOf):
                msg = f"target is only supported for Object descriptors, not {descriptor.kind_name}"
                raise ValueError(msg)
            if not isinstance(target, descriptor.model):
                msg = f"target must be a {descriptor.model.__name__}, got {type(target).__name__}"
                raise TypeError(msg)
        return self._coerce(value, descriptor, "", target)

    # ── Dispatch ─────────────────────────────────────────────────────

    def _coerce(self, value: Any, descriptor: Descriptor, path: str, target: Any = None) -> Any:
        if isinstance(descriptor, Primitive):
            return self._primitive(value, descriptor, path)
        if isinstance(descriptor, ListOf):
            return self._list(value, descriptor, path)
        if isinstance(descriptor, MappingOf):
            return self._mapping(value, descriptor, path)
        if isinstance(descriptor, ObjectOf):
            return self._object(value, descriptor, path, target)
        msg = f"not a type descriptor: {descriptor!r}"
        raise TypeError(msg)

    def _mismatch(self, value: Any, descriptor: Descriptor, path: str) -> Any:
        if self.strict:
            raise TypeMismatch(descriptor.kind_name, value, path)
        if self.on_mismatch is not None:
            self.on_mismatch(TypeMismatch(descriptor.kind_name, value, path))
        where = path or "<root>"
        logger.debug(
            "Passing through %s at %s (expected %s)",
            type(value).__name__,
            where,
            descriptor.kind_name,
            extra={
                "wire_path": where,
                "expected": descriptor.kind_name,
                "actual_type": type(value).__name__,
            },
        )
        return value

    # ── Variants ─────────────────────────────────────────────────────

    def _primitive(self, value: Any, descriptor: Primitive, path: str) -> Any:
        if value is None or descriptor.kind is PrimitiveKind.ANY:
            return value
        try:
            return _PRIMITIVES[descriptor.kind](self, value)
        except _Unchanged:
            return self._mismatch(value, descriptor, path)

    def _list(self, value: Any, descriptor: ListOf, path: str) -> Any:
        if value is None:
            return None
        if not isinstance(value, (list, tuple)):
            return self._mismatch(value, descriptor, path)
        return [
            self._coerce(item, descriptor.item, f"{path}[{i}]") for i, item in enumerate(value)
        ]

    def _mapping(self, value: Any, descriptor: MappingOf, path: str) -> Any:
        if value is None:
            return None
        if not isinstance(value, dict):
            return self._mismatch(value, descriptor, path)
        return {
            key: self._coerce(item, descriptor.value, _join(path, key))
            for key, item in value.items()
        }

    def _object(self, value: Any, descriptor: ObjectOf, path: str, target: Any) -> Any:
        if value is None:
            return target if target is not None else None
        if target is None and isinstance(value, descriptor.model):
            return value
        if not isinstance(value, dict):
            return self._mismatch(value, descriptor, path)

        obj = target if target is not None else descriptor.model.model_construct()
        for key, field_descriptor in descriptor.fields.items():
            if key not in value:
                continue
            setattr(
                obj,
                descriptor.attr_for(key),
                self._coerce(value[key], field_descriptor, _join(path, key)),
            )
        return obj


# ── Primitive converters (raise _Unchanged to pass through) ──────────


def _to_string(_: Coercer, value: Any) -> str:
    if isinstance(value, str):
        return value
    raise _Unchanged


def _to_number(_: Coercer, value: Any) -> int | float:
    if isinstance(value, bool):
        raise _Unchanged
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            raise _Unchanged
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise _Unchanged from None
        if not math.isfinite(number):
            raise _Unchanged
        return number
    raise _Unchanged


def _to_boolean(_: Coercer, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    raise _Unchanged


def _to_date(coercer: Coercer, value: Any) -> date | str:
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, str):
        if not coercer.parse_dates:
            return value
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            raise _Unchanged from None
    raise _Unchanged


_PRIMITIVES = {
    PrimitiveKind.STRING: _to_string,
    PrimitiveKind.NUMBER: _to_number,
    PrimitiveKind.BOOLEAN: _to_boolean,
    PrimitiveKind.DATE: _to_date,
}


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else str(key)


# ── Module-level API ─────────────────────────────────────────────────

_LENIENT = Coercer()
_STRICT = Coercer(strict=True)


def coerce(
    value: Any,
    descriptor: Descriptor,
    *,
    target: Any = None,
    strict: bool = False,
    parse_dates: bool = True,
) -> Any:
    """Coerce a decoded-JSON *value* to *descriptor*'s shape.

    Examples:
        >>> from wirecoerce.domain.descriptors import NUMBER, ListOf
        >>> coerce("42", NUMBER)
        42
        >>> coerce("abc", NUMBER)
        'abc'
        >>> coerce(["1", "x"], ListOf(NUMBER))
        [1, 'x']
    """
    if parse_dates:
        coercer = _STRICT if strict else _LENIENT
    else:
        coercer = Coercer(strict=strict, parse_dates=False)
    return coercer.coerce(value, descriptor, target=target)


def decode_model(
    model: type[_M],
    value: Any,
    *,
    target: _M | None = None,
    strict: bool = False,
    parse_dates: bool = True,
) -> _M | Any:
    """Decode *value* into an instance of pydantic *model*.

    Returns the value unchanged (lenient mode) when it is not a mapping.
    """
    return coerce(value, describe(model), target=target, strict=strict, parse_dates=parse_dates)
