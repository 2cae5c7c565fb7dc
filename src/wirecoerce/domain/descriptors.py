"""Type descriptors: the schema the coercion engine walks.

Four variants, all frozen and hashable:

- :class:`Primitive`: String, Number, Boolean, Date, or Any
- :class:`ListOf`: ordered sequence of one element descriptor
- :class:`MappingOf`: string-keyed collection of one value descriptor
- :class:`ObjectOf`: a record: wire key -> descriptor, plus the model class

Descriptors are built once per domain shape, usually by :func:`describe`
from a pydantic model's annotations, and never mutated afterwards.
"""

from __future__ import annotations

import functools
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any, Union

from pydantic import BaseModel

from wirecoerce.domain.errors import DescriptorError


class PrimitiveKind(StrEnum):
    """Leaf kinds understood by the engine."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    DATE = "Date"
    ANY = "Any"


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind

    @property
    def kind_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ListOf:
    item: Descriptor

    @property
    def kind_name(self) -> str:
        return "List"


@dataclass(frozen=True)
class MappingOf:
    value: Descriptor

    @property
    def kind_name(self) -> str:
        return "Mapping"


@dataclass(frozen=True)
class ObjectOf:
    """Record descriptor.

    Attributes:
        model: Class instantiated (or populated in place) for each record.
        fields: Wire key -> descriptor. Iteration order is declaration order.
        attrs: Wire key -> attribute name, only where the two differ.
    """

    model: type[BaseModel]
    fields: Mapping[str, Descriptor]
    attrs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", types.MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "attrs", types.MappingProxyType(dict(self.attrs)))

    def __hash__(self) -> int:
        return hash((self.model, tuple(self.fields.items()), tuple(self.attrs.items())))

    @property
    def kind_name(self) -> str:
        return "Object"

    def attr_for(self, key: str) -> str:
        """Attribute name that receives the value of wire key *key*."""
        return self.attrs.get(key, key)


Descriptor = Primitive | ListOf | MappingOf | ObjectOf

STRING = Primitive(PrimitiveKind.STRING)
NUMBER = Primitive(PrimitiveKind.NUMBER)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)
DATE = Primitive(PrimitiveKind.DATE)
ANY = Primitive(PrimitiveKind.ANY)

_SCALARS: dict[Any, Primitive] = {
    str: STRING,
    int: NUMBER,
    float: NUMBER,
    bool: BOOLEAN,
    datetime: DATE,
    date: DATE,
    Any: ANY,
    object: ANY,
}


# ── Builder ──────────────────────────────────────────────────────────


@functools.cache
def describe(model: type[BaseModel]) -> ObjectOf:
    """Build the :class:`ObjectOf` descriptor for a pydantic model.

    The wire key of each field is its alias when set, else the field name.
    Results are cached per class.

    Raises:
        DescriptorError: An annotation has no descriptor equivalent, or
            the model refers back to itself.
    """
    return _describe_model(model, frozenset())


def _describe_model(model: type[BaseModel], building: frozenset[type]) -> ObjectOf:
    if model in building:
        msg = f"{model.__name__} refers to itself; recursive shapes are not supported"
        raise DescriptorError(msg)
    building = building | {model}

    fields: dict[str, Descriptor] = {}
    attrs: dict[str, str] = {}
    for name, info in model.model_fields.items():
        key = info.alias or name
        try:
            fields[key] = _describe_annotation(info.annotation, building)
        except DescriptorError as exc:
            raise DescriptorError(f"{model.__name__}.{name}: {exc}") from exc
        if key != name:
            attrs[key] = name
    return ObjectOf(model=model, fields=fields, attrs=attrs)


def _describe_annotation(annotation: Any, building: frozenset[type]) -> Descriptor:
    if annotation in _SCALARS:
        return _SCALARS[annotation]

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Annotated:
        return _describe_annotation(args[0], building)

    if origin is Union or origin is types.UnionType:
        members = [a for a in args if a is not type(None)]
        if len(members) != 1:
            msg = f"union {annotation!r} must have exactly one non-None member"
            raise DescriptorError(msg)
        return _describe_annotation(members[0], building)

    if origin in (list, tuple, set, frozenset) or annotation in (list, tuple):
        item: Any = args[0] if args else Any
        return ListOf(_describe_annotation(item, building))

    if origin is dict or annotation is dict:
        if args and args[0] is not str:
            msg = f"mapping keys must be str, got {args[0]!r}"
            raise DescriptorError(msg)
        value: Any = args[1] if args else Any
        return MappingOf(_describe_annotation(value, building))

    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return _describe_model(annotation, building)

    if isinstance(annotation, type) and issubclass(annotation, StrEnum):
        return STRING

    msg = f"unsupported annotation {annotation!r}"
    raise DescriptorError(msg)


# ── Introspection ────────────────────────────────────────────────────


def descriptor_to_dict(descriptor: Descriptor) -> dict[str, Any]:
    """JSON-ready view of a descriptor tree.

    Examples:
        >>> descriptor_to_dict(ListOf(STRING))
        {'kind': 'List', 'item': {'kind': 'String'}}
    """
    if isinstance(descriptor, Primitive):
        return {"kind": descriptor.kind_name}
    if isinstance(descriptor, ListOf):
        return {"kind": "List", "item": descriptor_to_dict(descriptor.item)}
    if isinstance(descriptor, MappingOf):
        return {"kind": "Mapping", "value": descriptor_to_dict(descriptor.value)}
    return {
        "kind": "Object",
        "model": descriptor.model.__name__,
        "fields": {key: descriptor_to_dict(d) for key, d in descriptor.fields.items()},
    }
