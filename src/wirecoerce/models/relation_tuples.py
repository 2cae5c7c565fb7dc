"""Relation tuple resources for the read API.

A relation tuple states that a subject has a relation to an object in a
namespace.  The subject is either a plain ``subject_id`` or a subject
set (every subject that has ``relation`` on ``namespace:object``).

Queries travel as URL parameters with flat dotted keys
(``subject_set.namespace``); :meth:`RelationQuery.from_url_params` and
:meth:`RelationQuery.to_url_params` translate between the two forms.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wirecoerce.domain.descriptors import PrimitiveKind
from wirecoerce.domain.errors import TypeMismatch
from wirecoerce.models.base import WireModel

DEFAULT_PAGE_SIZE = 1000

SUBJECT_SET_PREFIX = "subject_set."


class SubjectSet(WireModel):
    wire_name = "subject-set"

    namespace: str | None = None
    object: str | None = None
    relation: str | None = None


class RelationTuple(WireModel):
    wire_name = "relation-tuple"

    namespace: str | None = None
    object: str | None = None
    relation: str | None = None
    subject_id: str | None = None
    subject_set: SubjectSet | None = None


class RelationQuery(WireModel):
    """Filter for listing relation tuples.  Only ``namespace`` is required
    by the server; every other field narrows the result.
    """

    wire_name = "relation-query"

    namespace: str | None = None
    object: str | None = None
    relation: str | None = None
    subject_id: str | None = None
    subject_set: SubjectSet | None = None
    page_size: int | None = None
    page_token: str | None = None

    @classmethod
    def from_url_params(cls, params: Mapping[str, Any], *, strict: bool = False) -> RelationQuery:
        """Build a query from flat URL parameters.

        Dotted ``subject_set.*`` keys are folded into a nested subject set
        and ``page_size`` is coerced from its string form.  Empty values are
        treated as absent.  ``page_size`` defaults to :data:`DEFAULT_PAGE_SIZE`.

        Raises:
            TypeMismatch: ``page_size`` is not an integer, in lenient mode too.
        """
        nested: dict[str, Any] = {}
        subject_set: dict[str, Any] = {}
        for key, value in params.items():
            if isinstance(value, (list, tuple)):
                value = value[0] if value else None
            if value in (None, ""):
                continue
            if key.startswith(SUBJECT_SET_PREFIX):
                subject_set[key.removeprefix(SUBJECT_SET_PREFIX)] = value
            else:
                nested[key] = value
        if subject_set:
            nested["subject_set"] = subject_set
        nested.setdefault("page_size", DEFAULT_PAGE_SIZE)
        query = cls.from_wire(nested, strict=strict)
        page_size = query.page_size
        if isinstance(page_size, bool) or not isinstance(page_size, int):
            raise TypeMismatch(PrimitiveKind.NUMBER.value, nested["page_size"], "page_size")
        return query

    def to_url_params(self) -> dict[str, str]:
        """Flatten the set fields back into URL parameters."""
        wire = self.to_wire()
        params: dict[str, str] = {}
        for key, value in wire.items():
            if value is None:
                continue
            if key == "subject_set" and isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    if sub_value is not None:
                        params[f"{SUBJECT_SET_PREFIX}{sub_key}"] = str(sub_value)
            else:
                params[key] = str(value)
        return params

    def expand_subject_objects(self) -> list[RelationQuery]:
        """Split a comma-separated ``subject_set.object`` into one query per object.

        Returns ``[self]`` when there is no subject set or its ``object`` is
        unset.  An unset object is the empty filter (empty URL values are
        dropped by :meth:`from_url_params`), so it is not expanded into a
        query for ``object=""``.
        """
        if self.subject_set is None or not isinstance(self.subject_set.object, str):
            return [self]
        queries: list[RelationQuery] = []
        for obj in self.subject_set.object.split(","):
            subject_set = self.subject_set.model_copy(update={"object": obj})
            queries.append(self.model_copy(update={"subject_set": subject_set}))
        return queries


class GetRelationTuplesResponse(WireModel):
    """One page of relation tuples.  An empty ``next_page_token`` marks the last page."""

    wire_name = "get-relation-tuples-response"

    relation_tuples: list[RelationTuple] | None = None
    next_page_token: str | None = None

    @property
    def is_last_page(self) -> bool:
        return not self.next_page_token
