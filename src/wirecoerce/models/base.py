"""WireModel: base class for every decodable resource shape.

Subclasses declare fields with ordinary annotations.  The field table is
turned into an :class:`~wirecoerce.domain.descriptors.ObjectOf` once, and
all decoding goes through the shared coercion engine.

Models are mutable (instances may be populated in place) and assignment
is not validated: a lenient decode can store a value of the wrong shape.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel

from wirecoerce.domain.descriptors import ObjectOf, describe
from wirecoerce.engine import coerce


class WireModel(BaseModel):
    """Base for resource shapes exchanged with the access-control API.

    Attributes:
        wire_name: Registry name, e.g. ``"authorization-request"``.
    """

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
        "validate_assignment": False,
    }

    wire_name: ClassVar[str] = ""

    @classmethod
    def descriptor(cls) -> ObjectOf:
        """The cached type descriptor for this shape."""
        return describe(cls)

    @classmethod
    def from_wire(
        cls,
        data: Any,
        obj: Self | None = None,
        *,
        strict: bool = False,
        parse_dates: bool = True,
    ) -> Self | Any:
        """Construct an instance from decoded JSON, or populate *obj* in place.

        Only keys present in *data* are set.  ``None`` returns *obj* (which
        may itself be ``None``).
        """
        return coerce(
            data,
            cls.descriptor(),
            target=obj,
            strict=strict,
            parse_dates=parse_dates,
        )

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict of the fields that were set, keyed by wire name."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, warnings=False)

    def is_set(self, name: str) -> bool:
        """Whether field *name* was present on the wire (``null`` counts as set)."""
        return name in self.model_fields_set
