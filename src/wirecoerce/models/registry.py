"""Name -> model lookup for the resource shapes shipped with wirecoerce."""

from __future__ import annotations

from wirecoerce.models.authorization import AuthorizationRequest, AuthorizationResult
from wirecoerce.models.base import WireModel
from wirecoerce.models.relation_tuples import (
    GetRelationTuplesResponse,
    RelationQuery,
    RelationTuple,
    SubjectSet,
)

_MODELS: dict[str, type[WireModel]] = {
    model.wire_name: model
    for model in (
        AuthorizationRequest,
        AuthorizationResult,
        SubjectSet,
        RelationTuple,
        RelationQuery,
        GetRelationTuplesResponse,
    )
}


class UnknownModelError(LookupError):
    """No model is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown model '{name}'. Available: {', '.join(list_models())}")


def get_model(name: str) -> type[WireModel]:
    """Look up a model by its registry name (case-insensitive, ``_`` == ``-``)."""
    key = name.strip().lower().replace("_", "-")
    try:
        return _MODELS[key]
    except KeyError:
        raise UnknownModelError(name) from None


def list_models() -> list[str]:
    """Registered model names, sorted."""
    return sorted(_MODELS)
