"""Resource shapes of the access-control API and their registry."""

from wirecoerce.models.authorization import AuthorizationRequest, AuthorizationResult
from wirecoerce.models.base import WireModel
from wirecoerce.models.registry import UnknownModelError, get_model, list_models
from wirecoerce.models.relation_tuples import (
    GetRelationTuplesResponse,
    RelationQuery,
    RelationTuple,
    SubjectSet,
)

__all__ = [
    "AuthorizationRequest",
    "AuthorizationResult",
    "GetRelationTuplesResponse",
    "RelationQuery",
    "RelationTuple",
    "SubjectSet",
    "UnknownModelError",
    "WireModel",
    "get_model",
    "list_models",
]
