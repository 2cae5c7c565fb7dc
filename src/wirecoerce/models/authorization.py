"""OAuth2 client authorization resources."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from wirecoerce.models.base import WireModel


class AuthorizationRequest(WireModel):
    """Request to check whether a client may perform an action.

    Attributes:
        action: The action requested on the resource.
        context: Environmental context; values are passed through untyped.
        id: The token to introspect.
        resource: The resource access is requested to.
        scopes: Scopes that are required.
        secret: Client secret.
    """

    wire_name = "authorization-request"

    action: str | None = None
    context: dict[str, Any] | None = None
    id: str | None = None
    resource: str | None = None
    scopes: list[str] | None = None
    secret: str | None = None


class AuthorizationResult(WireModel):
    """Decision returned for an :class:`AuthorizationRequest`."""

    wire_name = "authorization-result"

    allowed: bool | None = None
    subject: str | None = None
    client_id: str | None = None
    granted_scopes: list[str] | None = None
    expires_at: datetime | None = None
    issued_at: datetime | None = None
    ext: dict[str, Any] | None = None
