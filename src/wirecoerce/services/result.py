"""ServiceResult and ServiceError: the universal service contract.

INVARIANT: Service-layer methods return ServiceResult and never raise
for expected failures (bad JSON, unknown model, strict-mode mismatch).
The CLI consumes this type; library callers may too.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable error codes carried by :class:`ServiceError`."""

    INVALID_JSON = "INVALID_JSON"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    UNKNOWN_MODEL = "UNKNOWN_MODEL"
    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    READ_FAILED = "READ_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"decode"``, ``"describe"``, ...).
        data: Operation-specific payload on success.
        warnings: Values passed through unchanged, and similar non-fatal notes.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Shorthand for an ``ok=False`` result."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
