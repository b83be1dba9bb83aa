"""Application exception hierarchy.

Services raise these; the handlers registered in ``wedding.main`` turn them
into JSON responses:

    WeddingError (base)   -> 500
    ├── ValidationError   -> 400
    │   └── QuotaExceededError
    ├── NotFoundError     -> 404
    └── ConflictError     -> 409
"""
from typing import Any, Dict, Optional


class WeddingError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: client-safe description, returned as ``detail``
        context: extra debug info, logged but never returned
    """

    status_code = 500
    code = "internal_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(WeddingError):
    """Client input failed a business rule."""

    status_code = 400
    code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class QuotaExceededError(ValidationError):
    """User already holds the maximum number of requests of one kind."""

    def __init__(self, kind: str, limit: int):
        super().__init__(
            message=f"Maximum number of requested {kind}s ({limit}) reached",
            context={"kind": kind, "limit": limit},
        )
        self.kind = kind
        self.limit = limit


class NotFoundError(WeddingError):
    """Requested resource does not exist (or is not visible to the caller)."""

    status_code = 404
    code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(WeddingError):
    """Write would violate a uniqueness rule, e.g. a duplicate association."""

    status_code = 409
    code = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
