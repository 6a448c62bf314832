"""
PetDemo: Custom Exception Hierarchy
===================================

What:  Application-specific exceptions for the three failure classes a
       handler can hit: bad client input, missing record, store failure.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them
       into `{"error": message}` JSON responses with the matching status.
Who:   Raised by services and request-body parsing; caught by global handlers.

Exception Hierarchy:
    PetDemoError (base)          → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class PetDemoError(Exception):
    """
    Base exception for all PetDemo application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Something went wrong",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PetDemoError):
    """
    Raised when client input fails a presence or type check.

    When:    A required body field or query parameter is missing or empty,
             or an integer field cannot be parsed.
    HTTP:    400 Bad Request
    """

    status_code = 400

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


class NotFoundError(PetDemoError):
    """
    Raised when a lookup matches no record.

    SQLAlchemy returns None for missing rows; services convert that None into
    this exception so routes never inspect query results themselves.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        message: str = "No record found",
        resource: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        super().__init__(message=message, context=ctx)
        self.resource = resource


class DatabaseError(PetDemoError):
    """
    Raised when a store query, insert, or update fails.

    The message is always generic and per-operation ("failed to create cat").
    The original exception type and any identifying data live in `context`,
    which is logged server-side only.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Something went wrong",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
