"""
Contactbook — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the contact workflow.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return plain-text responses with the correct HTTP status code.
Who:   Raised by services and repositories; caught by global handlers,
       except ValidationError which the contact routes recover from locally.

Exception Hierarchy:
    ContactbookError (base)
    ├── ValidationError        → form re-rendered with an inline message
    ├── NotFoundError          → 404 Not Found
    ├── ContactOperationError  → 500 with an operation-specific message
    └── DatabaseError          → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ContactbookError(Exception):
    """
    Base exception for all Contactbook application errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        context:  Additional debug info (logged but NOT returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ContactbookError):
    """
    Raised when submitted contact fields are incomplete.

    When:    firstName or lastName missing or empty on create/update.
    HTTP:    The route re-renders the form (200) with `message` shown inline.
    """

    def __init__(
        self,
        message: str = "Please fill in all required fields.",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ContactbookError):
    """
    Raised when a requested contact does not exist.

    Repositories return None for missing records; the service layer converts
    None into this exception so the global handler can answer 404.
    """

    def __init__(
        self,
        resource: str = "Contact",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class ContactOperationError(ContactbookError):
    """
    Raised when the repository reports a failed write without raising.

    When:    create_contact returned a falsy value, or update_contact /
             delete_contact returned False.
    HTTP:    500 with `message` as the body ("Failed to create contact", ...)
    """

    def __init__(
        self,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["operation"] = operation
        super().__init__(message=f"Failed to {operation} contact", context=ctx)
        self.operation = operation


class DatabaseError(ContactbookError):
    """
    Raised when the SQL store fails unexpectedly.

    The message returned to the client is always generic; the SQL error,
    statement and contact id stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
