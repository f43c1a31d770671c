"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

The pure decision core never raises for valid inputs: denials are booleans
and a missing assignee is ``None``. These exceptions are raised at the
application boundaries, where callers translate those results.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DomainException(ApplicationException):
    """Base exception for domain logic violations."""


class ValidationException(ApplicationException):
    """Exception for validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.field = field
        super().__init__(message, details or ({"field": field} if field else None))


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class AccessDeniedException(ApplicationException):
    """Exception when an actor is not allowed to perform an action."""

    def __init__(
        self,
        actor_id: str,
        resource: str,
        action: str,
        details: Optional[dict] = None
    ):
        self.actor_id = actor_id
        self.resource = resource
        self.action = action
        super().__init__(
            f"Actor '{actor_id}' may not {action} {resource}",
            details or {"actor_id": actor_id, "resource": resource, "action": action}
        )
