"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy for the domain layer.
Value objects raise ``ValidationError`` and aggregates raise
``InvalidStateError``; both inherit from ``DomainException`` so that an
outer adapter can render any of them from ``message``, ``code`` and
``details`` alone.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"

    # Conflict Errors (409)
    INVALID_STATE = "INVALID_STATE"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # Authentication Errors (401)
    MATCHING_FAILED = "MATCHING_FAILED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Additional structured context, always a dict
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details) if details else {}

    def add_detail(self, key: str, value: Any) -> None:
        self.details[key] = value

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when a single field violates a value-object invariant."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)
        self.field = field

    @property
    def validation_type(self) -> Optional[str]:
        return self.details.get("validationType")


class InvalidStateError(DomainException):
    """Raised when a transition is not allowed from the current state."""

    def __init__(
        self,
        entity_name: str,
        current_state: str,
        action: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = (
            f"It is not possible to execute '{action}' on {entity_name} "
            f"in the '{current_state}' state"
        )
        super().__init__(message, ErrorCode.INVALID_STATE, details)
        self.entity_name = entity_name
        self.current_state = current_state
        self.action = action
