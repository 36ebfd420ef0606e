"""Use-case exceptions.

These are raised by commands and queries (never by the domain model) when
an operation fails for reasons that need the persistence or hashing ports
to detect: a missing record, a taken email, a wrong secret.

The ``*_error`` functions at the bottom build them with consistent
messages and details.
"""

from typing import Any, Optional

from friggsys.domain.shared.exceptions import ErrorCode
from friggsys.domain.shared.time import utc_now


class UseCaseException(Exception):  # NOQA: N818
    """Base exception for all use-case errors."""

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


class EntityNotFoundError(UseCaseException):
    """Referenced entity has no backing record."""

    def __init__(
        self,
        entity_name: str,
        identifier_type: str,
        identifier: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"{entity_name} with '{identifier_type}' '{identifier}' not found",
            ErrorCode.ENTITY_NOT_FOUND,
            details,
        )
        self.entity_name = entity_name
        self.identifier_type = identifier_type
        self.identifier = identifier


class DuplicateEmailError(UseCaseException):
    """Email already registered to another user."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorCode.DUPLICATE_EMAIL, details)


class MatchingError(UseCaseException):
    """A provided secret does not match the stored hash."""

    def __init__(
        self,
        entity_name: str,
        field_name: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"'{entity_name}' failed to match the {field_name}' field.",
            ErrorCode.MATCHING_FAILED,
            details,
        )
        self.entity_name = entity_name
        self.field_name = field_name


def duplicate_email_error(email: str) -> DuplicateEmailError:
    return DuplicateEmailError(
        f"A user with email '{email}' address already exists.",
        details={"timestamp": utc_now(), "conflictType": "Duplicate e-mail"},
    )


def entity_not_found_error(
    entity_name: str,
    identifier_type: str,
    identifier: str,
    operation: str,
) -> EntityNotFoundError:
    now = utc_now()
    return EntityNotFoundError(
        entity_name,
        identifier_type,
        identifier,
        details={
            "timestamp": now,
            "searchedAt": now,
            "resourceType": entity_name,
            "identifierType": identifier_type,
            "identifier": identifier,
            "operation": operation,
        },
    )


def matching_error(entity_name: str, field_name: str, operation: str) -> MatchingError:
    now = utc_now()
    return MatchingError(
        entity_name,
        field_name,
        details={
            "timestamp": now,
            "searchedAt": now,
            "resourceType": entity_name,
            "fieldName": field_name,
            "operation": operation,
        },
    )
