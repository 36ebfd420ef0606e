"""Constructors for domain errors with consistent messages and details.

Every error built here carries a ``timestamp`` in its details. The message
wording is observed by callers, so keep it stable.
"""

from typing import Any, Optional
from uuid import UUID

from friggsys.domain.shared.exceptions import InvalidStateError, ValidationError
from friggsys.domain.shared.time import utc_now

EMPTY_CHECK = "empty_check"
MIN_LENGTH = "min_length"
MAX_LENGTH = "max_length"
PATTERN_MISMATCH = "pattern_mismatch"
GENERIC = "generic"


def empty_field(field_name: str) -> ValidationError:
    return ValidationError(
        f"{field_name} cannot be empty",
        field=field_name,
        details={"validationType": EMPTY_CHECK, "timestamp": utc_now()},
    )


def min_length(field_name: str, minimum: int, actual: int) -> ValidationError:
    return ValidationError(
        f"{field_name} must have at least {minimum} characters",
        field=field_name,
        details={
            "validationType": MIN_LENGTH,
            "minLength": minimum,
            "actualLength": actual,
            "missingCharacters": minimum - actual,
            "timestamp": utc_now(),
        },
    )


def max_length(field_name: str, maximum: int, actual: int) -> ValidationError:
    return ValidationError(
        f"{field_name} cannot exceed {maximum} characters",
        field=field_name,
        details={
            "validationType": MAX_LENGTH,
            "maxLength": maximum,
            "actualLength": actual,
            "excessCharacters": actual - maximum,
            "timestamp": utc_now(),
        },
    )


def invalid_pattern(field_name: str, pattern: str, requirement: str) -> ValidationError:
    return ValidationError(
        f"{field_name} does not match required pattern",
        field=field_name,
        details={
            "validationType": PATTERN_MISMATCH,
            "pattern": pattern,
            "requirement": requirement,
            "timestamp": utc_now(),
        },
    )


def invalid(field_name: str, message: str) -> ValidationError:
    return ValidationError(
        message,
        field=field_name,
        details={"validationType": GENERIC, "timestamp": utc_now()},
    )


def invalid_state(
    entity_name: str,
    current_state: str,
    action: str,
    entity_id: Optional[UUID] = None,
) -> InvalidStateError:
    details: dict[str, Any] = {"timestamp": utc_now()}
    if entity_id is not None:
        details["entityId"] = str(entity_id)
    return InvalidStateError(entity_name, current_state, action, details)
