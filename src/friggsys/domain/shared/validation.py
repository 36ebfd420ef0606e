"""Ordered validation chains for value objects.

A value object declares its invariants as a tuple of validators. Each
validator inspects the raw string and returns a ``ValidationError`` or
``None``; ``run_validators`` raises the first error and stops there, so the
order of the tuple decides which error a bad input reports.
"""

import logging
import re
from typing import Any, Callable, Optional, Sequence

from friggsys.domain.shared import error_factory
from friggsys.domain.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

Validator = Callable[[str], Optional[ValidationError]]


def not_blank(field_name: str) -> Validator:
    def check(value: str) -> Optional[ValidationError]:
        if value is None or not value.strip():
            return error_factory.empty_field(field_name)
        return None

    return check


def length_at_least(field_name: str, minimum: int) -> Validator:
    def check(value: str) -> Optional[ValidationError]:
        if len(value) < minimum:
            return error_factory.min_length(field_name, minimum, len(value))
        return None

    return check


def length_at_most(field_name: str, maximum: int) -> Validator:
    def check(value: str) -> Optional[ValidationError]:
        if len(value) > maximum:
            return error_factory.max_length(field_name, maximum, len(value))
        return None

    return check


def full_match(
    field_name: str,
    pattern: re.Pattern[str],
    requirement: str,
    prepare: Callable[[str], str] = lambda value: value,
) -> Validator:
    """The whole (optionally prepared) value must match ``pattern``."""

    def check(value: str) -> Optional[ValidationError]:
        if pattern.fullmatch(prepare(value)) is None:
            return error_factory.invalid_pattern(
                field_name, pattern.pattern, requirement
            )
        return None

    return check


def contains(
    field_name: str,
    pattern: re.Pattern[str],
    requirement: str,
) -> Validator:
    """At least one character of the value must match ``pattern``."""

    def check(value: str) -> Optional[ValidationError]:
        if pattern.search(value) is None:
            return error_factory.invalid_pattern(
                field_name, pattern.pattern, requirement
            )
        return None

    return check


def run_validators(
    field_name: str,
    value: Any,
    validators: Sequence[Validator],
) -> str:
    """Apply ``validators`` in order and return the value unchanged.

    Raises
    ------
    ValidationError
        The first failure reported by the chain.
    """
    if value is not None and not isinstance(value, str):
        raise error_factory.invalid(field_name, f"{field_name} must be a string")

    for validator in validators:
        error = validator(value)
        if error is not None:
            logger.debug(
                "Validation failed for %s: %s", field_name, error.validation_type
            )
            raise error
    return value
