"""Email value object.

The address is validated against a ``local@domain.tld`` pattern after
trimming and lower-casing, but the stored value is the input exactly as it
was given.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from friggsys.domain.shared.validation import full_match, not_blank, run_validators

# Validates: user@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def _normalize(value: str) -> str:
    return value.strip().lower()


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    FIELD: ClassVar[str] = "email"
    VALIDATORS: ClassVar[tuple] = (
        not_blank(FIELD),
        full_match(FIELD, EMAIL_PATTERN, "Invalid email format", prepare=_normalize),
    )

    value: str

    @classmethod
    def of(cls, email: str) -> "Email":
        return cls(run_validators(cls.FIELD, email, cls.VALIDATORS))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
