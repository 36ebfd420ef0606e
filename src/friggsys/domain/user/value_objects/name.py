from dataclasses import dataclass
from typing import ClassVar

from friggsys.domain.shared.validation import (
    length_at_least,
    length_at_most,
    not_blank,
    run_validators,
)

NAME_MIN_LENGTH = 5
NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class Name:
    """A user's display name, between 5 and 100 characters."""

    FIELD: ClassVar[str] = "name"
    MIN_LENGTH: ClassVar[int] = NAME_MIN_LENGTH
    MAX_LENGTH: ClassVar[int] = NAME_MAX_LENGTH
    VALIDATORS: ClassVar[tuple] = (
        not_blank(FIELD),
        length_at_least(FIELD, MIN_LENGTH),
        length_at_most(FIELD, MAX_LENGTH),
    )

    value: str

    @classmethod
    def of(cls, name: str) -> "Name":
        return cls(run_validators(cls.FIELD, name, cls.VALIDATORS))

    def __str__(self) -> str:
        return self.value
