"""Telephone value object.

Only local numbers in the ``(DD) DDDD-DDDD`` or ``(DD) DDDDD-DDDD`` layout
are accepted. The string is stored exactly as given; no normalization.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from friggsys.domain.shared.validation import full_match, not_blank, run_validators

TELEPHONE_PATTERN = re.compile(r"^\(\d{2}\) \d{4,5}-\d{4}$", re.ASCII)


@dataclass(frozen=True)
class Telephone:
    FIELD: ClassVar[str] = "telephone"
    VALIDATORS: ClassVar[tuple] = (
        not_blank(FIELD),
        full_match(FIELD, TELEPHONE_PATTERN, "Invalid telephone format"),
    )

    value: str

    @classmethod
    def of(cls, telephone: str) -> "Telephone":
        return cls(run_validators(cls.FIELD, telephone, cls.VALIDATORS))

    def __str__(self) -> str:
        return self.value
