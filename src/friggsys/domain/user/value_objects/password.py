"""Password value object.

There are two ways to obtain a ``Password``:

- ``Password.of_raw`` for user-supplied plaintext, which must satisfy the
  strength rules below before it is handed to a password encoder.
- ``Password.of_hash`` for an already-hashed value coming from an encoder
  or from storage. Only emptiness is checked because hash formats vary.

The instance does not remember which path created it.
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar

from friggsys.domain.shared import error_factory
from friggsys.domain.shared.validation import (
    contains,
    length_at_least,
    length_at_most,
    not_blank,
    run_validators,
)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 50

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

DIGIT_PATTERN = re.compile(r"[0-9]")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
SPECIAL_CHARACTER_PATTERN = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


@dataclass(frozen=True)
class Password:
    """Plaintext or hashed password.

    The value is masked in ``str``/``repr`` so it does not leak into logs or
    error messages; use ``get_value()`` to read it.
    """

    FIELD: ClassVar[str] = "password"
    MIN_LENGTH: ClassVar[int] = PASSWORD_MIN_LENGTH
    MAX_LENGTH: ClassVar[int] = PASSWORD_MAX_LENGTH

    # Order matters: the first failing rule is the one reported.
    RAW_VALIDATORS: ClassVar[tuple] = (
        not_blank(FIELD),
        length_at_least(FIELD, MIN_LENGTH),
        length_at_most(FIELD, MAX_LENGTH),
        contains(FIELD, DIGIT_PATTERN, "At least one digit (0-9)"),
        contains(FIELD, UPPERCASE_PATTERN, "At least one uppercase letter (A-Z)"),
        contains(FIELD, LOWERCASE_PATTERN, "At least one lowercase letter (a-z)"),
        contains(
            FIELD,
            SPECIAL_CHARACTER_PATTERN,
            f"At least one special character ({SPECIAL_CHARACTERS})",
        ),
    )

    value: str = field(repr=False)

    @classmethod
    def of_raw(cls, raw_password: str) -> "Password":
        return cls(run_validators(cls.FIELD, raw_password, cls.RAW_VALIDATORS))

    @classmethod
    def of_hash(cls, password_hash: str) -> "Password":
        if (
            password_hash is None
            or not isinstance(password_hash, str)
            or not password_hash.strip()
        ):
            raise error_factory.invalid(cls.FIELD, "Hash cannot be empty")
        return cls(password_hash)

    def get_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "Password(*****)"
