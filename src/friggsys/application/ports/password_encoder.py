"""Password hashing port."""

from abc import ABC, abstractmethod

from friggsys.domain.user.value_objects import Password


class PasswordEncoder(ABC):
    """Hashes raw passwords and verifies candidates against stored hashes.

    ``encrypt`` may return a different hash for the same input on every call
    (salted); ``matches`` must accept all of them.
    """

    @abstractmethod
    def encrypt(self, raw_password: Password) -> Password:
        """Hash a validated raw password into a ``Password.of_hash`` value."""

    @abstractmethod
    def matches(self, raw_password: str, password_hash: str) -> bool:
        """Return True if ``raw_password`` hashes to ``password_hash``."""
