"""Password encoder using bcrypt.

Every call to ``encrypt`` generates a fresh salt, so the same password
hashes differently each time while ``matches`` accepts all of them.

bcrypt only reads the first 72 bytes of its input, and a 50-character
password with multi-byte characters can exceed that. Passwords are
therefore reduced to a base64-encoded SHA-256 digest (44 bytes) before
bcrypt sees them.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from typing import TYPE_CHECKING

import bcrypt

from friggsys.application.ports import PasswordEncoder
from friggsys.domain.user.value_objects import Password

if TYPE_CHECKING:
    from friggsys_config.settings import Settings

logger = logging.getLogger(__name__)


def _prehash(raw_password: str) -> bytes:
    digest = hashlib.sha256(raw_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


class BcryptPasswordEncoder(PasswordEncoder):
    """bcrypt implementation of the PasswordEncoder port.

    Examples
    --------
    >>> encoder = BcryptPasswordEncoder(rounds=4)
    >>> hashed = encoder.encrypt(Password.of_raw("Aa1!bcde"))
    >>> encoder.matches("Aa1!bcde", hashed.get_value())
    True
    >>> encoder.matches("wrong", hashed.get_value())
    False
    """

    def __init__(self, rounds: int = 12):
        """Initialize the encoder.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
        """
        self._rounds = rounds

    @classmethod
    def from_settings(cls, settings: Settings) -> BcryptPasswordEncoder:
        return cls(rounds=settings.bcrypt_rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    def encrypt(self, raw_password: Password) -> Password:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(_prehash(raw_password.get_value()), salt)
        return Password.of_hash(hashed.decode("utf-8"))

    def matches(self, raw_password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                _prehash(raw_password),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format
            logger.debug("Could not verify password against a malformed hash")
            return False
