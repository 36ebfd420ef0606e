"""User domain.

This domain handles:
- User aggregate (identity, contact data, password hash, status)
- Self-validating value objects (Email, Name, Telephone, Password)
- The repository port the use cases persist through
"""

from friggsys.domain.user.aggregates import User
from friggsys.domain.user.repositories import UserRepository
from friggsys.domain.user.value_objects import (
    Email,
    Name,
    Password,
    Telephone,
    UserStatus,
)

__all__ = [
    "Email",
    "Name",
    "Password",
    "Telephone",
    "User",
    "UserRepository",
    "UserStatus",
]
