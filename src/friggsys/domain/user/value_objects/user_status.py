from enum import Enum


class UserStatus(str, Enum):
    """Lifecycle status of a user account."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"

    @property
    def description(self) -> str:
        return self.value.capitalize()
