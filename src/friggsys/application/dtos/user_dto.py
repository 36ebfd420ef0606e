"""DTO for user data returned by use cases."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from friggsys.domain.user import User, UserStatus


@dataclass(frozen=True)
class UserDTO:
    """User information for the presentation layer (never the password)."""

    id: UUID
    name: str
    email: str
    telephone: str
    status: UserStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            telephone=user.telephone,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "telephone": self.telephone,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
