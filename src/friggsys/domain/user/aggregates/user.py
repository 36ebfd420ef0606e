import logging
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from friggsys.domain.shared import error_factory
from friggsys.domain.shared.time import advance_from, utc_now
from friggsys.domain.user.value_objects import (
    Email,
    Name,
    Password,
    Telephone,
    UserStatus,
)

logger = logging.getLogger(__name__)

ENTITY_NAME = "User"


class User:
    """
    User aggregate root.

    Holds identity, contact data, the password hash and the account status.
    All mutations go through the methods below; each one either applies
    completely and advances ``updated_at`` or raises and changes nothing.

    Email uniqueness spans aggregates and is enforced by the use cases.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: Name,
        email: Email,
        telephone: Telephone,
        password: Password,
        status: UserStatus = UserStatus.ACTIVE,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._name = name
        self._email = email
        self._telephone = telephone
        self._password = password
        self._status = status if isinstance(status, UserStatus) else UserStatus(status)
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def telephone(self) -> str:
        return self._telephone.value

    @property
    def password(self) -> str:
        """The stored password hash."""
        return self._password.get_value()

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == UserStatus.ACTIVE

    @property
    def is_inactive(self) -> bool:
        return self._status == UserStatus.INACTIVE

    @property
    def is_blocked(self) -> bool:
        return self._status == UserStatus.BLOCKED

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(self, name: Name, email: Email, telephone: Telephone) -> None:
        self._name = name
        self._email = email
        self._telephone = telephone
        self._touch()

    def change_password(self, new_password: Password) -> None:
        """Replace the password with an already-hashed value."""
        self._password = new_password
        self._touch()

    def activate(self) -> None:
        self._transition("activate", UserStatus.ACTIVE)

    def deactivate(self) -> None:
        self._transition("deactivate", UserStatus.INACTIVE)

    def block(self) -> None:
        self._transition("block", UserStatus.BLOCKED)

    def _transition(self, action: str, target: UserStatus) -> None:
        # Every status may move to any other; only a no-op transition is refused.
        if self._status == target:
            logger.warning(
                "Rejected '%s' on user %s: already %s",
                action,
                self._id,
                self._status.description,
            )
            raise error_factory.invalid_state(
                ENTITY_NAME,
                self._status.description,
                action,
                entity_id=self._id,
            )
        self._status = target
        self._touch()

    def _touch(self) -> None:
        self._updated_at = advance_from(self._updated_at)

    @classmethod
    def create(
        cls,
        name: Name,
        email: Email,
        telephone: Telephone,
        password: Password,
    ) -> "User":
        """Register a new, active user. ``password`` must already be hashed."""
        return cls(
            name=name,
            email=email,
            telephone=telephone,
            password=password,
            status=UserStatus.ACTIVE,
        )

    @classmethod
    def reconstruct(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: Name,
        email: Email,
        telephone: Telephone,
        password: Password,
        status: UserStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            telephone=telephone,
            password=password,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, email={self._email.value}, "
            f"status={self._status.value})"
        )
