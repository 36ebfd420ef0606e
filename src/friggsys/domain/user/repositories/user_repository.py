"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from friggsys.domain.shared.pagination import DomainPage, PageParameters
from friggsys.domain.user.aggregates.user import User
from friggsys.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Transactions and locking belong to the implementation; callers issue a
    single load-then-save round trip.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user and return the stored state."""

    @abstractmethod
    async def find_all(self, parameters: PageParameters) -> DomainPage[User]:
        """Return one page of users."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_id(self, user_id: UUID) -> bool:
        """Check if a user exists with the given ID."""

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""
