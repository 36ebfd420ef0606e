"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from friggsys.application.exceptions import duplicate_email_error
from friggsys.domain.shared import error_factory
from friggsys.domain.shared.pagination import DomainPage, PageOrder, PageParameters
from friggsys.domain.shared.time import ensure_tz_aware
from friggsys.domain.user import (
    Email,
    Name,
    Password,
    Telephone,
    User,
    UserRepository,
    UserStatus,
)
from friggsys.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Public sort keys (camelCase aliases accepted) -> mapped columns
SORTABLE_COLUMNS = {
    "name": UserModel.name,
    "email": UserModel.email,
    "status": UserModel.status,
    "created_at": UserModel.created_at,
    "createdAt": UserModel.created_at,
    "updated_at": UserModel.updated_at,
    "updatedAt": UserModel.updated_at,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    The session's transaction is left to the caller; this class only
    flushes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, user: User) -> User:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                model = existing
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if self._is_email_conflict(e):
                raise duplicate_email_error(user.email) from e
            raise

        return self._map_to_domain(model)

    async def find_all(self, parameters: PageParameters) -> DomainPage[User]:
        total = await self.count()

        stmt = select(UserModel)
        if parameters.is_sorted:
            column = self._sort_column(parameters.order_by)
            stmt = stmt.order_by(
                column.desc() if parameters.direction == PageOrder.DESC else column.asc(),
                UserModel.id,
            )
        else:
            stmt = stmt.order_by(UserModel.created_at, UserModel.id)
        stmt = stmt.offset(parameters.offset).limit(parameters.size)

        result = await self._session.execute(stmt)
        users = [self._map_to_domain(model) for model in result.scalars().all()]

        return DomainPage.of(users, total, parameters)

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Email) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_id(self, user_id: UUID) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def exists_by_email(self, email: Email) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.email == email.value)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _is_email_conflict(error: IntegrityError) -> bool:
        # SQLite: "UNIQUE constraint failed: users.email"
        # PostgreSQL: 'violates unique constraint "ix_users_email"'
        message = str(error.orig).lower()
        return "unique" in message and "email" in message

    def _sort_column(self, order_by: str):
        key = order_by.strip()
        if key not in SORTABLE_COLUMNS:
            raise error_factory.invalid("orderBy", f"Cannot order users by '{key}'")
        return SORTABLE_COLUMNS[key]

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstruct(
            id=model.id,
            name=Name.of(model.name),
            email=Email.of(model.email),
            telephone=Telephone.of(model.telephone),
            password=Password.of_hash(model.password),
            status=UserStatus(model.status),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            telephone=user.telephone,
            password=user.password,
            status=user.status.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.telephone = user.telephone
        model.password = user.password
        model.status = user.status.value
        model.updated_at = user.updated_at
