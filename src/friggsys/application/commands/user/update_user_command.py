import logging
from uuid import UUID

from friggsys.application.dtos import UserDTO
from friggsys.application.exceptions import duplicate_email_error
from friggsys.application.services import get_user_or_raise
from friggsys.domain.user import Email, Name, Telephone, UserRepository

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Command to replace a user's name, email and telephone."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(
        self,
        user_id: UUID,
        name: str,
        email: str,
        telephone: str,
    ) -> UserDTO:
        user = await get_user_or_raise(self._user_repo, user_id, "update")

        name_vo = Name.of(name)
        email_vo = Email.of(email)
        telephone_vo = Telephone.of(telephone)

        # Keeping one's own address is not a conflict.
        if email_vo != user.email_obj and await self._user_repo.exists_by_email(
            email_vo
        ):
            logger.warning("User with email %s already exists", email_vo.value)
            raise duplicate_email_error(email_vo.value)

        user.update(name_vo, email_vo, telephone_vo)
        saved = await self._user_repo.save(user)

        logger.info("Updated user %s", saved.id)
        return UserDTO.from_user(saved)
