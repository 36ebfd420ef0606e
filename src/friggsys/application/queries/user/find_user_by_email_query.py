import logging

from friggsys.application.dtos import UserDTO
from friggsys.application.exceptions import entity_not_found_error
from friggsys.domain.user import Email, UserRepository

logger = logging.getLogger(__name__)


class FindUserByEmailQuery:
    """Query to retrieve a user by email address."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, email: str) -> UserDTO:
        email_vo = Email.of(email)

        user = await self._user_repo.find_by_email(email_vo)
        if user is None:
            logger.warning("User with email %s does not exist", email)
            raise entity_not_found_error("User", "Email", email, "find_by_email")

        return UserDTO.from_user(user)
