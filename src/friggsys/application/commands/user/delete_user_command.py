import logging
from uuid import UUID

from friggsys.application.exceptions import entity_not_found_error
from friggsys.domain.user import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to delete a user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID) -> None:
        if not await self._user_repo.exists_by_id(user_id):
            logger.warning("User with ID %s does not exist (delete)", user_id)
            raise entity_not_found_error("User", "ID", str(user_id), "delete")

        await self._user_repo.delete(user_id)
        logger.info("Deleted user %s", user_id)
