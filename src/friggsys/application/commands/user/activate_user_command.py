from uuid import UUID

from friggsys.application.dtos import UserDTO
from friggsys.application.services import get_user_or_raise
from friggsys.domain.user import UserRepository


class ActivateUserCommand:
    """Command to activate a user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID) -> UserDTO:
        user = await get_user_or_raise(self._user_repo, user_id, "activate")

        user.activate()

        saved = await self._user_repo.save(user)
        return UserDTO.from_user(saved)
