from uuid import UUID

from friggsys.application.dtos import UserDTO
from friggsys.application.services import get_user_or_raise
from friggsys.domain.user import UserRepository


class FindUserByIdQuery:
    """Query to retrieve a user by ID."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID) -> UserDTO:
        user = await get_user_or_raise(self._user_repo, user_id, "find_by_id")
        return UserDTO.from_user(user)
