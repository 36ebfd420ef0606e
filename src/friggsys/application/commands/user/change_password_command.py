import logging
from uuid import UUID

from friggsys.application.dtos import UserDTO
from friggsys.application.exceptions import matching_error
from friggsys.application.ports import PasswordEncoder
from friggsys.application.services import get_user_or_raise
from friggsys.domain.user import Password, UserRepository

logger = logging.getLogger(__name__)


class ChangePasswordCommand:
    """Command to change a password after verifying the current one."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_encoder: PasswordEncoder,
    ):
        self._user_repo = user_repository
        self._password_encoder = password_encoder

    async def execute(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> UserDTO:
        user = await get_user_or_raise(self._user_repo, user_id, "change_password")

        if not self._password_encoder.matches(current_password, user.password):
            logger.warning("Current password mismatch for user %s", user_id)
            raise matching_error("User", "password", "change_password")

        new_hash = self._password_encoder.encrypt(Password.of_raw(new_password))

        user.change_password(new_hash)
        saved = await self._user_repo.save(user)

        logger.info("Changed password for user %s", saved.id)
        return UserDTO.from_user(saved)
