import logging

from friggsys.application.dtos import UserDTO
from friggsys.application.exceptions import duplicate_email_error
from friggsys.application.ports import PasswordEncoder
from friggsys.domain.user import Email, Name, Password, Telephone, User, UserRepository

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to register a new user."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_encoder: PasswordEncoder,
    ):
        self._user_repo = user_repository
        self._password_encoder = password_encoder

    async def execute(
        self,
        name: str,
        email: str,
        telephone: str,
        password: str,
    ) -> UserDTO:
        name_vo = Name.of(name)
        email_vo = Email.of(email)
        telephone_vo = Telephone.of(telephone)

        # Uniqueness is checked before the password is validated or hashed.
        if await self._user_repo.exists_by_email(email_vo):
            logger.warning("User with email %s already exists", email_vo.value)
            raise duplicate_email_error(email_vo.value)

        raw_password = Password.of_raw(password)
        password_hash = self._password_encoder.encrypt(raw_password)

        user = User.create(name_vo, email_vo, telephone_vo, password_hash)
        saved = await self._user_repo.save(user)

        logger.info("Created user %s", saved.id)
        return UserDTO.from_user(saved)
