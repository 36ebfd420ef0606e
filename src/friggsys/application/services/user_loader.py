"""Shared lookup for use cases that act on an existing user."""

import logging
from uuid import UUID

from friggsys.application.exceptions import entity_not_found_error
from friggsys.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


async def get_user_or_raise(
    user_repository: UserRepository,
    user_id: UUID,
    operation: str,
) -> User:
    """Load a user by ID or raise ``EntityNotFoundError`` tagged with ``operation``."""
    user = await user_repository.find_by_id(user_id)
    if user is None:
        logger.warning("User with ID %s does not exist (%s)", user_id, operation)
        raise entity_not_found_error("User", "ID", str(user_id), operation)
    return user
