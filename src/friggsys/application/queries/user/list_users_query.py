"""Query to list users one page at a time."""

from dataclasses import replace
from typing import Optional

from friggsys.application.dtos import UserDTO
from friggsys.domain.shared.pagination import (
    MAX_PAGE_SIZE,
    DomainPage,
    PageParameters,
)
from friggsys.domain.user import UserRepository


class ListUsersQuery:
    """List users with paging and optional ordering.

    Requested page sizes above ``max_page_size`` are clamped to it.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self._user_repo = user_repository
        self._max_page_size = max_page_size

    async def execute(
        self,
        parameters: Optional[PageParameters] = None,
    ) -> DomainPage[UserDTO]:
        parameters = parameters or PageParameters()
        if parameters.size > self._max_page_size:
            parameters = replace(parameters, size=self._max_page_size)

        page = await self._user_repo.find_all(parameters)
        return page.map(UserDTO.from_user)
