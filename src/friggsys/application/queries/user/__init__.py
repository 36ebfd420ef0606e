from friggsys.application.queries.user.find_user_by_email_query import (
    FindUserByEmailQuery,
)
from friggsys.application.queries.user.find_user_by_id_query import FindUserByIdQuery
from friggsys.application.queries.user.list_users_query import ListUsersQuery

__all__ = [
    "FindUserByEmailQuery",
    "FindUserByIdQuery",
    "ListUsersQuery",
]
