"""Value objects for the user domain."""

from friggsys.domain.user.value_objects.email import Email
from friggsys.domain.user.value_objects.name import Name
from friggsys.domain.user.value_objects.password import Password
from friggsys.domain.user.value_objects.telephone import Telephone
from friggsys.domain.user.value_objects.user_status import UserStatus

__all__ = [
    "Email",
    "Name",
    "Password",
    "Telephone",
    "UserStatus",
]
