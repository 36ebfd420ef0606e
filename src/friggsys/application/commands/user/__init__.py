from friggsys.application.commands.user.activate_user_command import (
    ActivateUserCommand,
)
from friggsys.application.commands.user.block_user_command import BlockUserCommand
from friggsys.application.commands.user.change_password_command import (
    ChangePasswordCommand,
)
from friggsys.application.commands.user.create_user_command import CreateUserCommand
from friggsys.application.commands.user.deactivate_user_command import (
    DeactivateUserCommand,
)
from friggsys.application.commands.user.delete_user_command import DeleteUserCommand
from friggsys.application.commands.user.update_user_command import UpdateUserCommand

__all__ = [
    "ActivateUserCommand",
    "BlockUserCommand",
    "ChangePasswordCommand",
    "CreateUserCommand",
    "DeactivateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
