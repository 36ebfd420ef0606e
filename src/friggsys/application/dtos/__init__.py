from friggsys.application.dtos.user_dto import UserDTO

__all__ = ["UserDTO"]
