"""SQLAlchemy implementation of the persistence port.

Provides:
- Base: Declarative base for all models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from friggsys.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from friggsys.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
