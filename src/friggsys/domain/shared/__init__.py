"""Shared kernel: error taxonomy, validation chains, pagination, time."""

from friggsys.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    InvalidStateError,
    ValidationError,
)
from friggsys.domain.shared.pagination import DomainPage, PageOrder, PageParameters

__all__ = [
    "DomainException",
    "DomainPage",
    "ErrorCode",
    "InvalidStateError",
    "PageOrder",
    "PageParameters",
    "ValidationError",
]
