"""Pagination types shared by repositories and queries."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from friggsys.domain.shared import error_factory

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class PageOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class PageParameters:
    """Requested slice of a collection (``page`` is 0-based)."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    order_by: Optional[str] = None
    direction: PageOrder = PageOrder.ASC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise error_factory.invalid("page", "page cannot be negative")
        if self.size < 1:
            raise error_factory.invalid("size", "size must be at least 1")
        if not isinstance(self.direction, PageOrder):
            try:
                direction = PageOrder(str(self.direction).upper())
            except ValueError:
                raise error_factory.invalid(
                    "direction",
                    f"direction must be one of ASC, DESC, got '{self.direction}'",
                ) from None
            object.__setattr__(self, "direction", direction)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def is_sorted(self) -> bool:
        return bool(self.order_by and self.order_by.strip())


@dataclass(frozen=True)
class DomainPage(Generic[T]):
    """One page of results plus the metadata needed to navigate the rest."""

    data: list[T] = field(default_factory=list)
    data_amount: int = 0
    pages_amount: int = 0
    page_number: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    first_page: bool = True
    last_page: bool = True

    @classmethod
    def of(cls, data: list[T], total: int, parameters: PageParameters) -> DomainPage[T]:
        pages_amount = math.ceil(total / parameters.size) if total else 0
        return cls(
            data=list(data),
            data_amount=total,
            pages_amount=pages_amount,
            page_number=parameters.page,
            page_size=parameters.size,
            first_page=parameters.page == 0,
            last_page=parameters.page >= pages_amount - 1,
        )

    def map(self, fn: Callable[[T], R]) -> DomainPage[R]:
        return replace(self, data=[fn(item) for item in self.data])  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.data)
