"""Paging value types shared by the store, service and API layers.

Page numbers are zero-based. A ``Page`` carries one slice of an ordered
collection together with the total element count, from which the
navigation predicates (has_next, has_previous, is_last) are derived.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    page_number: int = 0
    page_size: int = 10

    def __post_init__(self):
        if self.page_number < 0:
            raise ValueError("Page index must not be less than zero")
        if self.page_size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size

    def first(self) -> PageRequest:
        return PageRequest(0, self.page_size)

    def next(self) -> PageRequest:
        return PageRequest(self.page_number + 1, self.page_size)

    def previous_or_first(self) -> PageRequest:
        if self.page_number == 0:
            return self
        return PageRequest(self.page_number - 1, self.page_size)


@dataclass
class Page(Generic[T]):
    content: list[T] = field(default_factory=list)
    page_number: int = 0
    page_size: int = 10
    total_elements: int = 0

    @classmethod
    def of(cls, content: list[T], request: PageRequest, total_elements: int) -> Page[T]:
        return cls(
            content=list(content),
            page_number=request.page_number,
            page_size=request.page_size,
            total_elements=total_elements,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_size) if self.total_elements else 0

    @property
    def has_previous(self) -> bool:
        return self.page_number > 0

    @property
    def has_next(self) -> bool:
        return self.page_number + 1 < self.total_pages

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def __len__(self) -> int:
        return len(self.content)
