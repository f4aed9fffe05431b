"""Page result value object."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items plus its position within the whole collection.

    Built only by the paginator, which has already normalized page_number and
    page_size, so no validation happens here.

    Attributes:
        items: The items on this page, in source order.
        total_count: Total number of items across all pages.
        page_number: Current page number (1-indexed).
        page_size: Normalized number of items per page.
    """

    items: tuple[T, ...]
    total_count: int
    page_number: int
    page_size: int

    @classmethod
    def empty(cls, page_size: int = 1) -> "Page[T]":
        """Build the page returned for a collection with no items."""
        return cls(items=(), total_count=0, page_number=1, page_size=page_size)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every item.

        Returns:
            ceil(total_count / page_size), or 0 when page_size is 0.
        """
        if self.page_size == 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)
