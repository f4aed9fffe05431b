"""Pagination parameter normalization.

Turns a raw, possibly absent or out-of-range (page_number, page_size) request
into a range that is always safe to slice with, given the total item count.
"""

import math
from typing import NamedTuple

from simple_pagination.core.errors import InvalidArgumentError


class NormalizedRange(NamedTuple):
    """Effective page number and size used to slice a source.

    Attributes:
        page_number: Page number (1-indexed, never past the last page).
        page_size: Items per page (at least 1, never above the total count
            unless the total count is 0).
    """

    page_number: int
    page_size: int

    @property
    def offset(self) -> int:
        """Number of items to skip (0 for page 1)."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Maximum number of items to take (same as page_size)."""
        return self.page_size


def validate_request(page_number: int | None, page_size: int | None) -> None:
    """Reject negative page parameters.

    Zero and None are both allowed; they are interpreted by normalize().

    Args:
        page_number: Requested page number, or None.
        page_size: Requested page size, or None.

    Raises:
        InvalidArgumentError: If either value is negative.
    """
    if (page_number is not None and page_number < 0) or (
        page_size is not None and page_size < 0
    ):
        raise InvalidArgumentError(
            "Page number and page size must be greater than or equal to 0. "
            f"Page number: {page_number}, Page size: {page_size}.",
            details=[{"page_number": page_number, "page_size": page_size}],
        )


def normalize(
    page_number: int | None,
    page_size: int | None,
    total_count: int,
) -> NormalizedRange:
    """Normalize a page request against the total item count.

    Rules, in order:
    - A collection with no items is always page 1, with a page size of at
      least 1.
    - A missing page number, a missing page size, or a page size of 0 means
      "everything on one page".
    - A page number past the last page is clamped to the last page.
    - A page size larger than the collection is reduced to the collection size.

    Args:
        page_number: Requested page number (1-indexed), or None.
        page_size: Requested page size, or None.
        total_count: Total number of items in the source.

    Returns:
        NormalizedRange with the effective page number and size.

    Raises:
        InvalidArgumentError: If any argument is negative.
    """
    validate_request(page_number, page_size)
    if total_count < 0:
        raise InvalidArgumentError(
            f"Total count must be greater than or equal to 0. Total count: {total_count}.",
            details=[{"total_count": total_count}],
        )

    if total_count == 0:
        return NormalizedRange(1, max(1, page_size or 1))

    if page_number is None or page_size is None or page_size == 0:
        return NormalizedRange(1, total_count)

    effective_number = max(1, page_number)
    effective_size = max(1, page_size)

    total_pages = (total_count + effective_size - 1) // effective_size
    if effective_number > total_pages:
        effective_number = total_pages

    return NormalizedRange(effective_number, min(effective_size, total_count))
