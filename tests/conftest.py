"""Shared fixtures for pagination tests."""

from collections.abc import Sequence

import pytest

from simple_pagination.sources.base import DeferredQuery

# Five-item collection used by the reference scenarios
FIVE_ITEMS = ["Item1", "Item2", "Item3", "Item4", "Item5"]


class RecordingQuery(DeferredQuery[str]):
    """In-memory DeferredQuery that records every round-trip.

    Attributes:
        calls: ("count",) and ("fetch_range", skip, take) tuples, in order.
    """

    def __init__(self, records: Sequence[str]) -> None:
        self._records = list(records)
        self.calls: list[tuple] = []

    async def count(self) -> int:
        self.calls.append(("count",))
        return len(self._records)

    async def fetch_range(self, skip: int, take: int | None) -> Sequence[str]:
        self.calls.append(("fetch_range", skip, take))
        end = None if take is None else skip + take
        return self._records[skip:end]


@pytest.fixture
def five_items() -> list[str]:
    """Fresh copy of the five-item collection."""
    return list(FIVE_ITEMS)


@pytest.fixture
def five_item_query() -> RecordingQuery:
    """Deferred query over the five-item collection."""
    return RecordingQuery(FIVE_ITEMS)


@pytest.fixture
def empty_query() -> RecordingQuery:
    """Deferred query matching no records."""
    return RecordingQuery([])
