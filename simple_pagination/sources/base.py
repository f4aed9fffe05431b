"""Abstract base classes for paginated sources.

Two kinds of source exist:
- InMemorySource: data already reachable in this process. Counting and
  slicing are synchronous.
- DeferredQuery: a request not yet executed. Counting and fetching are
  separate awaitable round-trips to an external engine, which performs the
  skip/take itself.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class InMemorySource(ABC, Generic[T]):
    """Strategy wrapping an in-memory sequence or iterable.

    Each concrete strategy matches one source capability (random access,
    sized iteration, plain iteration) and slices in the cheapest way that
    capability allows.
    """

    #: Short name used in log events.
    kind: str = "memory"

    @abstractmethod
    def count(self) -> int:
        """Return the total number of items in the source."""
        ...

    @abstractmethod
    def take(self, skip: int, take: int) -> list[T]:
        """Return up to `take` items starting at offset `skip`.

        The window is clipped to the source length.

        Args:
            skip: Number of leading items to skip.
            take: Maximum number of items to return.

        Returns:
            Items in source order.
        """
        ...

    @abstractmethod
    def take_all(self) -> list[T]:
        """Return every item, in source order, in a single pass."""
        ...


class DeferredQuery(ABC, Generic[T]):
    """A query executed by an external engine.

    Implementations bind the query predicate at construction time; the
    paginator only ever asks for the count of matching records and for a
    sub-range of them. Neither call may modify the underlying data.
    """

    @abstractmethod
    async def count(self) -> int:
        """Count the records matched by the query.

        Returns:
            Total number of matching records.
        """
        ...

    @abstractmethod
    async def fetch_range(self, skip: int, take: int | None) -> Sequence[T]:
        """Fetch a contiguous range of the matching records.

        Args:
            skip: Number of records to skip.
            take: Maximum number of records to return. None fetches every
                record after `skip`.

        Returns:
            Records in query order.
        """
        ...


class CallableQuery(DeferredQuery[T]):
    """DeferredQuery built from two coroutine functions.

    Useful for engines that are not SQL databases, such as a remote HTTP API
    exposing a count endpoint and an offset/limit listing.

    Usage:
        query = CallableQuery(
            count_fn=client.count_orders,
            fetch_fn=lambda skip, take: client.list_orders(offset=skip, limit=take),
        )
        page = await paginate_async(query, page_number=2, page_size=50)
    """

    def __init__(
        self,
        count_fn: Callable[[], Awaitable[int]],
        fetch_fn: Callable[[int, int | None], Awaitable[Sequence[T]]],
    ) -> None:
        self._count_fn = count_fn
        self._fetch_fn = fetch_fn

    async def count(self) -> int:
        return await self._count_fn()

    async def fetch_range(self, skip: int, take: int | None) -> Sequence[T]:
        return await self._fetch_fn(skip, take)
