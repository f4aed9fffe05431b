"""Pagination entry points.

paginate() slices in-memory sources synchronously. paginate_async() drives a
DeferredQuery through two sequential round-trips: count, then fetch of the
normalized range. Both validate the request before touching the source.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Iterable, Sequence
from typing import Any, TypeVar

from simple_pagination.core.errors import InvalidArgumentError
from simple_pagination.core.normalization import normalize, validate_request
from simple_pagination.core.page import Page
from simple_pagination.sources.base import DeferredQuery, InMemorySource
from simple_pagination.sources.memory import select_source

T = TypeVar("T")

logger = logging.getLogger(__name__)


def paginate(
    source: Iterable[T] | InMemorySource[T],
    page_number: int | None = None,
    page_size: int | None = None,
) -> Page[T]:
    """Return one page of an in-memory source.

    Args:
        source: Sequence, sized iterable, plain iterable, or an explicit
            InMemorySource strategy.
        page_number: Requested page number (1-indexed). None returns every
            item on one page.
        page_size: Requested page size. None or 0 returns every item on one
            page.

    Returns:
        Page with the normalized range and its items.

    Raises:
        InvalidArgumentError: If source is None or not iterable, or if a
            page parameter is negative.
    """
    strategy = select_source(source)
    validate_request(page_number, page_size)

    count = strategy.count()
    page_range = normalize(page_number, page_size, count)
    logger.debug(
        "Paginating %s source: total=%d page=%d size=%d",
        strategy.kind,
        count,
        page_range.page_number,
        page_range.page_size,
    )

    if count == 0:
        return Page.empty(page_range.page_size)

    if page_range.page_size >= count:
        items = strategy.take_all()
    else:
        items = strategy.take(page_range.offset, page_range.limit)

    return Page(
        items=tuple(items),
        total_count=count,
        page_number=page_range.page_number,
        page_size=page_range.page_size,
    )


async def _abort(task: asyncio.Future[Any]) -> None:
    """Cancel a pending round-trip and wait until it has finished unwinding.

    Whatever the round-trip raises while unwinding is retrieved and dropped;
    the caller reports the cancellation instead.
    """
    task.cancel()
    await asyncio.gather(task, return_exceptions=True)


async def _await_cancellable(
    operation: Awaitable[T],
    cancel_event: asyncio.Event | None,
    step: str,
) -> T:
    """Await one suspension point, aborting if cancel_event gets set.

    Args:
        operation: Coroutine for the count or fetch round-trip.
        cancel_event: Optional caller-owned cancel signal.
        step: Name of the round-trip, for logging.

    Returns:
        Result of the operation.

    Raises:
        asyncio.CancelledError: If cancel_event is set before or while the
            operation is pending.
    """
    if cancel_event is None:
        return await operation

    if cancel_event.is_set():
        if inspect.iscoroutine(operation):
            operation.close()
        logger.debug("Pagination cancelled at %s", step)
        raise asyncio.CancelledError(f"Pagination cancelled before {step}")

    task = asyncio.ensure_future(operation)
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        waiter.cancel()
        await _abort(task)
        raise
    waiter.cancel()

    aborted = not task.done()
    if aborted:
        await _abort(task)
    if aborted or task.cancelled():
        logger.debug("Pagination cancelled at %s", step)
        raise asyncio.CancelledError(f"Pagination cancelled during {step}")
    return task.result()


async def paginate_async(
    query: DeferredQuery[T],
    page_number: int | None = None,
    page_size: int | None = None,
    *,
    cancel_event: asyncio.Event | None = None,
) -> Page[T]:
    """Return one page of a deferred query.

    The count is awaited first; the range fetch is only issued once the count
    is known, since the normalized range depends on it. No fetch is issued
    for an empty result set.

    Args:
        query: Deferred query to paginate.
        page_number: Requested page number (1-indexed). None returns every
            record on one page.
        page_size: Requested page size. None or 0 returns every record on
            one page.
        cancel_event: Optional cancel signal. Setting it aborts whichever
            round-trip is pending.

    Returns:
        Page with the normalized range and its records.

    Raises:
        InvalidArgumentError: If a page parameter is negative, or query is
            not a DeferredQuery.
        asyncio.CancelledError: If the call is cancelled.
    """
    validate_request(page_number, page_size)
    if not isinstance(query, DeferredQuery):
        raise InvalidArgumentError(
            f"Query of type '{type(query).__name__}' is not a DeferredQuery.",
            details=[{"query_type": type(query).__name__}],
        )

    count = await _await_cancellable(query.count(), cancel_event, "count")
    page_range = normalize(page_number, page_size, count)
    logger.debug(
        "Deferred query counted: total=%d page=%d size=%d",
        count,
        page_range.page_number,
        page_range.page_size,
    )

    if count == 0:
        return Page.empty(page_range.page_size)

    if page_range.page_size >= count:
        fetch = query.fetch_range(0, None)
    else:
        fetch = query.fetch_range(page_range.offset, page_range.limit)
    items: Sequence[Any] = await _await_cancellable(fetch, cancel_event, "fetch")

    logger.debug("Deferred query fetched %d items", len(items))
    return Page(
        items=tuple(items),
        total_count=count,
        page_number=page_range.page_number,
        page_size=page_range.page_size,
    )
