"""In-memory source strategies.

select_source() picks a strategy by what the object can do, not by its
concrete type:

- Sequence (list, tuple, range, str, ...): O(1) count, direct slicing.
- Sized iterable (set, dict views, ...): O(1) count, one forward pass that
  stops at the end of the window.
- Any other iterable (generators, iterators): materialized once to learn
  the count, then sliced.
"""

from collections.abc import Iterable, Sequence, Sized
from itertools import islice
from typing import Any, TypeVar

from simple_pagination.core.errors import InvalidArgumentError
from simple_pagination.sources.base import InMemorySource

T = TypeVar("T")


class RandomAccessSource(InMemorySource[T]):
    """Source with a known length and index access."""

    kind = "random_access"

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items

    def count(self) -> int:
        return len(self._items)

    def take(self, skip: int, take: int) -> list[T]:
        return list(self._items[skip : skip + take])

    def take_all(self) -> list[T]:
        return list(self._items)


class SizedIterableSource(InMemorySource[T]):
    """Source with a known length but only forward iteration."""

    kind = "sized_iterable"

    def __init__(self, items: Iterable[T]) -> None:
        self._items = items

    def count(self) -> int:
        return len(self._items)  # type: ignore[arg-type]

    def take(self, skip: int, take: int) -> list[T]:
        # islice stops pulling from the iterator once skip + take is reached
        return list(islice(self._items, skip, skip + take))

    def take_all(self) -> list[T]:
        return list(self._items)


class StreamingSource(InMemorySource[T]):
    """Forward-only source of unknown length.

    The iterable is consumed exactly once, on the first call, and buffered;
    later calls index into the buffer.
    """

    kind = "streaming"

    def __init__(self, items: Iterable[T]) -> None:
        self._items = items
        self._buffer: list[T] | None = None

    def _materialize(self) -> list[T]:
        if self._buffer is None:
            self._buffer = list(self._items)
        return self._buffer

    def count(self) -> int:
        return len(self._materialize())

    def take(self, skip: int, take: int) -> list[T]:
        return self._materialize()[skip : skip + take]

    def take_all(self) -> list[T]:
        return list(self._materialize())


def select_source(source: Any) -> InMemorySource[Any]:
    """Wrap a raw in-memory object in the matching source strategy.

    Args:
        source: Sequence, sized iterable, or plain iterable.

    Returns:
        InMemorySource strategy for the object. Objects that are already an
        InMemorySource are returned as-is.

    Raises:
        InvalidArgumentError: If source is None or not iterable.
    """
    if source is None:
        raise InvalidArgumentError("Source must not be None.")
    if isinstance(source, InMemorySource):
        return source
    if isinstance(source, Sequence):
        return RandomAccessSource(source)
    if isinstance(source, Sized) and isinstance(source, Iterable):
        return SizedIterableSource(source)
    if isinstance(source, Iterable):
        return StreamingSource(source)
    raise InvalidArgumentError(
        f"Source of type '{type(source).__name__}' is not iterable.",
        details=[{"source_type": type(source).__name__}],
    )
