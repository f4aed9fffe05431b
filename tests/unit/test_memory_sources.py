"""Tests for in-memory source strategies."""

import pytest

from simple_pagination.core.errors import InvalidArgumentError
from simple_pagination.sources.memory import (
    RandomAccessSource,
    SizedIterableSource,
    StreamingSource,
    select_source,
)


class TestSelectSource:
    """Tests for capability-based strategy selection."""

    @pytest.mark.parametrize("source", [[1, 2], (1, 2), range(3), "abc"])
    def test_sequences_use_random_access(self, source):
        assert isinstance(select_source(source), RandomAccessSource)

    @pytest.mark.parametrize("source", [{1, 2}, frozenset(), {"a": 1}.keys()])
    def test_sized_iterables_use_forward_pass(self, source):
        assert isinstance(select_source(source), SizedIterableSource)

    def test_generators_are_streamed(self):
        assert isinstance(select_source(x for x in [1]), StreamingSource)

    def test_existing_strategy_passes_through(self):
        strategy = RandomAccessSource([1])
        assert select_source(strategy) is strategy

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            select_source(None)

    def test_non_iterable_rejected(self):
        with pytest.raises(InvalidArgumentError):
            select_source(object())


class TestRandomAccessSource:
    """Tests for RandomAccessSource."""

    def test_take_clips_to_length(self):
        source = RandomAccessSource([1, 2, 3])
        assert source.take(2, 5) == [3]
        assert source.take(10, 5) == []

    def test_take_all_copies(self):
        items = [1, 2, 3]
        copied = RandomAccessSource(items).take_all()
        assert copied == items
        assert copied is not items


class TestSizedIterableSource:
    """Tests for SizedIterableSource."""

    def test_count_uses_len(self):
        assert SizedIterableSource({1, 2, 3}).count() == 3

    def test_take_stops_at_end_of_window(self):
        """Iteration stops once the window is filled."""
        visited = []

        class Tracking:
            def __len__(self):
                return 100

            def __iter__(self):
                for i in range(100):
                    visited.append(i)
                    yield i

        assert SizedIterableSource(Tracking()).take(2, 3) == [2, 3, 4]
        assert visited == [0, 1, 2, 3, 4]


class TestStreamingSource:
    """Tests for StreamingSource."""

    def test_iterable_consumed_once(self):
        """count() and take() share a single materialization."""
        pulls = []

        def generate():
            for i in range(5):
                pulls.append(i)
                yield i

        source = StreamingSource(generate())
        assert source.count() == 5
        assert source.take(1, 2) == [1, 2]
        assert source.take_all() == [0, 1, 2, 3, 4]
        assert pulls == [0, 1, 2, 3, 4]
