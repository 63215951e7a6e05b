# tests/core/stream/test_generators.py
"""Fonte infinita `fibonacci` e o limitador `take`."""

import pytest

from stream_dataflow.core.stream import (
    StreamScope,
    compose_pipeline,
    fibonacci,
    filter_op,
    for_each,
    is_even,
    map_op,
    successor,
    take,
)


def test_take_cuts_an_unbounded_source():
    assert list(take(fibonacci(), 8)) == [0, 1, 1, 2, 3, 5, 8, 13]


def test_take_zero_yields_nothing_and_negative_is_an_error():
    assert list(take(fibonacci(), 0)) == []
    with pytest.raises(ValueError):
        take(fibonacci(), -3)


def test_take_on_a_short_finite_stream_stops_at_its_end():
    assert list(take(iter([1, 2]), 10)) == [1, 2]


def test_unbounded_source_goes_through_regular_operators():
    evens_plus_one = compose_pipeline(fibonacci(), filter_op(is_even), map_op(successor))

    assert list(take(evens_plus_one, 4)) == [1, 3, 9, 35]


def test_consumer_cancel_ends_the_unbounded_source():
    scope = StreamScope()
    seen = []

    def stop_after_five(value):
        seen.append(value)
        if len(seen) == 5:
            scope.cancel()

    assert for_each(fibonacci(scope), stop_after_five) == 5
    assert seen == [0, 1, 1, 2, 3]
    assert scope.closed_stages == ["fibonacci"]
    assert scope.truncated_by == ["fibonacci"]


def test_expired_deadline_before_first_pull_yields_nothing():
    scope = StreamScope(timeout=0, clock=lambda: 7.0)

    assert list(fibonacci(scope)) == []
    assert scope.truncated
