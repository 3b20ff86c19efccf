"""Property tests: flat_map obeys the monad laws with ``value`` as unit."""

from __future__ import annotations

from collections.abc import Callable

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from outcomes import Outcome, empty, failure, of, value

pytestmark = pytest.mark.unit


def f(x: int) -> Outcome[int]:
    return of(x * 2)


def g(x: int) -> Outcome[int]:
    return of(x + 2) if x % 3 else empty("multiple of three")


def h(x: int) -> Outcome[int]:
    if x < 0:
        return failure("negative: %d", x)
    return value(x)


functions = st.sampled_from([f, g, h, value])

monads = st.one_of(
    st.integers().map(value),
    st.integers().map(lambda x: value(value(x))),
    st.just(empty()),
    st.text().map(lambda msg: failure(msg or "blank")),
)


@given(x=st.integers(), fn=functions)
@settings(max_examples=100, deadline=None, derandomize=True)
def test_left_identity(x: int, fn: Callable[[int], Outcome[int]]) -> None:
    assert value(x).flat_map(fn) == fn(x)


@given(m=monads)
@settings(max_examples=100, deadline=None, derandomize=True)
def test_right_identity(m: Outcome[int]) -> None:
    assert m.flat_map(value) == m


@given(m=monads, first=functions, second=functions)
@settings(max_examples=100, deadline=None, derandomize=True)
def test_associativity(
    m: Outcome[int],
    first: Callable[[int], Outcome[int]],
    second: Callable[[int], Outcome[int]],
) -> None:
    left = m.flat_map(first).flat_map(second)
    right = m.flat_map(lambda x: first(x).flat_map(second))

    assert left == right


def test_variant_is_preserved_by_laws() -> None:
    assert failure("a").flat_map(value).is_failure()
    assert empty().flat_map(value).is_empty()
    assert value(-1).flat_map(h).is_failure()
