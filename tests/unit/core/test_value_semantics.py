"""Equality, hashing and string semantics: payload only, never message or cause."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from outcomes import Outcome, empty, failure, of, value
from outcomes.messages import EMPTY_SENTINEL

pytestmark = pytest.mark.unit

TEST_VALUE = "test"

hashable_payloads = st.one_of(
    st.integers(), st.text(), st.floats(allow_nan=False), st.tuples(st.integers())
)


def test_equal_payloads_are_equal() -> None:
    assert of(TEST_VALUE) == of(TEST_VALUE)
    assert of(TEST_VALUE) != of(TEST_VALUE + TEST_VALUE)


def test_outcome_equals_bare_value() -> None:
    assert of(TEST_VALUE) == TEST_VALUE
    assert TEST_VALUE == of(TEST_VALUE)


def test_payloadless_outcomes_are_equal_whatever_their_message() -> None:
    assert failure("a") == failure("b")
    assert failure("a") == empty("c")
    assert of(None) == empty()


def test_payloadless_outcome_never_equals_bare_value() -> None:
    assert empty() != None  # noqa: E711
    assert failure("x") != TEST_VALUE


def test_value_is_not_equal_to_unrelated_object() -> None:
    assert of(TEST_VALUE) != object()
    assert of(1) != empty()


def test_hash_of_value_is_hash_of_payload() -> None:
    assert hash(of(TEST_VALUE)) == hash(TEST_VALUE)


def test_hash_of_payloadless_outcomes_match() -> None:
    assert hash(empty()) == hash(failure("x")) == hash(None)


def test_outcomes_work_as_set_members() -> None:
    bag = {of(1), value(1), empty(), failure("a"), failure("b")}

    assert len(bag) == 2


@given(payload=hashable_payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_equality_and_hash_ignore_message(payload: object) -> None:
    """Property: equality and hashing are defined by the payload alone."""
    a = value(payload)
    b = Outcome.of(payload).map(lambda x: x)

    assert a == b
    assert hash(a) == hash(b)
    assert a == payload


def test_str_is_payload_str() -> None:
    assert str(of(10)) == "10"
    assert str(of(TEST_VALUE)) == TEST_VALUE


def test_str_of_payloadless_is_sentinel() -> None:
    assert str(empty()) == EMPTY_SENTINEL
    assert str(failure("message not shown")) == EMPTY_SENTINEL


def test_repr_is_structured() -> None:
    text = repr(failure("boom", cause=ValueError("bad")))

    assert text.startswith("Failure(")
    assert "boom" in text
    assert "ValueError" in text
    assert repr(of(1)).startswith("Value(payload=1")


def test_variants_are_immutable() -> None:
    outcome = of(1)

    with pytest.raises(AttributeError):
        outcome.payload = 2  # type: ignore[misc]
