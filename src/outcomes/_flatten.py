"""Flattening of nested outcomes.

``Value(Value(Value(5)))`` reduces to ``Value(5)``; a ``Failure`` or ``Empty``
found at any depth becomes the result, reboxed with its message and cause.
Nesting is finite because outcomes are immutable and built bottom-up.
"""

from __future__ import annotations

from typing import Any, cast

from outcomes.core import Empty, Failure, Outcome, Value
from outcomes.errors import OutcomeTypeError

__all__ = ["deepest_nested"]


def deepest_nested[R](outcome: Outcome[Any], expect: type[R] | None = None) -> Outcome[R]:
    """Return the innermost non-container result of *outcome*.

    When *expect* is given, an innermost payload that is not an instance of it
    raises ``OutcomeTypeError`` instead of being passed on under the wrong type.
    """
    current: Outcome[Any] = outcome
    while isinstance(current, Value) and isinstance(current.payload, Outcome):
        current = current.payload

    if isinstance(current, Value):
        payload = current.payload
        if expect is not None and not isinstance(payload, expect):
            raise OutcomeTypeError(
                f"Nested payload is {type(payload).__qualname__}, "
                f"expected {expect.__qualname__}",
                hint="Map the innermost value to the expected type before flattening.",
                expected=expect,
                actual=type(payload),
            )
        return Value(cast("R", payload), current.message)
    if isinstance(current, Failure):
        return Failure(current.message, cause=current.cause, kind=current.kind)
    return Empty(current.message)
