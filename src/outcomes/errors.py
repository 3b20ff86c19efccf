"""Exception hierarchy for outcomes.

Only contract violations and explicit extraction raise. Everything thrown
inside a user callable is captured as a ``Failure`` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class OutcomeError(Exception):
    """Base exception for all outcomes errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class NullArgumentError(OutcomeError, TypeError):
    """A required argument was None (programmer error, raised at the call site)."""


class NoValueError(OutcomeError, LookupError):
    """A payload was requested from an outcome that holds none."""


class OutcomeTypeError(OutcomeError, TypeError):
    """The innermost payload of a nested outcome has an unexpected type."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        expected: type | None = None,
        actual: type | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.expected = expected
        self.actual = actual


class ConfigurationError(OutcomeError):
    """Settings validation or resolution failed."""


def walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
