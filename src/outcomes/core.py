"""The outcome container: a value, an empty result or a failure, with provenance.

An ``Outcome`` is the typed alternative to raising or returning ``None``. Every
instance carries a human-readable status message and, for failures captured
from an exception, the original cause. Combinators never mutate the receiver
and never raise for problems inside user callables; those become ``Failure``
values. Only contract violations (``None`` where a callable or message is
required) and ``or_else_raise`` raise.

Example:
    outcome = (
        Outcome.attempt(lambda: load_config(path))
        .map(lambda cfg: cfg["port"])
        .test(lambda port: 0 < port < 65536, "port out of range")
        .log_failure(logger=log)
    )
    port = outcome.or_else(8080)

Variants support structural pattern matching::

    match outcome:
        case Value(port):
            ...
        case Empty():
            ...
        case Failure(kind=FailureKind.NOT_FOUND):
            ...
        case Failure(message=msg, cause=exc):
            ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import dataclasses
from enum import StrEnum
import logging
from typing import TYPE_CHECKING, Any, ClassVar, cast, final

from outcomes import messages
from outcomes.config import Settings, coerce_level, resolve_settings
from outcomes.errors import ConfigurationError, NoValueError, NullArgumentError
from outcomes.formatting import format_message
from outcomes.reporting import (
    build_report,
    compose_log_line,
    emit,
    log as library_log,
    resolve_logger,
    trace,
)

if TYPE_CHECKING:
    from outcomes.reporting import OutcomeLogger, OutcomeReport

__all__ = [
    "Empty",
    "Failure",
    "FailureKind",
    "Outcome",
    "OutcomeVariant",
    "Value",
    "Variant",
    "attempt",
    "check",
    "empty",
    "failure",
    "not_found",
    "of",
    "unauthorized",
    "unprocessable",
    "value",
]


class Variant(StrEnum):
    """The three tagged states of an outcome."""

    VALUE = "Value"
    EMPTY = "Empty"
    FAILURE = "Failure"


class FailureKind(StrEnum):
    """Why a ``Failure`` happened.

    ``FAILED`` is the generic kind of an explicit ``Outcome.failure()``. Captured
    exceptions are ``ERROR_OCCURRED`` and rejected predicates ``UNPROCESSABLE``.
    """

    FAILED = "failed"
    UNPROCESSABLE = "unprocessable"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    ERROR_OCCURRED = "error_occurred"

    @property
    def default_message(self) -> str:
        return _KIND_MESSAGES[self]


_KIND_MESSAGES: dict[FailureKind, str] = {
    FailureKind.FAILED: messages.FAILURE_RESULT,
    FailureKind.UNPROCESSABLE: messages.UNPROCESSABLE_RESULT,
    FailureKind.UNAUTHORIZED: messages.UNAUTHORIZED_RESULT,
    FailureKind.NOT_FOUND: messages.NOT_FOUND_RESULT,
    FailureKind.ERROR_OCCURRED: messages.ERROR_OCCURRED_RESULT,
}


def _require[A](arg: A | None, name: str) -> A:
    if arg is None:
        raise NullArgumentError(messages.param_required(name))
    return arg


def _captured(exc: Exception) -> Failure[Any]:
    return Failure(
        messages.exception_was_thrown(exc), cause=exc, kind=FailureKind.ERROR_OCCURRED
    )


def _of_kind(
    kind: FailureKind, message: str | None, args: tuple[Any, ...]
) -> Failure[Any]:
    if message is None:
        return Failure(kind.default_message, kind=kind)
    return Failure(format_message(message, *args), kind=kind)


def _lift[R](result: R | Outcome[R]) -> Outcome[R]:
    """Return *result* itself when it is already an outcome, else wrap it."""
    if isinstance(result, Outcome):
        return cast("Outcome[R]", result)
    return Outcome.of(result)


class Outcome[T]:
    """Base of the ``Value``/``Empty``/``Failure`` variants.

    Equality and hashing look at the payload only: two outcomes without a
    payload are equal whatever their message, and ``Outcome.of(5) == 5``.
    """

    __slots__ = ()

    variant: ClassVar[Variant]

    def __new__(cls, *args: Any, **kwargs: Any) -> Outcome[T]:  # noqa: ARG004
        if cls is Outcome:
            raise TypeError(
                "Outcome cannot be instantiated directly; use a factory such as Outcome.of()"
            )
        return super().__new__(cls)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of[V](value: V | None) -> Outcome[V]:
        """``Value(value)``, or ``Empty`` when *value* is None."""
        if value is None:
            return Empty()
        return Value(value)

    @staticmethod
    def attempt[V](supplier: Callable[[], V | Outcome[V] | None]) -> Outcome[V]:
        """Call *supplier* and capture its result.

        A returned outcome is passed through as-is (one level of flattening),
        ``None`` becomes ``Empty`` and a raised exception becomes a ``Failure``
        carrying it as cause.
        """
        _require(supplier, "supplier")
        try:
            result = supplier()
        except Exception as exc:
            return _captured(exc)
        return _lift(result)

    @staticmethod
    def check[V](predicate: Callable[[V | None], bool], value: V | None) -> Outcome[V]:
        """``Outcome.of(value)`` if *predicate* accepts *value*, else a ``Failure``."""
        _require(predicate, "predicate")
        try:
            passed = predicate(value)
        except Exception as exc:
            return _captured(exc)
        if passed:
            return Outcome.of(value)
        return Failure(messages.PREDICATE_FAILED, kind=FailureKind.UNPROCESSABLE)

    @staticmethod
    def value[V](value: V) -> Outcome[V]:
        """Always a ``Value``; None is a contract violation."""
        return Value(_require(value, "value"))

    @staticmethod
    def empty[V](message: str | None = None, *args: Any) -> Outcome[V]:
        """Always ``Empty``, with the default message unless one is given."""
        if message is None:
            return Empty()
        return Empty(format_message(message, *args))

    @staticmethod
    def successful[V]() -> Outcome[V]:
        """A generic, payload-less success: ``Empty`` with "Nothing to report"."""
        return Empty(messages.NOTHING_TO_REPORT)

    @staticmethod
    def failure[V](
        message: str,
        *args: Any,
        cause: BaseException | None = None,
        kind: FailureKind | None = None,
    ) -> Outcome[V]:
        """Always a ``Failure`` with *message* formatted against *args*.

        Without an explicit *kind*, a failure with a *cause* is
        ``ERROR_OCCURRED`` and one without is ``FAILED``.
        """
        _require(message, "message")
        if kind is None:
            kind = FailureKind.FAILED if cause is None else FailureKind.ERROR_OCCURRED
        return Failure(format_message(message, *args), cause=cause, kind=kind)

    @staticmethod
    def not_found[V](message: str | None = None, *args: Any) -> Outcome[V]:
        """A ``NOT_FOUND`` failure."""
        return _of_kind(FailureKind.NOT_FOUND, message, args)

    @staticmethod
    def unprocessable[V](message: str | None = None, *args: Any) -> Outcome[V]:
        """An ``UNPROCESSABLE`` failure."""
        return _of_kind(FailureKind.UNPROCESSABLE, message, args)

    @staticmethod
    def unauthorized[V](message: str | None = None, *args: Any) -> Outcome[V]:
        """An ``UNAUTHORIZED`` failure."""
        return _of_kind(FailureKind.UNAUTHORIZED, message, args)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def payload(self) -> T | None:
        return None

    @property
    def cause(self) -> BaseException | None:
        return None

    @property
    def kind(self) -> FailureKind | None:
        return None

    def get(self) -> T | None:
        """Return the payload, or None when there is none."""
        return self.payload

    def has_value(self) -> bool:
        return self.variant is Variant.VALUE

    def is_empty(self) -> bool:
        return self.variant is Variant.EMPTY

    def is_failure(self) -> bool:
        return self.variant is Variant.FAILURE

    def is_successful(self) -> bool:
        """True for ``Value`` and ``Empty``: success does not imply a payload."""
        return not self.is_failure()

    def is_unsuccessful(self) -> bool:
        return self.is_failure()

    def _contents(self) -> T:
        return cast("T", self.payload)

    def _rebox[R](self) -> Outcome[R]:
        return cast("Outcome[R]", dataclasses.replace(cast("Any", self)))

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def map[R](self, mapper: Callable[[T], R | Outcome[R] | None]) -> Outcome[R]:
        """Apply *mapper* to the payload of a ``Value``.

        A mapper that returns an outcome has it returned directly rather than
        wrapped. Other variants pass through with their message and cause.
        """
        _require(mapper, "mapper")
        if not self.has_value():
            trace(self, messages.MAP_NOT_APPLIED)
            return self._rebox()
        try:
            result = mapper(self._contents())
        except Exception as exc:
            return _captured(exc)
        trace(self, messages.MAP_APPLIED)
        return _lift(result)

    def flat_map[R](self, mapper: Callable[[T], Outcome[R]]) -> Outcome[R]:
        """Monadic bind over the innermost payload of nested outcomes."""
        _require(mapper, "mapper")
        deepest = self.flatten()
        if not deepest.has_value():
            trace(deepest, messages.FLAT_MAP_NOT_APPLIED)
            return cast("Outcome[R]", deepest)
        try:
            result = mapper(deepest._contents())
        except Exception as exc:
            return _captured(exc)
        trace(deepest, messages.FLAT_MAP_APPLIED)
        return _lift(result)

    def test(
        self,
        predicate: Callable[[T], bool],
        failure_message: str | None = None,
        *args: Any,
        on_invalid: FailureKind = FailureKind.UNPROCESSABLE,
    ) -> Outcome[T]:
        """Keep a ``Value`` only if *predicate* accepts its payload.

        Nested outcomes are tested on their innermost payload. A rejection
        yields a ``Failure`` of kind *on_invalid* with *failure_message*, or by
        default a message naming the predicate.
        """
        _require(predicate, "predicate")
        if not self.has_value():
            return self
        target: Outcome[Any] = self
        if isinstance(self.payload, Outcome):
            target = self.flatten()
            if not target.has_value():
                return cast("Outcome[T]", target)
        try:
            passed = bool(predicate(target._contents()))
        except Exception as exc:
            trace(self, messages.TEST_CALL_FAILED)
            return _captured(exc)
        trace(self, messages.test_called(passed))
        if passed:
            return self
        if failure_message is None:
            return Failure(messages.failed_predicate(predicate), kind=on_invalid)
        return Failure(format_message(failure_message, *args), kind=on_invalid)

    def or_(self, other: Outcome[T]) -> Outcome[T]:
        """Return this outcome if it holds a value, else *other*."""
        _require(other, "other")
        if self.has_value():
            return self
        return other

    def or_get(self, supplier: Callable[[], Outcome[T] | T | None]) -> Outcome[T]:
        """Lazy ``or_``: *supplier* runs only when there is no value."""
        _require(supplier, "supplier")
        if self.has_value():
            return self
        return Outcome.attempt(supplier)

    def or_else(self, default: T) -> T:
        if self.has_value():
            return self._contents()
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        _require(supplier, "supplier")
        if self.has_value():
            return self._contents()
        return supplier()

    def or_else_raise(
        self,
        exception: BaseException | Callable[[], BaseException] | None = None,
    ) -> T:
        """Return the payload or raise.

        Without *exception*, raises ``NoValueError`` chained to the captured
        cause (if any) with this outcome's message as hint.
        """
        if self.has_value():
            return self._contents()
        if exception is None:
            raise NoValueError(messages.NO_VALUE_PRESENT, hint=self.message) from self.cause
        if isinstance(exception, BaseException):
            raise exception
        raise exception()

    def then_accept(self, consumer: Callable[[T], object]) -> Outcome[T]:
        """Call *consumer* with the payload of a ``Value``; returns self."""
        _require(consumer, "consumer")
        if not self.has_value():
            return self
        try:
            consumer(self._contents())
        except Exception as exc:
            trace(self, messages.ACCEPT_FAILED)
            return _captured(exc)
        trace(self, messages.ACCEPT_SUCCESSFUL)
        return self

    def then_run(self, action: Callable[[], object]) -> Outcome[T]:
        """Call *action* unless this is a ``Failure``; returns self."""
        _require(action, "action")
        if self.is_failure():
            trace(self, messages.RUN_NOT_CALLED)
            return self
        try:
            action()
        except Exception as exc:
            trace(self, messages.RUN_FAILED)
            return _captured(exc)
        trace(self, messages.RUN_SUCCESSFUL)
        return self

    def stream(self) -> tuple[T, ...]:
        """The payload as a one-element tuple, or an empty tuple."""
        if self.has_value():
            trace(self, messages.TRANSFORMED_INTO_STREAM)
            return (self._contents(),)
        trace(self, messages.TRANSFORMED_INTO_EMPTY_STREAM)
        return ()

    def __iter__(self) -> Iterator[T]:
        if self.has_value():
            yield self._contents()

    def flatten[R](self, expect: type[R] | None = None) -> Outcome[R]:
        """Unwrap ``Value(Value(...))`` chains down to the innermost result."""
        from outcomes._flatten import deepest_nested

        return deepest_nested(self, expect)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(
        self,
        level: int | str | None = None,
        message: str | None = None,
        *args: Any,
        logger: OutcomeLogger | None = None,
    ) -> Outcome[T]:
        """Log this outcome and return it unchanged.

        The line reads ``"<context> | <variant>, value: <payload>, message:
        <message>"``; *message* (formatted with *args*) replaces the default
        context. The cause, if any, is attached as ``exc_info`` and a structured
        report as ``extra["outcome"]``.

        Invalid settings in the environment fall back to the defaults with a
        warning on the library logger. An invalid explicit *level* raises
        ``ConfigurationError``.
        """
        try:
            settings = resolve_settings()
        except ConfigurationError:
            library_log.warning(
                "Invalid outcomes settings in the environment, using defaults",
                exc_info=True,
            )
            settings = Settings()
        numeric_level = settings.log_level if level is None else coerce_level(level)
        context = (
            settings.log_context
            if message is None
            else format_message(message, *args)
        )
        line = compose_log_line(self.variant, str(self), self.message, context)
        emit(
            resolve_logger(logger),
            numeric_level,
            line,
            cause=self.cause,
            report=self.report(),
        )
        return self

    def log_failure(
        self,
        level: int | str = logging.ERROR,
        message: str | None = None,
        *args: Any,
        logger: OutcomeLogger | None = None,
    ) -> Outcome[T]:
        """``log()`` for failures only; a no-op for other variants."""
        if self.is_failure():
            return self.log(level, message, *args, logger=logger)
        return self

    def report(self) -> OutcomeReport:
        """Return a structured snapshot for diagnostics."""
        return build_report(self)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Outcome):
            return bool(self.payload == other.payload)
        if self.has_value():
            return bool(self.payload == other)
        return False

    def __hash__(self) -> int:
        return hash(self.payload)

    def __str__(self) -> str:
        if self.has_value():
            return str(self.payload)
        return messages.EMPTY_SENTINEL


@final
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Value[T](Outcome[T]):
    """Computation produced a usable, non-None result."""

    payload: T = dataclasses.field()
    message: str = messages.NOTHING_TO_REPORT

    variant: ClassVar[Variant] = Variant.VALUE

    def __post_init__(self) -> None:
        if self.payload is None:
            raise NullArgumentError(
                messages.param_required("payload"),
                hint="Use Outcome.of() to turn None into an empty outcome.",
            )
        _require(self.message, "message")


@final
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Empty[T](Outcome[T]):
    """Computation completed but produced nothing; not a failure."""

    message: str = messages.EMPTY_RESULT

    variant: ClassVar[Variant] = Variant.EMPTY

    def __post_init__(self) -> None:
        _require(self.message, "message")


@final
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Failure[T](Outcome[T]):
    """Computation failed or a predicate rejected the payload."""

    message: str = messages.FAILURE_RESULT
    cause: BaseException | None = None
    kind: FailureKind = FailureKind.FAILED

    variant: ClassVar[Variant] = Variant.FAILURE

    def __post_init__(self) -> None:
        _require(self.message, "message")
        # Accept the plain string value of a kind.
        object.__setattr__(self, "kind", FailureKind(self.kind))


type OutcomeVariant[T] = Value[T] | Empty[T] | Failure[T]

of = Outcome.of
attempt = Outcome.attempt
check = Outcome.check
value = Outcome.value
empty = Outcome.empty
failure = Outcome.failure
not_found = Outcome.not_found
unprocessable = Outcome.unprocessable
unauthorized = Outcome.unauthorized
