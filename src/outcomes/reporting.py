"""Logging collaborator interface, log-line composition and structured reports.

The core never configures handlers or formatters. It composes one line per
``Outcome.log()`` call and hands it to an injected ``OutcomeLogger``; a stdlib
``logging.Logger`` or ``logging.LoggerAdapter`` satisfies the protocol.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from outcomes._dev_flags import trace_enabled
from outcomes.errors import walk_exception_chain
from outcomes.messages import DEFAULT_LOG_CONTEXT

if TYPE_CHECKING:
    from outcomes.core import Outcome, Variant

log = logging.getLogger(__name__)

#: Library logger used by ``Outcome.log()`` when no collaborator is injected.
DEFAULT_LOGGER_NAME = "outcomes.outcome"
TRACE_LOGGER_NAME = "outcomes.trace"

_trace_log = logging.getLogger(TRACE_LOGGER_NAME)


@runtime_checkable
class OutcomeLogger(Protocol):
    """Duck-typed protocol for the logging collaborator."""

    def log(  # noqa: D102
        self,
        level: int,
        msg: object,
        *args: object,
        exc_info: Any = None,
        extra: dict[str, Any] | None = None,
    ) -> None: ...


class OutcomeReport(BaseModel):
    """Structured, JSON-friendly snapshot of an outcome for diagnostics."""

    model_config = ConfigDict(frozen=True)

    variant: str
    #: ``repr()`` of the payload, ``None`` when absent.
    value: str | None = None
    message: str
    #: Failure kind, ``None`` for other variants.
    kind: str | None = None
    #: ``repr()`` of the captured cause, ``None`` when absent.
    cause: str | None = None
    #: Type names of the cause and its ``__cause__``/``__context__`` chain.
    cause_chain: list[str] = Field(default_factory=list)


def build_report(outcome: Outcome[Any]) -> OutcomeReport:
    cause = outcome.cause
    return OutcomeReport(
        variant=str(outcome.variant),
        value=repr(outcome.payload) if outcome.has_value() else None,
        message=outcome.message,
        kind=str(outcome.kind) if outcome.kind is not None else None,
        cause=repr(cause) if cause is not None else None,
        cause_chain=(
            [type(exc).__qualname__ for exc in walk_exception_chain(cause)]
            if cause is not None
            else []
        ),
    )


def compose_log_line(
    variant: Variant | str,
    payload: Any,
    message: str,
    context: str | None = None,
) -> str:
    """Return ``"<context> | <variant>, value: <payload>, message: <message>"``."""
    return (
        f"{context or DEFAULT_LOG_CONTEXT} | {variant}, "
        f"value: {payload}, message: {message}"
    )


def emit(
    logger: OutcomeLogger,
    level: int,
    line: str,
    *,
    cause: BaseException | None = None,
    report: OutcomeReport | None = None,
) -> None:
    """Hand *line* to *logger*; a failing collaborator is reported, never raised."""
    extra = {"outcome": report.model_dump()} if report is not None else None
    try:
        # Pass the line as an argument so '%' in payloads is never re-interpreted.
        logger.log(level, "%s", line, exc_info=cause, extra=extra)
    except Exception as e:
        log.error(
            "Outcome logger '%s' failed: %s",
            type(logger).__name__,
            e,
            exc_info=True,
        )


def resolve_logger(logger: OutcomeLogger | None) -> OutcomeLogger:
    if logger is None:
        return logging.getLogger(DEFAULT_LOGGER_NAME)
    return logger


def trace(outcome: Outcome[Any], event: str) -> None:
    """Emit a DEBUG trace event for *outcome* when tracing is enabled.

    Trace events always go to the ``outcomes.trace`` stdlib logger, never to a
    collaborator injected into ``Outcome.log()``. Hosts route or silence them
    with ordinary logging configuration of that logger name.
    """
    if not trace_enabled() or not _trace_log.isEnabledFor(logging.DEBUG):
        return
    _trace_log.debug(
        "%s",
        compose_log_line(outcome.variant, outcome.get(), outcome.message, event),
    )
