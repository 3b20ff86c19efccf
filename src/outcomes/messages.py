"""Fixed message texts shared across the package."""

from __future__ import annotations

from typing import Any, Final

# Default status messages, one per variant.
NOTHING_TO_REPORT: Final[str] = "Nothing to report"
EMPTY_RESULT: Final[str] = "Processing led to an empty result"
FAILURE_RESULT: Final[str] = "Processing led to a failure"

# Default messages of the failure kinds.
UNPROCESSABLE_RESULT: Final[str] = "The result was unprocessable"
UNAUTHORIZED_RESULT: Final[str] = "Received an unauthorized result"
NOT_FOUND_RESULT: Final[str] = "The requested resource could not be found"
ERROR_OCCURRED_RESULT: Final[str] = "Processing of result encountered an error"

NO_MESSAGE_AVAILABLE: Final[str] = "No message available"
MESSAGE_FORMAT_ERROR: Final[str] = "Unable to format message, reason: "
PREDICATE_FAILED: Final[str] = "Predicate failed"
NO_VALUE_PRESENT: Final[str] = "No value present"
DEFAULT_LOG_CONTEXT: Final[str] = "Outcome processed"

#: ``str()`` of an outcome without a payload.
EMPTY_SENTINEL: Final[str] = "<empty>"

# Trace events
MAP_APPLIED: Final[str] = "map() applied"
MAP_NOT_APPLIED: Final[str] = "map() not applied"
FLAT_MAP_APPLIED: Final[str] = "flat_map() applied"
FLAT_MAP_NOT_APPLIED: Final[str] = "flat_map() not applied"
TEST_CALL_FAILED: Final[str] = "test() call failed"
ACCEPT_SUCCESSFUL: Final[str] = "accept() successful"
ACCEPT_FAILED: Final[str] = "accept() failed"
RUN_SUCCESSFUL: Final[str] = "run() successful"
RUN_FAILED: Final[str] = "run() failed"
RUN_NOT_CALLED: Final[str] = "run() not called"
TRANSFORMED_INTO_STREAM: Final[str] = "transformed value into stream"
TRANSFORMED_INTO_EMPTY_STREAM: Final[str] = "transformed into empty stream"


def test_called(outcome: bool) -> str:
    return f"test() called successfully, outcome: {outcome}"


def describe_callable(fn: Any) -> str:
    """Return a stable, human-readable name for *fn*."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        return repr(fn)
    module = getattr(fn, "__module__", None)
    return f"{module}.{name}" if module else name


def failed_predicate(predicate: Any) -> str:
    return f"Predicate failed for this outcome: {describe_callable(predicate)}"


def exception_was_thrown(exc: BaseException) -> str:
    """Return the exception's own message, or a fallback naming its type."""
    text = str(exc)
    if text:
        return text
    return f"{type(exc).__qualname__} was thrown without any message"


def param_required(param: str) -> str:
    return f"{param} cannot be None."
