"""outcomes: a value, an empty result or a failure, with provenance.

Public API:
    - Outcome: the container, with factories and combinators
    - Value / Empty / Failure: the variants, for pattern matching
    - FailureKind: why a failure happened (not found, unauthorized, ...)
    - of / attempt / check / value / empty / failure: factory shortcuts
    - format_message(): ``%``-style formatting that never raises
"""

from __future__ import annotations

import logging

from outcomes.config import Settings, resolve_settings
from outcomes.core import (
    Empty,
    Failure,
    FailureKind,
    Outcome,
    OutcomeVariant,
    Value,
    Variant,
    attempt,
    check,
    empty,
    failure,
    not_found,
    of,
    unauthorized,
    unprocessable,
    value,
)
from outcomes.errors import (
    ConfigurationError,
    NoValueError,
    NullArgumentError,
    OutcomeError,
    OutcomeTypeError,
)
from outcomes.formatting import format_message
from outcomes.reporting import OutcomeLogger, OutcomeReport

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("outcomes")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("outcomes").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Empty",
    "Failure",
    "FailureKind",
    "NoValueError",
    "NullArgumentError",
    "Outcome",
    "OutcomeError",
    "OutcomeLogger",
    "OutcomeReport",
    "OutcomeTypeError",
    "OutcomeVariant",
    "Settings",
    "Value",
    "Variant",
    "attempt",
    "check",
    "empty",
    "failure",
    "format_message",
    "not_found",
    "of",
    "resolve_settings",
    "unauthorized",
    "unprocessable",
    "value",
]
