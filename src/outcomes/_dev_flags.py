"""Internal helpers for development-time feature flags.

Kept minimal so hot paths stay import-fast. Centralizes how the opt-in
tracing toggle is read so semantics remain consistent across combinators.
"""

from __future__ import annotations

import os

__all__ = ["TRACE_ENV_VAR", "trace_enabled"]

TRACE_ENV_VAR = "OUTCOMES_TRACE"


def trace_enabled(*, override: bool | None = None) -> bool:
    """Return True when combinator trace events should be emitted.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``OUTCOMES_TRACE`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv(TRACE_ENV_VAR) == "1"
