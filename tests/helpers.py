"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to prevent test suites from
growing lots of one-off logger doubles as coverage expands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LogCall:
    level: int
    msg: object
    args: tuple[object, ...]
    exc_info: Any
    extra: dict[str, Any] | None

    @property
    def line(self) -> str:
        return str(self.msg) % self.args if self.args else str(self.msg)


@dataclass
class RecordingLogger:
    """Logging collaborator that records every call for assertions."""

    calls: list[LogCall] = field(default_factory=list)

    def log(
        self,
        level: int,
        msg: object,
        *args: object,
        exc_info: Any = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.calls.append(LogCall(level, msg, args, exc_info, extra))

    @property
    def last(self) -> LogCall:
        return self.calls[-1]


@dataclass
class ExplodingLogger:
    """Logging collaborator that always fails."""

    attempts: int = 0

    def log(self, level: int, msg: object, *args: object, **kwargs: Any) -> None:
        del level, msg, args, kwargs
        self.attempts += 1
        raise RuntimeError("logging backend unavailable")


@dataclass
class Counter:
    """Callable that counts invocations; handy as consumer/action double."""

    calls: list[tuple[object, ...]] = field(default_factory=list)

    def __call__(self, *args: object) -> None:
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)
