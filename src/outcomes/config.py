"""Configuration: frozen Settings resolved from overrides, environment and defaults."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any

from dotenv import load_dotenv

from outcomes.errors import ConfigurationError
from outcomes.messages import DEFAULT_LOG_CONTEXT

load_dotenv()

LOG_LEVEL_ENV_VAR = "OUTCOMES_LOG_LEVEL"
LOG_CONTEXT_ENV_VAR = "OUTCOMES_LOG_CONTEXT"


def coerce_level(level: int | str) -> int:
    """Return the numeric logging level for an ``int`` or a level name."""
    if isinstance(level, bool):
        raise ConfigurationError(
            f"Invalid log level: {level!r}",
            hint="Use a logging level such as logging.INFO or 'INFO'.",
        )
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(str(level).strip().upper())
    if resolved is None:
        raise ConfigurationError(
            f"Unknown log level name: {level!r}",
            hint="Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        )
    return resolved


@dataclass(frozen=True)
class Settings:
    """Immutable defaults for outcome logging.

    Example:
        settings = resolve_settings(log_level="DEBUG")
        outcome.log(settings.log_level)
    """

    #: Level used by ``Outcome.log()`` when none is passed.
    log_level: int = logging.INFO
    #: Context prefix of the composed log line when no custom message is given.
    log_context: str = DEFAULT_LOG_CONTEXT

    def __post_init__(self) -> None:
        """Normalize the level and validate field shapes."""
        object.__setattr__(self, "log_level", coerce_level(self.log_level))
        if self.log_level < 0:
            raise ConfigurationError(
                f"log_level must be >= 0, got {self.log_level}",
                hint="Use a standard logging level such as logging.INFO.",
            )
        if not isinstance(self.log_context, str) or not self.log_context.strip():
            raise ConfigurationError(
                "log_context must be a non-empty string",
                hint=f"Set {LOG_CONTEXT_ENV_VAR} or pass log_context='...'.",
            )


def resolve_settings(**overrides: Any) -> Settings:
    """Resolve Settings with precedence: overrides, environment, defaults."""
    unknown = set(overrides) - {"log_level", "log_context"}
    if unknown:
        raise ConfigurationError(
            f"Unknown settings: {', '.join(sorted(unknown))}",
            hint="Supported settings: log_level, log_context.",
        )

    values: dict[str, Any] = {}
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        values["log_level"] = env_level
    env_context = os.environ.get(LOG_CONTEXT_ENV_VAR)
    if env_context:
        values["log_context"] = env_context

    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
