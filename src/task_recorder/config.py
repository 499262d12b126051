"""Task Recorder Configuration.

This module defines the RecorderConfig class and preset configurations.
The config only controls how the narrative is forwarded to the injected
logger; it never changes what gets recorded.

Example YAML:
    trace_level: TRACE
    debug_level: DEBUG
    log_causes: true
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Union

import yaml

from task_recorder.types import InvalidConfigError

logger = logging.getLogger(__name__)

TRACE = 5
"""Level below DEBUG used for begin-step/begin-subtask messages."""

logging.addLevelName(TRACE, "TRACE")


def resolve_level(value: Union[int, str]) -> int:
    """Resolve a logging level given as a number or a level name.

    Args:
        value: Numeric level or a name such as "DEBUG" or "trace"

    Returns:
        Numeric logging level

    Raises:
        InvalidConfigError: If the value is not a known level
    """
    if isinstance(value, bool):
        raise InvalidConfigError(f"level must be a name or number, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise InvalidConfigError(f"level must not be negative, got {value}")
        return value
    if isinstance(value, str):
        level = logging.getLevelName(value.strip().upper())
        if isinstance(level, int):
            return level
        raise InvalidConfigError(f"unknown logging level: {value!r}")
    raise InvalidConfigError(f"level must be a name or number, got {value!r}")


def _level_name(level: int) -> Union[int, str]:
    name = logging.getLevelName(level)
    # Unregistered levels come back as "Level N"
    if name.startswith("Level "):
        return level
    return name


@dataclass(frozen=True)
class RecorderConfig:
    """How a recorder reports to its logger.

    Attributes:
        trace_level: Level for "beginStep"/"beginSubtask" messages
        debug_level: Level for step and task resolution messages
        log_causes: Attach failure causes to log records as exc_info

    Example:
        >>> config = RecorderConfig(debug_level=logging.INFO)
        >>> recorder = create(logging.getLogger("build"), "Building", config=config)
    """

    trace_level: int = TRACE
    debug_level: int = logging.DEBUG
    log_causes: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "trace_level", resolve_level(self.trace_level))
        object.__setattr__(self, "debug_level", resolve_level(self.debug_level))

    def with_levels(
        self,
        trace_level: Union[int, str, None] = None,
        debug_level: Union[int, str, None] = None,
    ) -> RecorderConfig:
        """Return a copy with the given levels replaced."""
        changes: dict[str, Any] = {}
        if trace_level is not None:
            changes["trace_level"] = trace_level
        if debug_level is not None:
            changes["debug_level"] = debug_level
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Convert to dictionary (registered levels as names)."""
        return {
            "trace_level": _level_name(self.trace_level),
            "debug_level": _level_name(self.debug_level),
            "log_causes": self.log_causes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RecorderConfig:
        """Create from dictionary.

        Unknown keys are ignored with a warning.
        """
        known = {"trace_level", "debug_level", "log_causes"}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown recorder config keys: {sorted(unknown)}")

        log_causes = data.get("log_causes", True)
        if not isinstance(log_causes, bool):
            raise InvalidConfigError(f"log_causes must be a boolean, got {log_causes!r}")

        return cls(
            trace_level=data.get("trace_level", TRACE),
            debug_level=data.get("debug_level", logging.DEBUG),
            log_causes=log_causes,
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> RecorderConfig:
        """Load config from a YAML file.

        An empty file yields the default config.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidConfigError(f"{path} must contain a mapping")
        return cls.from_dict(data)


# =============================================================================
# Presets
# =============================================================================

DEFAULT_CONFIG = RecorderConfig()
"""TRACE for begin messages, DEBUG for resolutions, causes attached."""

VERBOSE_CONFIG = RecorderConfig(trace_level=logging.DEBUG, debug_level=logging.INFO)
"""Surfaces the whole narrative under a typical INFO/DEBUG logging setup."""

QUIET_CONFIG = RecorderConfig(log_causes=False)
"""Same levels as the default, without exception tracebacks."""
