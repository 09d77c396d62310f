"""Runtime configuration read from the environment.

Each setting has its own accessor so a bad value in one variable only
affects the code that actually reads it. ``.env`` files are loaded by the
CLI entry point, not on import.
"""

import logging
import os
from typing import Mapping, Optional

DEFAULT_RULESET = "standard"
DEFAULT_WARNING_THRESHOLD = 5
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""
    def __init__(self, name: str, value: str, reason: str):
        super().__init__(f"Invalid value for {name}: '{value}' ({reason})")
        self.name = name
        self.value = value
        self.reason = reason


def _environ(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def parse_threshold(name: str, raw: str) -> int:
    """Parse a non-negative warning threshold.

    Raises:
        ConfigError: If *raw* is not a non-negative integer
    """
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(name, raw, "expected an integer")
    if value < 0:
        raise ConfigError(name, raw, "must not be negative")
    return value


def get_ruleset_name(env: Optional[Mapping[str, str]] = None) -> str:
    """TANKA_RULESET, lower-cased; never raises."""
    raw = _environ(env).get("TANKA_RULESET", "")
    return raw.strip().lower() or DEFAULT_RULESET


def get_warning_threshold(env: Optional[Mapping[str, str]] = None) -> int:
    """TANKA_WARNING_THRESHOLD as a non-negative integer."""
    raw = _environ(env).get("TANKA_WARNING_THRESHOLD")
    if raw is None or raw.strip() == "":
        return DEFAULT_WARNING_THRESHOLD
    return parse_threshold("TANKA_WARNING_THRESHOLD", raw)


def get_log_level(env: Optional[Mapping[str, str]] = None) -> str:
    """TANKA_LOG_LEVEL as an upper-case logging level name."""
    raw = _environ(env).get("TANKA_LOG_LEVEL", "")
    level = raw.strip().upper() or DEFAULT_LOG_LEVEL
    if level not in LOG_LEVELS:
        raise ConfigError("TANKA_LOG_LEVEL", raw, f"expected one of {', '.join(LOG_LEVELS)}")
    return level


def logging_level(name: str) -> int:
    return getattr(logging, name)
