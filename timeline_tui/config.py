"""Timeline TUI configuration loading.

Parses an optional JSON config file into a typed dataclass. Command-line
flags are applied on top by ``timeline_tui.__main__``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = "config.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "WARNING", "ERROR")


class ConfigError(ValueError):
    """Invalid configuration file or value."""


@dataclass
class TimelineConfig:
    """Configuration for the timeline viewer."""

    conversation: str = "conversation.json"
    title: str = "Conversation"
    watch: bool = True
    poll_interval: float = 2.0
    expand_tool_calls: bool = False
    log_level: str = "INFO"
    log_file: str | None = None

    @property
    def conversation_path(self) -> Path:
        return Path(self.conversation)


def _get(raw: dict[str, Any], key: str, expected: type | tuple[type, ...], default: Any) -> Any:
    """Return a typed field of the raw config, or its default when absent/null."""
    if raw.get(key) is None:
        return default
    value = raw[key]
    # bool is an int subclass
    if isinstance(value, bool) and expected is not bool:
        raise ConfigError(f"'{key}' must not be a boolean")
    if not isinstance(value, expected):
        raise ConfigError(f"'{key}' has invalid type {type(value).__name__}")
    return value


def _parse_config(raw: dict[str, Any]) -> TimelineConfig:
    """Parse a raw config dict into TimelineConfig."""
    defaults = TimelineConfig()
    log_level = _get(raw, "log_level", str, defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"unknown log_level '{log_level}'")

    poll_interval = float(_get(raw, "poll_interval", (int, float), defaults.poll_interval))
    if poll_interval <= 0:
        raise ConfigError("'poll_interval' must be positive")

    return TimelineConfig(
        conversation=_get(raw, "conversation", str, defaults.conversation),
        title=_get(raw, "title", str, defaults.title),
        watch=_get(raw, "watch", bool, defaults.watch),
        poll_interval=poll_interval,
        expand_tool_calls=_get(raw, "expand_tool_calls", bool, defaults.expand_tool_calls),
        log_level=log_level,
        log_file=_get(raw, "log_file", str, defaults.log_file),
    )


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> TimelineConfig:
    """Load config from a JSON file.

    Args:
        path: Config file path. A missing file yields the defaults.

    Returns:
        TimelineConfig; a relative ``conversation`` path is resolved against
        the config file's directory.

    Raises:
        ConfigError: If the file is unreadable, not a JSON object, or has
            fields of the wrong type.
    """
    config_path = Path(path)
    if not config_path.exists():
        return TimelineConfig()

    try:
        with open(config_path) as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot load {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path}: top level must be a JSON object")

    config = _parse_config(raw)
    if "conversation" in raw and not Path(config.conversation).is_absolute():
        config.conversation = str(config_path.parent / config.conversation)
    return config
