"""Configuration management for Shepherd."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.profile import UserProfile, parse_day

logger = logging.getLogger(__name__)

SHEPHERD_HOME = Path(os.environ.get("SHEPHERD_HOME", Path.home() / "shepherd"))
CONFIG_FILE = SHEPHERD_HOME / "config" / "shepherd.conf"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Shepherd configuration."""

    user_name: str = "Pastor"
    rest_day: int = 1  # Monday
    sample_tasks: bool = True
    log_level: str = "WARNING"

    def profile(self) -> UserProfile:
        """Initial profile for a new session."""
        return UserProfile(name=self.user_name, rest_day=self.rest_day)


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from shepherd.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "user_name":
                config.user_name = value
            case "rest_day":
                try:
                    config.rest_day = parse_day(value)
                except ValueError as e:
                    logger.warning(f"Ignoring REST_DAY: {e}")
            case "sample_tasks":
                if value.lower() in _TRUE:
                    config.sample_tasks = True
                elif value.lower() in _FALSE:
                    config.sample_tasks = False
                else:
                    logger.warning(f"Ignoring SAMPLE_TASKS: not a boolean: {value}")
            case "log_level":
                if value.upper() in _LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Ignoring LOG_LEVEL: unknown level: {value}")
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
