"""
Configuration - Environment-driven settings and logging setup.

Settings are read from the environment once and cached:
- GGN_VALIDATE: default for Ruleset(validate=...) ("1" unless disabled)
- GGN_LOG_LEVEL: level used by configure_logging() ("WARNING" by default)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Process-wide engine settings."""
    validate: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from GGN_* environment variables."""
        raw_validate = os.getenv("GGN_VALIDATE", "1")
        return cls(
            validate=raw_validate.strip().lower() not in _FALSE_VALUES,
            log_level=os.getenv("GGN_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging for applications embedding the engine.

    The library itself only attaches a NullHandler; call this from an
    entry point to see its debug output.
    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
