"""
Configuration - settings file, .env and environment overrides.

Settings are read once at import time into the global ``config`` instance.
Later sources win: defaults, then the JSON settings file, then environment
variables (a .env file in the working directory is loaded first).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("screamid.config")


__all__ = ["Config", "config"]

ENV_LANGUAGE = "SCREAM_ID_LANGUAGE"
ENV_LOG_LEVEL = "SCREAM_ID_LOG_LEVEL"
ENV_LOG_FILE = "SCREAM_ID_LOG_FILE"


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages language, log level and log file. Read-only: nothing is saved.
    """

    SETTINGS_FILE: Path = Path.home() / ".config" / "scream_id" / "settings.json"

    # Default values
    UI_LANGUAGE: str = "en"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    def __post_init__(self):
        """Load the settings file, then apply environment overrides."""
        load_dotenv()
        self._load_settings()
        self._load_environment()

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        # Local import to avoid circular dependency
        from scream_id.utils.i18n import t

        if not self.SETTINGS_FILE.exists():
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)

            self.UI_LANGUAGE = self._setting(data, "ui_language", self.UI_LANGUAGE)
            self.LOG_LEVEL = self._setting(data, "log_level", self.LOG_LEVEL)

            log_file = self._setting(data, "log_file", None)
            if log_file:
                self.LOG_FILE = Path(log_file)

        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.error(t("logs.config.load_error", error=e))

    @staticmethod
    def _setting(data: dict, key: str, default: str | None) -> str | None:
        """Return data[key] if it is a string, else log it and return default."""
        from scream_id.utils.i18n import t

        value = data.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            logger.warning(t("logs.config.bad_setting", setting=key, value=value))
            return default
        return value

    def _load_environment(self) -> None:
        """Apply SCREAM_ID_* environment variables."""
        language = os.getenv(ENV_LANGUAGE)
        if language:
            self.UI_LANGUAGE = language

        level = os.getenv(ENV_LOG_LEVEL)
        if level:
            self.LOG_LEVEL = level

        log_file = os.getenv(ENV_LOG_FILE)
        if log_file:
            self.LOG_FILE = Path(log_file)

    @property
    def log_level_value(self) -> int:
        """LOG_LEVEL as a logging module constant, INFO if the name is unknown."""
        from scream_id.utils.i18n import t

        level = logging.getLevelName(str(self.LOG_LEVEL).upper())
        if isinstance(level, int):
            return level

        logger.warning(t("logs.config.bad_log_level", level=self.LOG_LEVEL))
        return logging.INFO


# Global instance
config = Config()
