"""
Scoreboard Host Settings

Defaults for the command-line and desktop hosts, optionally overridden by a
JSON file. A missing or unreadable file falls back to the defaults.

Usage:
    settings = load_settings("scoreboard_settings.json")
    setup_logging(level=settings["log_level"], log_dir=settings["log_dir"])

The file path can also be supplied through the LIVE_SCOREBOARD_CONFIG
environment variable.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .logging_config import get_logger


logger = get_logger(__name__)

CONFIG_ENV_VAR = "LIVE_SCOREBOARD_CONFIG"

# Settings restricted to a fixed set of values
ALLOWED_VALUES = {
    "log_level": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    "log_format": ("simple", "detailed"),
}


class ScoreboardSettings:
    """
    Default host settings.

    Values here are only defaults; load_settings() returns a merged dict
    and never modifies the class.
    """

    # ================================================================
    # LOGGING
    # ================================================================

    LOG_LEVEL = "INFO"
    LOG_DIR = "logs"
    LOG_TO_CONSOLE = True
    LOG_TO_FILE = False
    LOG_FORMAT = "simple"
    # "simple":   timestamp, level, logger name
    # "detailed": adds file, line and function

    # ================================================================
    # HOSTS
    # ================================================================

    PROMPT = "scoreboard> "
    TICKER_CARD_WIDTH = 160

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        return {
            "log_level": cls.LOG_LEVEL,
            "log_dir": cls.LOG_DIR,
            "log_to_console": cls.LOG_TO_CONSOLE,
            "log_to_file": cls.LOG_TO_FILE,
            "log_format": cls.LOG_FORMAT,
            "prompt": cls.PROMPT,
            "ticker_card_width": cls.TICKER_CARD_WIDTH,
        }


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load host settings, merging a JSON object over the defaults.

    Args:
        path: JSON file to read. Falls back to $LIVE_SCOREBOARD_CONFIG,
              then to the defaults alone.

    Returns:
        Settings dict with every default key present. Unknown keys and
        values of the wrong type or outside ALLOWED_VALUES are ignored
        with a warning.
    """
    settings = ScoreboardSettings.defaults()

    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return settings

    config_path = Path(path)
    if not config_path.is_file():
        logger.warning(f"Settings file not found: {config_path}. Using defaults.")
        return settings

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load settings from {config_path}: {e}. Using defaults.")
        return settings

    if not isinstance(raw, dict):
        logger.error(f"Settings file {config_path} must contain a JSON object. Using defaults.")
        return settings

    for key, value in raw.items():
        if key not in settings:
            logger.warning(f"Ignoring unknown setting: {key}")
            continue
        expected = type(settings[key])
        if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
            logger.warning(
                f"Ignoring setting {key}={value!r}: expected {expected.__name__}"
            )
            continue
        allowed = ALLOWED_VALUES.get(key)
        if allowed is not None and value not in allowed:
            logger.warning(
                f"Ignoring setting {key}={value!r}: expected one of {', '.join(allowed)}"
            )
            continue
        settings[key] = value

    logger.debug(f"Loaded settings from {config_path}")
    return settings
