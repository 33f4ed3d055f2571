"""Application configuration module.

Reads settings from environment variables with sane defaults. Values from
``.env`` are loaded first; ``.env.local`` (if present) overrides them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from core.constants import DrawDefaults, LogDefaults, TelegramLimits
from core.exceptions import ConfigurationError


def _load_env_files() -> None:
    load_dotenv()
    if Path(".env.local").exists():
        load_dotenv(".env.local", override=True)


def _get_bool(name: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def _get_int(name: str, default: int) -> int:
    """Get integer from environment variable with fallback."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_seconds(name: str, default: float) -> float:
    """Get a non-negative duration in seconds."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        seconds = float(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}")
    if seconds < 0:
        raise ConfigurationError(f"{name} must not be negative")
    return seconds


def _get_str(name: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.getenv(name, default)


@dataclass(frozen=True)
class Config:
    bot_token: str
    debug: bool
    log_folder: str
    messages_file: str
    bot_rate_limit: int

    # Draw pacing (seconds)
    join_window: float
    prize_announce_delay: float
    inter_winner_delay: float
    report_interval: float
    report_threshold: float
    prize_separator: str


def load_config() -> Config:
    """Load application configuration from environment variables.

    Returns:
        Config: Application configuration with validated values

    Raises:
        ConfigurationError: If a duration is malformed or the separator is empty
    """
    _load_env_files()

    config = Config(
        bot_token=_get_str("TELEGRAM_BOT_TOKEN", ""),
        debug=_get_bool("DEBUG", False),
        log_folder=_get_str("LOG_FOLDER", LogDefaults.FOLDER),
        messages_file=_get_str("MESSAGES_FILE", "messages.json"),
        bot_rate_limit=_get_int("BOT_RATE_LIMIT", TelegramLimits.SEND_RATE_LIMIT),
        join_window=_get_seconds("DRAW_JOIN_WINDOW", DrawDefaults.JOIN_WINDOW),
        prize_announce_delay=_get_seconds(
            "DRAW_PRIZE_ANNOUNCE_DELAY", DrawDefaults.PRIZE_ANNOUNCE_DELAY
        ),
        inter_winner_delay=_get_seconds(
            "DRAW_INTER_WINNER_DELAY", DrawDefaults.INTER_WINNER_DELAY
        ),
        report_interval=_get_seconds("DRAW_REPORT_INTERVAL", DrawDefaults.REPORT_INTERVAL),
        report_threshold=_get_seconds("DRAW_REPORT_THRESHOLD", DrawDefaults.REPORT_THRESHOLD),
        prize_separator=_get_str("DRAW_PRIZE_SEPARATOR", DrawDefaults.PRIZE_SEPARATOR),
    )

    if not config.prize_separator.strip():
        raise ConfigurationError("DRAW_PRIZE_SEPARATOR must not be blank")
    if config.report_interval <= 0:
        raise ConfigurationError("DRAW_REPORT_INTERVAL must be positive")

    return config
