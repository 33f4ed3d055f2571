"""Application-wide constants and configuration values."""

from __future__ import annotations

from enum import Enum


# Telegram limits
class TelegramLimits:
    """Telegram API limits."""
    SEND_RATE_LIMIT = 30  # messages per second


# Draw constants
class DrawDefaults:
    """Default pacing for a lucky draw (seconds)."""
    JOIN_WINDOW = 60.0
    PRIZE_ANNOUNCE_DELAY = 3.0
    INTER_WINNER_DELAY = 3.0
    REPORT_INTERVAL = 60.0
    REPORT_THRESHOLD = 180.0  # only report during the last 3 minutes
    PRIZE_SEPARATOR = "x"
    SELECTOR_RETRY_FACTOR = 4


class DrawStatus(str, Enum):
    """Lucky draw session status."""
    OPEN = "open"
    RESOLVING = "resolving"
    CLOSED = "closed"


ORDINAL_WORDS = (
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
)


TOSS_CUP_IMAGES = (
    "https://i.imgur.com/Lrfi37a.jpg",
    "https://i.imgur.com/HAb9sjh.jpg",
    "https://i.imgur.com/Fy5hmD7.jpg",
    "https://i.imgur.com/fPuAt7T.jpg",
)


# Logging
class LogDefaults:
    FOLDER = "logs"
    FILE_NAME = "app.log"
    FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
    DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
