"""Telegram bot layer."""

from .client import TelegramBot

__all__ = ["TelegramBot"]
