"""Centralized error handling for bot handlers."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from aiogram import types

from core import get_logger

logger = get_logger(__name__)


def handle_bot_errors(
    error_message: str = "Something went wrong",
    log_context: bool = True
):
    """Decorator for bot handler methods.

    Unexpected exceptions are logged and the user gets a short apology
    instead of silence.

    Usage:
        @handle_bot_errors("Failed to start the draw")
        async def handle_lucky_draw(self, message):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self, message: Any, *args, **kwargs):
            try:
                return await func(self, message, *args, **kwargs)
            except Exception as e:
                is_message = isinstance(message, types.Message)
                log_extra = {}
                if log_context and is_message:
                    log_extra = {
                        "handler": func.__name__,
                        "user_id": message.from_user.id if message.from_user else None,
                        "chat_id": message.chat.id,
                    }

                logger.error(
                    f"Error in {func.__name__}: {e}",
                    exc_info=True,
                    extra=log_extra
                )

                if is_message:
                    try:
                        await message.answer(f"❌ {error_message}, please try again later.")
                    except Exception as send_error:
                        logger.error(f"Failed to send error message: {send_error}")

        return wrapper
    return decorator
