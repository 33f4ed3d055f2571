"""Telegram transport: aiogram bot wrapper with throttled outbound messages."""

from __future__ import annotations

from contextlib import suppress
from typing import Optional

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ChatMemberStatus, ParseMode
from asyncio_throttle import Throttler

from core import get_logger, TelegramLimits

logger = get_logger(__name__)

ADMIN_STATUSES = frozenset({ChatMemberStatus.ADMINISTRATOR, ChatMemberStatus.CREATOR})


class TelegramBot:
    """Owns the aiogram ``Bot`` and ``Dispatcher``; messages use HTML parse mode.

    Also provides the messenger capability used by the draw services:
    ``send_message`` and ``is_admin``.
    """

    def __init__(self, token: str, rate_limit: int = TelegramLimits.SEND_RATE_LIMIT) -> None:
        self.bot = Bot(
            token=token,
            default=DefaultBotProperties(parse_mode=ParseMode.HTML),
        )
        self.dispatcher = Dispatcher()
        self.throttler = Throttler(rate_limit=rate_limit, period=1.0)

    async def start(self) -> None:
        await self.dispatcher.start_polling(self.bot)

    async def stop(self) -> None:
        # Polling may already be stopped by a signal
        with suppress(RuntimeError):
            await self.dispatcher.stop_polling()
        await self.bot.session.close()

    async def send_message(self, destination: int, text: str) -> Optional[int]:
        async with self.throttler:
            message = await self.bot.send_message(destination, text)
        return message.message_id

    async def is_admin(self, chat_id: int, user_id: int) -> bool:
        member = await self.bot.get_chat_member(chat_id, user_id)
        return member.status in ADMIN_STATUSES
