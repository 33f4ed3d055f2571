"""Common bot commands and informational handlers."""

from __future__ import annotations

import random

from aiogram import Router, types
from aiogram.filters import Command, CommandStart

from core import TOSS_CUP_IMAGES
from services.messages import MessageTemplates


class CommonHandlers:
    def __init__(self, templates: MessageTemplates) -> None:
        self.templates = templates
        self.router = Router()
        self.router.name = "common"
        self._register()

    def setup(self, dispatcher) -> None:
        dispatcher.include_router(self.router)

    def _register(self) -> None:
        self.router.message.register(self.start, CommandStart())
        self.router.message.register(self.help, Command("help"))
        self.router.message.register(self.toss, Command("toss"))

    async def start(self, message: types.Message) -> None:
        await message.bot.send_message(message.from_user.id, self.templates.greeting)

    async def help(self, message: types.Message) -> None:
        await message.answer(self.templates.help)

    async def toss(self, message: types.Message) -> None:
        """Toss the moon blocks: reply with one of the cup pictures."""
        await message.answer_photo(random.choice(TOSS_CUP_IMAGES))


def setup_common_handlers(dispatcher, templates: MessageTemplates) -> CommonHandlers:
    handler = CommonHandlers(templates)
    handler.setup(dispatcher)
    return handler
