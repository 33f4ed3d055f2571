"""Lucky draw commands: start a draw and join it."""

from __future__ import annotations

from aiogram import F, Router, types
from aiogram.enums import ChatType
from aiogram.filters import Command

from bot.error_handler import handle_bot_errors
from core import get_logger
from core.exceptions import DrawError
from services.lottery import LuckyDrawService
from services.models import Participant

logger = get_logger(__name__)


def participant_from_user(user: types.User) -> Participant:
    return Participant(
        id=user.id,
        handle=user.username or "",
        first_name=user.first_name or "",
        last_name=user.last_name or "",
    )


class DrawHandlers:
    def __init__(self, service: LuckyDrawService) -> None:
        self.service = service
        self.router = Router()
        self.router.name = "lucky_draw"
        self._register()

    def setup(self, dispatcher) -> None:
        dispatcher.include_router(self.router)

    def _register(self) -> None:
        self.router.message.register(self.handle_lucky_draw, Command("luckyDraw"))
        self.router.message.register(self.handle_join_draw, Command("joinDraw"))
        # Replying to the draw's anchor message also joins; commands sent as
        # replies fall through to their own handlers
        self.router.message.register(
            self.handle_reply, F.reply_to_message, F.text, ~F.text.startswith("/")
        )

    @handle_bot_errors("Failed to start the draw")
    async def handle_lucky_draw(self, message: types.Message) -> None:
        logger.info(f"handle_lucky_draw {message.text!r}")
        try:
            await self.service.start_draw(
                message.chat.id,
                participant_from_user(message.from_user),
                message.text or "",
                is_private=message.chat.type == ChatType.PRIVATE,
            )
        except DrawError as e:
            if e.reason:
                await message.answer(e.reason)

    @handle_bot_errors("Failed to join the draw")
    async def handle_join_draw(self, message: types.Message) -> None:
        await self._join(message)

    @handle_bot_errors("Failed to join the draw")
    async def handle_reply(self, message: types.Message) -> None:
        await self._join(message, reply_to_message_id=message.reply_to_message.message_id)

    async def _join(self, message: types.Message, reply_to_message_id=None) -> None:
        participant = participant_from_user(message.from_user)
        try:
            joined = await self.service.join(
                message.chat.id, participant, reply_to_message_id=reply_to_message_id
            )
        except DrawError as e:
            # Rejections go to the sender privately to keep the group quiet
            await self.service.announcer.send(participant.id, e.reason)
            return

        if joined:
            logger.info(f"adding member {participant.handle or participant.id} to the session")


def setup_draw_handlers(dispatcher, service: LuckyDrawService) -> DrawHandlers:
    handler = DrawHandlers(service)
    handler.setup(dispatcher)
    return handler
