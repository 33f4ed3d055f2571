"""Bot initialization module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from core.logger import get_logger

if TYPE_CHECKING:
    from bot.client import TelegramBot
    from config import Config
    from services import LuckyDrawService, MessageTemplates, SessionRegistry

logger = get_logger(__name__)


class BotInitializer:
    """Wires the Telegram transport to the draw services and registers handlers."""

    def __init__(self, config: Config, templates: MessageTemplates, registry: SessionRegistry):
        self.config = config
        self.templates = templates
        self.registry = registry

    async def initialize(self) -> Tuple[TelegramBot, LuckyDrawService]:
        from bot.client import TelegramBot
        from bot.handlers import setup_common_handlers, setup_draw_handlers
        from services import Announcer, DrawTiming, LuckyDrawService

        bot = TelegramBot(token=self.config.bot_token, rate_limit=self.config.bot_rate_limit)

        service = LuckyDrawService(
            announcer=Announcer(bot, self.templates),
            registry=self.registry,
            timing=DrawTiming.from_config(self.config),
            prize_separator=self.config.prize_separator,
        )
        logger.info("✅ Draw service initialized")

        # Draw commands first so replies to the anchor are not shadowed
        setup_draw_handlers(bot.dispatcher, service)
        setup_common_handlers(bot.dispatcher, self.templates)
        logger.info("✅ Handlers registered")

        return bot, service
