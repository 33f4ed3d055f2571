"""Application initialization orchestrator."""

from __future__ import annotations

from contextlib import suppress
from typing import TYPE_CHECKING, Optional

from core.exceptions import ConfigurationError
from core.logger import get_logger

if TYPE_CHECKING:
    from config import Config

logger = get_logger(__name__)


class ApplicationInitializer:
    """Orchestrates application initialization and lifecycle."""

    def __init__(self, config: Optional[Config] = None, messages_file: Optional[str] = None):
        if config is None:
            from config import load_config
            config = load_config()
        self.config = config
        self.messages_file = messages_file or config.messages_file
        self.templates = None
        self.registry = None
        self.bot = None
        self.draw_service = None

    async def initialize(self) -> None:
        """Initialize all application components."""
        self._init_templates()
        self._init_registry()
        await self._init_bot()

    async def run(self) -> None:
        """Run the bot until polling stops."""
        if self.bot is None:
            raise RuntimeError("Application is not initialized")

        logger.info("🤖 Telegram bot started")
        try:
            await self.bot.start()
        finally:
            await self.cleanup()

    async def cleanup(self) -> None:
        """Cleanup resources."""
        with suppress(Exception):
            if self.draw_service:
                await self.draw_service.shutdown()
        with suppress(Exception):
            if self.bot:
                await self.bot.stop()

    def _init_templates(self) -> None:
        from services.messages import load_templates
        self.templates = load_templates(self.messages_file)
        logger.info("✅ Message templates loaded")

    def _init_registry(self) -> None:
        from services.session_registry import init_session_registry
        self.registry = init_session_registry()
        logger.info("✅ Session registry initialized")

    async def _init_bot(self) -> None:
        """Initialize Telegram bot."""
        if not self.config.bot_token:
            raise ConfigurationError("env TELEGRAM_BOT_TOKEN is not set")

        from bot.initializer import BotInitializer
        bot_init = BotInitializer(self.config, self.templates, self.registry)
        self.bot, self.draw_service = await bot_init.initialize()
        logger.info("✅ Bot initialized successfully")
