"""Renders message templates and sends them through the chat transport."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from core import get_logger
from core.exceptions import TemplateRenderError
from services.messages import MessageTemplates, render_template

logger = get_logger(__name__)


class Messenger(Protocol):
    """Capabilities the draw engine needs from the chat transport."""

    async def send_message(self, destination: int, text: str) -> Optional[int]:
        """Send ``text`` and return the sent message id. Raises on failure."""
        ...

    async def is_admin(self, chat_id: int, user_id: int) -> bool:
        ...


class Announcer:
    """Render-and-send helper.

    Pacing is the caller's job. Failures never propagate: a template that
    cannot be rendered or a message that cannot be delivered is logged and
    reported as ``None``.
    """

    def __init__(self, messenger: Messenger, templates: MessageTemplates) -> None:
        self.messenger = messenger
        self.templates = templates

    def render(self, template: str, **context: Any) -> str:
        try:
            return render_template(template, context)
        except TemplateRenderError as e:
            logger.error(f"Failed to render message template: {e}")
            return ""

    async def send(self, destination: int, text: str) -> Optional[int]:
        if not text:
            logger.warning(f"Skipping empty message to {destination}")
            return None
        try:
            return await self.messenger.send_message(destination, text)
        except Exception as e:
            logger.error(f"Failed to send message to {destination}: {e}")
            return None

    async def announce(self, destination: int, template: str, **context: Any) -> Optional[int]:
        """Render ``template`` with ``context`` and send it to ``destination``."""
        return await self.send(destination, self.render(template, **context))
