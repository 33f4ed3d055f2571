"""Lucky draw entry points used by the bot command layer."""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Set, Tuple

from core import get_logger, DrawDefaults, DrawStatus
from core.exceptions import (
    DrawAlreadyRunningError,
    DrawAuthorizationError,
    DrawNotStartedError,
    InvalidDrawInputError,
)
from services.announcer import Announcer
from services.draw_session import DrawSession, DrawTiming
from services.messages import MessageTemplates
from services.models import Participant
from services.selector import RandomSelector
from services.session_registry import SessionRegistry

logger = get_logger(__name__)


def parse_prize_lines(
    raw_text: str, separator: str = DrawDefaults.PRIZE_SEPARATOR
) -> List[Tuple[int, str]]:
    """Parse ``<quantity><separator><prize name>`` lines.

    The first line holds the command and is discarded. Blank lines are
    skipped.

    Returns:
        List of (quantity, prize name) in declaration order

    Raises:
        InvalidDrawInputError: If there is no prize line or a line is malformed
    """
    lines = [line.strip() for line in (raw_text or "").splitlines()[1:]]
    lines = [line for line in lines if line]
    if not lines:
        raise InvalidDrawInputError("invalid input format")

    prizes: List[Tuple[int, str]] = []
    for line in lines:
        quantity_text, found, name = line.partition(separator)
        name = name.strip()
        if not found or not name:
            raise InvalidDrawInputError("invalid prize entry format")

        try:
            quantity = int(quantity_text.strip())
        except ValueError:
            raise InvalidDrawInputError("invalid quantity format")
        if quantity < 1:
            raise InvalidDrawInputError("invalid quantity format")

        prizes.append((quantity, name))
    return prizes


class LuckyDrawService:
    """Starts draws, routes joins and reports draw status per chat."""

    def __init__(
        self,
        announcer: Announcer,
        registry: SessionRegistry,
        timing: Optional[DrawTiming] = None,
        prize_separator: str = DrawDefaults.PRIZE_SEPARATOR,
        selector_factory: Callable[[], RandomSelector] = RandomSelector,
    ) -> None:
        self.announcer = announcer
        self.registry = registry
        self.timing = timing or DrawTiming()
        self.prize_separator = prize_separator
        self.selector_factory = selector_factory
        self._tasks: Set[asyncio.Task] = set()

    @property
    def templates(self) -> MessageTemplates:
        return self.announcer.templates

    async def start_draw(
        self,
        chat_id: int,
        organizer: Participant,
        raw_text: str,
        *,
        is_private: bool = False,
    ) -> DrawSession:
        """Validate the request, register a new session and start it.

        Raises:
            DrawAuthorizationError: Private chat or organizer is not an admin
            DrawAlreadyRunningError: The chat already has an unfinished draw
            InvalidDrawInputError: The prize lines are malformed
        """
        logger.info(f"Lucky draw requested in chat {chat_id} by {organizer.id}")

        if is_private:
            raise DrawAuthorizationError("can not run in a private chat")

        if not await self.announcer.messenger.is_admin(chat_id, organizer.id):
            raise DrawAuthorizationError("you are not an admin")

        already_running = self.announcer.render(self.templates.the_draw_is_already_started)
        existing = await self.registry.get(chat_id)
        if existing is not None and not existing.is_closed:
            raise DrawAlreadyRunningError(already_running)

        prizes = parse_prize_lines(raw_text, self.prize_separator)

        session = DrawSession(
            chat_id=chat_id,
            organizer=organizer,
            prizes=prizes,
            announcer=self.announcer,
            timing=self.timing,
            selector=self.selector_factory(),
        )
        await self.registry.register(chat_id, session, already_running)

        session.anchor_message_id = await self.announcer.announce(
            chat_id,
            self.templates.lucky_draw_start,
            join_duration=self.timing.join_window / 60,
        )
        if session.anchor_message_id is None:
            logger.warning(f"Draw in chat {chat_id} has no anchor message, reply joins are off")

        task = asyncio.create_task(session.run(), name=f"lucky-draw-{chat_id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        logger.info(f"Lucky draw started in chat {chat_id} with {len(prizes)} prize entr(ies)")
        return session

    async def join(
        self,
        chat_id: int,
        participant: Participant,
        *,
        reply_to_message_id: Optional[int] = None,
    ) -> bool:
        """Join the chat's draw.

        With ``reply_to_message_id`` the call comes from a reply; replies to
        anything but the draw's anchor message are ignored.

        Returns:
            True if the participant was added, False if ignored or already in

        Raises:
            DrawNotStartedError: The chat has no draw
            DrawClosedError: The draw no longer accepts joins
        """
        session = await self.registry.get(chat_id)

        if reply_to_message_id is not None:
            if session is None or reply_to_message_id != session.anchor_message_id:
                return False

        if session is None:
            raise DrawNotStartedError(self.announcer.render(self.templates.the_draw_is_not_started_yet))

        return await session.join(participant)

    async def status(self, chat_id: int) -> Optional[DrawStatus]:
        session = await self.registry.get(chat_id)
        return session.status if session is not None else None

    async def wait_all(self) -> None:
        """Wait for every running draw to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def shutdown(self) -> None:
        """Cancel running draws. Only used when the process exits."""
        for task in list(self._tasks):
            task.cancel()
        await self.wait_all()
