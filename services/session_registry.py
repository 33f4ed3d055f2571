"""Process-wide mapping from chat id to its current draw session."""

from __future__ import annotations

import asyncio
from typing import Dict, Optional

from core import get_logger
from core.exceptions import DrawAlreadyRunningError
from services.draw_session import DrawSession

logger = get_logger(__name__)


class SessionRegistry:
    """At most one draw per chat.

    Closed sessions stay registered until the next accepted draw replaces
    them, so late joiners can be told the draw is over. The registry lock
    only guards the map; each session has its own lock.
    """

    def __init__(self) -> None:
        self._sessions: Dict[int, DrawSession] = {}
        self._lock = asyncio.Lock()

    async def get(self, chat_id: int) -> Optional[DrawSession]:
        async with self._lock:
            return self._sessions.get(chat_id)

    async def register(
        self, chat_id: int, session: DrawSession, already_running_reason: str = ""
    ) -> None:
        """Store ``session`` for ``chat_id``.

        Raises:
            DrawAlreadyRunningError: If the chat has a session that is not closed
        """
        async with self._lock:
            current = self._sessions.get(chat_id)
            if current is not None and not current.is_closed:
                raise DrawAlreadyRunningError(
                    already_running_reason or "a draw is already running in this chat"
                )
            self._sessions[chat_id] = session
        logger.info(f"Registered draw session for chat {chat_id}")

    def __len__(self) -> int:
        return len(self._sessions)


_registry: Optional[SessionRegistry] = None


def init_session_registry() -> SessionRegistry:
    """Initialize the global (empty) session registry.

    Returns:
        Initialized registry
    """
    global _registry
    _registry = SessionRegistry()
    return _registry


def get_session_registry() -> SessionRegistry:
    """Get the global session registry.

    Raises:
        RuntimeError: If the registry is not initialized
    """
    if _registry is None:
        raise RuntimeError("Session registry is not initialized")
    return _registry
