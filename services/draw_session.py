"""Lucky draw session: join window, winner selection and staged announcements."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from aiogram.utils.text_decorations import html_decoration

from core import get_session_logger, DrawDefaults, DrawStatus, ORDINAL_WORDS
from core.exceptions import DrawClosedError, PoolExhaustedError
from services.announcer import Announcer
from services.messages import MessageTemplates
from services.models import Participant
from services.prize_ledger import PrizeEntry, PrizeLedger
from services.selector import RandomSelector

if TYPE_CHECKING:
    from config import Config


def ordinal(position: int) -> str:
    """English label for a 1-based place: ``first``..``tenth``, then ``11th``, ``21st``..."""
    if position < 1:
        raise ValueError("Position must be at least 1")
    if position <= len(ORDINAL_WORDS):
        return ORDINAL_WORDS[position - 1]
    if 10 <= position % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(position % 10, "th")
    return f"{position}{suffix}"


@dataclass(frozen=True)
class DrawTiming:
    """Pacing of a draw, all values in seconds."""
    join_window: float = DrawDefaults.JOIN_WINDOW
    prize_announce_delay: float = DrawDefaults.PRIZE_ANNOUNCE_DELAY
    inter_winner_delay: float = DrawDefaults.INTER_WINNER_DELAY
    report_interval: float = DrawDefaults.REPORT_INTERVAL
    report_threshold: float = DrawDefaults.REPORT_THRESHOLD

    def __post_init__(self) -> None:
        if self.report_interval <= 0:
            raise ValueError("report_interval must be positive")
        if min(self.join_window, self.prize_announce_delay, self.inter_winner_delay) < 0:
            raise ValueError("Durations must not be negative")

    @classmethod
    def from_config(cls, config: Config) -> "DrawTiming":
        return cls(
            join_window=config.join_window,
            prize_announce_delay=config.prize_announce_delay,
            inter_winner_delay=config.inter_winner_delay,
            report_interval=config.report_interval,
            report_threshold=config.report_threshold,
        )


class DrawSession:
    """One lucky draw in one chat.

    The session moves ``OPEN -> RESOLVING -> CLOSED``. Roster, pending ids,
    winners and status are only touched while holding ``_lock``; the
    announcements themselves run outside the lock so that joins arriving
    during resolution are rejected right away instead of queueing behind
    the pacing delays.

    ``pending_ids`` keeps every id that ever joined, in join order. Winners
    are removed from ``roster`` only, so the selector skips their ids.
    """

    def __init__(
        self,
        chat_id: int,
        organizer: Participant,
        prizes: Iterable[Tuple[int, str]],
        announcer: Announcer,
        timing: Optional[DrawTiming] = None,
        selector: Optional[RandomSelector] = None,
    ) -> None:
        self.chat_id = chat_id
        self.organizer = organizer
        self.timing = timing or DrawTiming()
        self.roster: Dict[int, Participant] = {}
        self.winners: Dict[int, Participant] = {}
        self.pending_ids: List[int] = []
        self.ledger = PrizeLedger()
        for quantity, name in prizes:
            self.ledger.add_entry(name, quantity)
        self.status = DrawStatus.OPEN
        self.anchor_message_id: Optional[int] = None
        # Set when the window wait begins
        self.started_at: Optional[float] = None
        self.deadline: Optional[float] = None

        self._lock = asyncio.Lock()
        self._announcer = announcer
        self._selector = selector or RandomSelector()
        self.logger = get_session_logger(chat_id)

    @property
    def templates(self) -> MessageTemplates:
        return self._announcer.templates

    @property
    def is_closed(self) -> bool:
        return self.status is DrawStatus.CLOSED

    async def join(self, participant: Participant) -> bool:
        """Add ``participant`` to the roster.

        Returns:
            True if the participant was added, False if already joined

        Raises:
            DrawClosedError: If the session no longer accepts joins
        """
        async with self._lock:
            if self.status is not DrawStatus.OPEN:
                raise DrawClosedError(self._announcer.render(self.templates.the_draw_is_over))
            if participant.id in self.roster:
                return False
            self.roster[participant.id] = participant
            self.pending_ids.append(participant.id)
            size = len(self.roster)

        self.logger.info(f"Participant {participant.id} ({participant.handle}) joined, roster={size}")
        return True

    async def run(self) -> None:
        """Wait for the join window to close, then resolve the draw."""
        try:
            await self.wait_for_window()
            await self.resolve()
        except Exception:
            self.logger.exception("Draw session failed, closing it")
            await self._close()

    async def wait_for_window(self) -> None:
        """Block until the deadline, posting progress reports on each tick."""
        self.started_at = time.monotonic()
        self.deadline = self.started_at + self.timing.join_window
        next_tick = self.started_at + self.timing.report_interval
        while True:
            now = time.monotonic()
            if now >= self.deadline:
                return

            await asyncio.sleep(min(next_tick, self.deadline) - now)
            if time.monotonic() >= self.deadline:
                return

            next_tick += self.timing.report_interval
            time_left = max(0.0, self.deadline - time.monotonic())
            if time_left <= self.timing.report_threshold:
                await self._announcer.announce(
                    self.chat_id,
                    self.templates.time_left_for_join,
                    time_left=round(time_left / 60, 1),
                )

    async def resolve(self) -> None:
        """Select and announce winners for every prize entry. Runs once."""
        async with self._lock:
            if self.status is not DrawStatus.OPEN:
                self.logger.warning(f"Resolution requested in status {self.status.value}, ignoring")
                return
            self.status = DrawStatus.RESOLVING
            joined = len(self.roster)

        self.logger.info(f"Join window closed with {joined} participant(s)")

        if joined == 0:
            await self._announcer.announce(self.chat_id, self.templates.no_one_joined)
            await self._close()
            return

        members_template = (
            self.templates.there_is_one_member_joined
            if joined == 1
            else self.templates.there_are_n_members_joined
        )
        await self._announcer.announce(self.chat_id, members_template, number_of_members=joined)

        for index, entry in enumerate(self.ledger):
            if not await self._draw_entry(index):
                await self._announcer.announce(
                    self.chat_id, self.templates.all_members_got_their_prize
                )
                break

            choose_template = (
                self.templates.will_choose_one_person
                if entry.quantity == 1
                else self.templates.will_choose_number_of_persons
            )
            await self._announcer.announce(
                self.chat_id,
                choose_template,
                quantity=entry.quantity,
                prize=html_decoration.quote(entry.name),
            )
            await self._reveal(entry)

        await self._announcer.announce(self.chat_id, self.templates.the_draw_is_over)
        await self._close()

    async def _draw_entry(self, index: int) -> bool:
        """Fill the entry's slots from the roster. False if the roster was already empty."""
        async with self._lock:
            if not self.roster:
                return False

            while self.ledger.remaining_slots(index) > 0 and self.roster:
                try:
                    winner_id = self._selector.pick(self.pending_ids, self.roster.keys())
                except PoolExhaustedError:
                    break
                participant = self.roster.pop(winner_id)
                self.winners[winner_id] = participant
                self.ledger.record_winner(index, participant)

            entry = self.ledger[index]
            self.logger.info(
                f"Prize {entry.name!r}: {len(entry.winners)}/{entry.quantity} winner(s) drawn"
            )
            return True

    async def _reveal(self, entry: PrizeEntry) -> None:
        # Places count down, so the last reveal of an entry is its first place
        count = len(entry.winners)
        prize = html_decoration.quote(entry.name)
        for position, winner in enumerate(entry.winners):
            delay = (
                self.timing.prize_announce_delay
                if position == 0
                else self.timing.inter_winner_delay
            )
            await asyncio.sleep(delay)

            place_number = count - position
            await self._announcer.announce(
                self.chat_id,
                self.templates.winner_is,
                place=ordinal(place_number),
                place_number=place_number,
                winner=winner.mention(),
                prize=prize,
            )
            await self._announcer.announce(
                winner.id,
                self.templates.notify_winner,
                prize=prize,
                winner=winner.mention(),
                organizer=self.organizer.mention(),
            )

    async def _close(self) -> None:
        async with self._lock:
            if self.status is DrawStatus.CLOSED:
                return
            self.status = DrawStatus.CLOSED
        self.logger.info(f"Draw closed with {len(self.winners)} winner(s)")
