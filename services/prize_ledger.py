"""Bookkeeping of prize tiers and the winners assigned to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from services.models import Participant


@dataclass
class PrizeEntry:
    name: str
    quantity: int
    winners: List[Participant] = field(default_factory=list)

    @property
    def remaining_slots(self) -> int:
        return self.quantity - len(self.winners)


class PrizeLedger:
    """Ordered prize entries. Entries are only ever appended."""

    def __init__(self) -> None:
        self._entries: List[PrizeEntry] = []

    def add_entry(self, name: str, quantity: int) -> int:
        """Append a prize entry and return its index."""
        if quantity < 1:
            raise ValueError("Prize quantity must be at least 1")
        if not name:
            raise ValueError("Prize name must not be empty")
        self._entries.append(PrizeEntry(name=name, quantity=quantity))
        return len(self._entries) - 1

    def record_winner(self, index: int, participant: Participant) -> None:
        entry = self._entries[index]
        if entry.remaining_slots <= 0:
            raise ValueError(f"Prize {entry.name!r} has no slots left")
        entry.winners.append(participant)

    def remaining_slots(self, index: int) -> int:
        return self._entries[index].remaining_slots

    def __getitem__(self, index: int) -> PrizeEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[PrizeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def total_winners(self) -> int:
        return sum(len(entry.winners) for entry in self._entries)
