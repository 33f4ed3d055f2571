"""Value types shared by the draw services."""

from __future__ import annotations

from dataclasses import dataclass

from aiogram.utils.text_decorations import html_decoration


@dataclass(frozen=True)
class Participant:
    """A chat member taking part in a draw."""

    id: int
    handle: str = ""
    first_name: str = ""
    last_name: str = ""

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.handle or str(self.id)

    def mention(self) -> str:
        """HTML mention: ``@handle`` or an inline user link."""
        if self.handle:
            return f"@{html_decoration.quote(self.handle)}"
        return html_decoration.link(
            html_decoration.quote(self.display_name), f"tg://user?id={self.id}"
        )
