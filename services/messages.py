"""Message templates for draw announcements.

Templates use ``str.format`` placeholders, e.g. ``{prize}``, and are sent with
Telegram HTML formatting; user-supplied values are escaped before substitution.
Built-in English defaults can be overridden key by key from a JSON file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from core import get_logger
from core.exceptions import ConfigurationError, TemplateRenderError

logger = get_logger(__name__)


@dataclass(frozen=True)
class MessageTemplates:
    lucky_draw_start: str = (
        "🎉 <b>Lucky draw started!</b>\n\n"
        "Reply to this message or send /joinDraw to join. "
        "Winners will be drawn in {join_duration:g} minute(s)."
    )
    time_left_for_join: str = "⏳ {time_left:g} minute(s) left to join the draw!"
    there_are_n_members_joined: str = "👥 {number_of_members} members joined the draw."
    there_is_one_member_joined: str = "👤 Only one member joined the draw."
    no_one_joined: str = "😿 No one joined the draw."
    will_choose_one_person: str = "🎁 Drawing 1 winner of <b>{prize}</b>..."
    will_choose_number_of_persons: str = "🎁 Drawing {quantity} winners of <b>{prize}</b>..."
    winner_is: str = "🏆 The {place} winner is {winner}!"
    notify_winner: str = (
        "🎉 Congratulations {winner}! You won <b>{prize}</b>. "
        "Please contact {organizer} to claim it."
    )
    all_members_got_their_prize: str = "Everyone who joined has already won a prize."
    the_draw_is_over: str = "🏁 The draw is over. Thanks for joining!"
    the_draw_is_not_started_yet: str = "There is no draw in this chat yet."
    the_draw_is_already_started: str = (
        "A draw is already running in this chat and has not finished yet."
    )
    greeting: str = "Hi, I'm a lottery bot\n\nPlease enter /help to see the usage"
    help: str = (
        "<b>How to run a lucky draw</b>\n\n"
        "An admin sends:\n"
        "<code>/luckyDraw</code>\n"
        "<code>1 x Grand prize</code>\n"
        "<code>3 x T-shirt</code>\n\n"
        "Members join with /joinDraw or by replying to the draw message.\n"
        "/toss tosses the moon blocks."
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MessageTemplates":
        """Override defaults with the given key/value pairs."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown message keys: {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ConfigurationError(f"Message {key!r} must be a string")
        return replace(cls(), **dict(data))


def load_templates(path: Optional[Union[str, Path]] = None) -> MessageTemplates:
    """Load templates from a JSON file, falling back to built-in defaults.

    A missing file is not an error; a malformed one is.
    """
    if path is None:
        return MessageTemplates()

    file_path = Path(path)
    if not file_path.exists():
        logger.info(f"Messages file {file_path} not found, using defaults")
        return MessageTemplates()

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read messages file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Messages file {file_path} must hold a JSON object")

    templates = MessageTemplates.from_mapping(data)
    logger.info(f"Loaded {len(data)} message template(s) from {file_path}")
    return templates


def render_template(template: str, context: Mapping[str, Any]) -> str:
    """Substitute ``context`` into ``template``.

    Raises:
        TemplateRenderError: On unknown keys or malformed placeholders
    """
    try:
        return template.format_map(context)
    except KeyError as e:
        raise TemplateRenderError(f"Unknown template key {e}") from e
    except (ValueError, IndexError, AttributeError) as e:
        raise TemplateRenderError(f"Malformed template: {e}") from e
