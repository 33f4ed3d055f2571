"""Services package."""

from .models import Participant
from .selector import RandomSelector
from .prize_ledger import PrizeEntry, PrizeLedger
from .messages import MessageTemplates, load_templates, render_template
from .announcer import Announcer, Messenger
from .draw_session import DrawSession, DrawTiming, ordinal
from .session_registry import SessionRegistry, init_session_registry, get_session_registry
from .lottery import LuckyDrawService, parse_prize_lines

__all__ = [
    "Participant",
    "RandomSelector",
    "PrizeEntry",
    "PrizeLedger",
    "MessageTemplates",
    "load_templates",
    "render_template",
    "Announcer",
    "Messenger",
    "DrawSession",
    "DrawTiming",
    "ordinal",
    "SessionRegistry",
    "init_session_registry",
    "get_session_registry",
    "LuckyDrawService",
    "parse_prize_lines",
]
