"""Aggregate bot handlers for dispatch registration."""

from .common import CommonHandlers, setup_common_handlers
from .draw import DrawHandlers, participant_from_user, setup_draw_handlers

__all__ = [
    "CommonHandlers",
    "setup_common_handlers",
    "DrawHandlers",
    "participant_from_user",
    "setup_draw_handlers",
]
