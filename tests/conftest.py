"""Pytest configuration and fixtures."""

import random

import pytest

from services.announcer import Announcer
from services.draw_session import DrawTiming
from services.lottery import LuckyDrawService
from services.messages import MessageTemplates
from services.models import Participant
from services.selector import RandomSelector
from services.session_registry import SessionRegistry
from tests.fakes import FakeMessenger


@pytest.fixture
def organizer():
    return Participant(id=1, handle="organizer")


@pytest.fixture
def alice():
    return Participant(id=11, handle="alice")


@pytest.fixture
def bob():
    return Participant(id=12, handle="bob")


@pytest.fixture
def carol():
    return Participant(id=13, first_name="Carol", last_name="Smith")


@pytest.fixture
def messenger(organizer):
    return FakeMessenger(admins={organizer.id})


@pytest.fixture
def templates():
    return MessageTemplates()


@pytest.fixture
def announcer(messenger, templates):
    return Announcer(messenger, templates)


@pytest.fixture
def instant_timing():
    """No join window and no pacing delays."""
    return DrawTiming(
        join_window=0,
        prize_announce_delay=0,
        inter_winner_delay=0,
        report_interval=60,
        report_threshold=0,
    )


@pytest.fixture
def long_timing():
    """A join window that outlives every test."""
    return DrawTiming(
        join_window=600,
        prize_announce_delay=0,
        inter_winner_delay=0,
        report_interval=600,
        report_threshold=0,
    )


@pytest.fixture
def selector():
    return RandomSelector(rng=random.Random(20240501))


@pytest.fixture
def registry():
    return SessionRegistry()


@pytest.fixture
def make_service(announcer, registry):
    def factory(timing):
        return LuckyDrawService(
            announcer=announcer,
            registry=registry,
            timing=timing,
            selector_factory=lambda: RandomSelector(rng=random.Random(7)),
        )
    return factory
