"""Tests for LuckyDrawService entry points and prize-line parsing."""

import pytest

from core import DrawStatus
from core.exceptions import (
    DrawAlreadyRunningError,
    DrawAuthorizationError,
    DrawClosedError,
    DrawNotStartedError,
    InvalidDrawInputError,
)
from services.lottery import parse_prize_lines
from tests.fakes import CHAT_ID

DRAW_TEXT = "/luckyDraw\n1 x gold\n2 x silver"


def test_parse_prize_lines():
    raw = "/luckyDraw something\n  1 x Grand prize \n\n3x T-shirt\n10 x Xbox"
    assert parse_prize_lines(raw) == [(1, "Grand prize"), (3, "T-shirt"), (10, "Xbox")]


def test_parse_custom_separator():
    assert parse_prize_lines("/luckyDraw\n2 * mug", separator="*") == [(2, "mug")]


@pytest.mark.parametrize(
    "raw,reason",
    [
        ("/luckyDraw", "invalid input format"),
        ("/luckyDraw\n   \n", "invalid input format"),
        ("/luckyDraw\n1 gold", "invalid prize entry format"),
        ("/luckyDraw\n1 x   ", "invalid prize entry format"),
        ("/luckyDraw\none x gold", "invalid quantity format"),
        ("/luckyDraw\n0 x gold", "invalid quantity format"),
        ("/luckyDraw\n1 x gold\n-2 x silver", "invalid quantity format"),
    ],
)
def test_parse_rejects_malformed_input(raw, reason):
    with pytest.raises(InvalidDrawInputError) as exc_info:
        parse_prize_lines(raw)
    assert exc_info.value.reason == reason


@pytest.mark.asyncio
async def test_start_draw_posts_anchor_and_runs(make_service, instant_timing, registry, messenger, organizer, templates):
    service = make_service(instant_timing)

    session = await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)
    assert await registry.get(CHAT_ID) is session
    assert session.anchor_message_id is not None
    assert [entry.name for entry in session.ledger] == ["gold", "silver"]

    await service.wait_all()

    assert session.status is DrawStatus.CLOSED
    chat_texts = messenger.texts_to(CHAT_ID)
    assert chat_texts[0].startswith("🎉 *Lucky draw started!*")
    assert chat_texts[-1] == templates.no_one_joined


@pytest.mark.asyncio
async def test_start_draw_rejects_private_chat(make_service, long_timing, registry, organizer):
    service = make_service(long_timing)

    with pytest.raises(DrawAuthorizationError) as exc_info:
        await service.start_draw(organizer.id, organizer, DRAW_TEXT, is_private=True)

    assert exc_info.value.reason == "can not run in a private chat"
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_start_draw_rejects_non_admin(make_service, long_timing, registry, alice, messenger):
    service = make_service(long_timing)

    with pytest.raises(DrawAuthorizationError) as exc_info:
        await service.start_draw(CHAT_ID, alice, DRAW_TEXT)

    assert exc_info.value.reason == "you are not an admin"
    assert len(registry) == 0
    assert messenger.sent == []


@pytest.mark.asyncio
async def test_start_draw_rejects_bad_input_without_session(make_service, long_timing, registry, organizer):
    service = make_service(long_timing)

    with pytest.raises(InvalidDrawInputError):
        await service.start_draw(CHAT_ID, organizer, "/luckyDraw\nabc x gold")
    with pytest.raises(InvalidDrawInputError):
        await service.start_draw(CHAT_ID, organizer, "/luckyDraw")

    assert await registry.get(CHAT_ID) is None


@pytest.mark.asyncio
async def test_second_draw_while_running_is_rejected(make_service, long_timing, registry, organizer, templates):
    service = make_service(long_timing)
    first = await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)

    try:
        with pytest.raises(DrawAlreadyRunningError) as exc_info:
            await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)
        assert exc_info.value.reason == templates.the_draw_is_already_started
        assert await registry.get(CHAT_ID) is first
    finally:
        await service.shutdown()


@pytest.mark.asyncio
async def test_new_draw_after_previous_closed(make_service, instant_timing, registry, organizer):
    service = make_service(instant_timing)
    first = await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)
    await service.wait_all()
    assert first.status is DrawStatus.CLOSED

    second = await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)
    await service.wait_all()

    assert second is not first
    assert await registry.get(CHAT_ID) is second


@pytest.mark.asyncio
async def test_join_without_draw(make_service, long_timing, alice, templates):
    service = make_service(long_timing)

    with pytest.raises(DrawNotStartedError) as exc_info:
        await service.join(CHAT_ID, alice)

    assert exc_info.value.reason == templates.the_draw_is_not_started_yet
    assert await service.status(CHAT_ID) is None


@pytest.mark.asyncio
async def test_join_open_draw(make_service, long_timing, organizer, alice):
    service = make_service(long_timing)
    session = await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)

    try:
        assert await service.join(CHAT_ID, alice) is True
        assert await service.join(CHAT_ID, alice) is False
        assert list(session.roster) == [alice.id]
        assert await service.status(CHAT_ID) is DrawStatus.OPEN
    finally:
        await service.shutdown()


@pytest.mark.asyncio
async def test_join_by_reply_requires_anchor(make_service, long_timing, organizer, alice, bob):
    service = make_service(long_timing)
    session = await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)

    try:
        assert await service.join(CHAT_ID, alice, reply_to_message_id=-5) is False
        assert await service.join(
            CHAT_ID, bob, reply_to_message_id=session.anchor_message_id
        ) is True
        assert list(session.roster) == [bob.id]
    finally:
        await service.shutdown()


@pytest.mark.asyncio
async def test_reply_without_draw_is_ignored(make_service, long_timing, alice):
    service = make_service(long_timing)

    assert await service.join(CHAT_ID, alice, reply_to_message_id=77) is False


@pytest.mark.asyncio
async def test_join_closed_draw(make_service, instant_timing, organizer, alice, templates):
    service = make_service(instant_timing)
    await service.start_draw(CHAT_ID, organizer, DRAW_TEXT)
    await service.wait_all()

    with pytest.raises(DrawClosedError) as exc_info:
        await service.join(CHAT_ID, alice)

    assert exc_info.value.reason == templates.the_draw_is_over
    assert await service.status(CHAT_ID) is DrawStatus.CLOSED
