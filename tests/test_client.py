"""Tests for the FlagBot client event handlers."""

import asyncio
import logging
from unittest.mock import AsyncMock, Mock, PropertyMock, patch

import discord
import pytest

from bot.client import FlagBot
from core.types import ModerationResult
from tests.helpers import make_message


@pytest.fixture
def handler():
    h = Mock()
    h.handle = AsyncMock(return_value=ModerationResult())
    return h


@pytest.fixture
def bot(handler):
    return FlagBot(handler, status="for flags")


class TestFlagBot:

    def test_requests_message_content_intent(self, bot):
        assert bot.intents.message_content

    @pytest.mark.asyncio
    async def test_on_message_spawns_moderation_task(self, bot, handler):
        message = make_message("sun{x}")

        await bot.on_message(message)
        await asyncio.gather(*list(bot._moderation_tasks))

        handler.handle.assert_awaited_once_with(message)
        assert bot.pending_moderations == 0

    @pytest.mark.asyncio
    async def test_messages_are_handled_concurrently(self, bot, handler):
        release = asyncio.Event()
        started = []

        async def slow_handle(message):
            started.append(message.id)
            await release.wait()
            return ModerationResult()

        handler.handle = slow_handle
        for i in range(3):
            await bot.on_message(make_message("sun{x}", message_id=i))
        await asyncio.sleep(0)

        assert sorted(started) == [0, 1, 2]
        assert bot.pending_moderations == 3

        release.set()
        await asyncio.wait(list(bot._moderation_tasks))
        assert bot.pending_moderations == 0

    @pytest.mark.asyncio
    async def test_ignores_own_messages(self, bot, handler):
        me = Mock()
        me.id = 3003
        message = make_message("sun{x}", author_id=3003)

        with patch.object(FlagBot, "user", new_callable=PropertyMock, return_value=me):
            await bot.on_message(message)

        assert bot.pending_moderations == 0
        handler.handle.assert_not_called()

    @pytest.mark.asyncio
    async def test_handler_crash_is_logged_not_raised(self, bot, handler, caplog):
        handler.handle = AsyncMock(side_effect=RuntimeError("boom"))
        message = make_message("sun{x}")

        with caplog.at_level(logging.ERROR, logger="flagbot"):
            task = bot.spawn_moderation(message)
            await task

        assert task.exception() is None
        assert "Moderation failed" in caplog.text

    @pytest.mark.asyncio
    async def test_on_ready_sets_watching_presence(self, bot):
        with patch.object(bot, "change_presence", AsyncMock()) as change_presence:
            await bot.on_ready()

        activity = change_presence.await_args.kwargs["activity"]
        assert activity.type == discord.ActivityType.watching
        assert activity.name == "for flags"
        assert bot.ready_once
