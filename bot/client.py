"""
Discord bot client - lean event handling.

Every incoming message is handed to the ModerationHandler in its own task.
"""
from __future__ import annotations

import asyncio
import logging

import discord

from core.constants import DEFAULT_STATUS
from filters import ModerationHandler

logger = logging.getLogger("flagbot")


class FlagBot(discord.Client):
    """
    Main Discord bot client.

    Handles:
    - on_ready (presence)
    - on_message (spawns one moderation task per message)

    Filtering logic lives in ModerationHandler.
    """

    def __init__(self, handler: ModerationHandler, status: str = DEFAULT_STATUS) -> None:
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents)

        self.handler = handler
        self.status_text = status
        self.ready_once = False
        self._moderation_tasks: set[asyncio.Task] = set()

    # ─── Lifecycle ────────────────────────────────────────────────────────────

    async def on_ready(self) -> None:
        """Called when the bot is ready (and again after each resume)."""
        if not self.ready_once:
            logger.info("Bot ready as %s", self.user)
            self.ready_once = True
        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name=self.status_text,
            )
        )

    # ─── Message Events ───────────────────────────────────────────────────────

    async def on_message(self, message: discord.Message) -> None:
        """Dispatch every visible message to the moderation handler."""
        if self.user is not None and message.author.id == self.user.id:
            return
        self.spawn_moderation(message)

    def spawn_moderation(self, message: discord.Message) -> asyncio.Task:
        task = asyncio.create_task(self._moderate(message))
        self._moderation_tasks.add(task)
        task.add_done_callback(self._moderation_tasks.discard)
        return task

    async def _moderate(self, message: discord.Message) -> None:
        try:
            await self.handler.handle(message)
        except Exception:
            logger.exception(
                "Moderation failed. messageID=%s channelID=%s",
                getattr(message, "id", None),
                getattr(getattr(message, "channel", None), "id", None),
            )

    @property
    def pending_moderations(self) -> int:
        return len(self._moderation_tasks)
