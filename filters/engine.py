"""
Flag filter engine - main entry point and orchestration.

This module ties together matching, selection and delivery.
"""
from __future__ import annotations

import logging
from typing import Optional

import discord

from core.config import ConfigurationSet
from core.types import ModerationResult

from .delivery import (
    author_only_mentions,
    build_reaction_text,
    delete_message,
    send_to_channel,
)
from .matching import PatternMatcher
from .selection import ResponseSelector

logger = logging.getLogger("flagbot.filter")


class ModerationHandler:
    """
    Handles one message at a time, with no state kept between messages.

    A matching message is deleted, then a reaction phrase mentioning the
    author is sent, then a media link. Every step is attempted even when an
    earlier one fails.
    """

    def __init__(
        self,
        config: ConfigurationSet,
        selector: Optional[ResponseSelector] = None,
    ) -> None:
        self.config = config
        self.matcher = PatternMatcher(config.patterns)
        self.selector = selector or ResponseSelector()

    async def handle(self, message: discord.Message) -> ModerationResult:
        result = ModerationResult()

        pattern = self.matcher.first_match(message.content)
        if pattern is None:
            return result
        result.matched = True

        logger.info(
            "Removed Message. message=%r author=%s pattern=%r",
            message.content,
            message.author.name,
            pattern.pattern,
        )

        error = await delete_message(message)
        if error is None:
            result.deleted = True
        else:
            result.errors.append(error)

        phrase = self.selector.pick(self.config.responses)
        error = await send_to_channel(
            message,
            build_reaction_text(message, phrase),
            "post-delete text",
            allowed_mentions=author_only_mentions(message),
        )
        if error is None:
            result.response_sent = True
        else:
            result.errors.append(error)

        gif = self.selector.pick(self.config.gifs)
        error = await send_to_channel(message, gif, "post-delete gif")
        if error is None:
            result.media_sent = True
        else:
            result.errors.append(error)

        return result
