"""
Message actions for the flag filter.

Thin wrappers around the Discord API calls. Failures are logged with the
message and channel IDs and reported back as False, never raised.
"""
from __future__ import annotations

import logging
from typing import Optional

import discord

logger = logging.getLogger("flagbot.filter")


def build_reaction_text(message: discord.Message, phrase: str) -> str:
    """Prefix the phrase with a mention of the message author."""
    return f"{message.author.mention} {phrase}"


def author_only_mentions(message: discord.Message) -> discord.AllowedMentions:
    return discord.AllowedMentions(
        everyone=False,
        users=[message.author],
        roles=False,
        replied_user=False,
    )


async def delete_message(message: discord.Message) -> Optional[str]:
    """
    Delete a message.

    Returns None on success, or a short error description.
    """
    try:
        await message.delete()
    except discord.HTTPException as e:
        logger.error(
            "Could not delete message. messageID=%s channelID=%s error=%s",
            message.id,
            message.channel.id,
            e,
        )
        return f"delete: {e}"
    except Exception as e:
        logger.exception(
            "Unexpected error deleting message. messageID=%s channelID=%s",
            message.id,
            message.channel.id,
        )
        return f"delete: {e}"
    return None


async def send_to_channel(
    message: discord.Message,
    content: str,
    what: str,
    allowed_mentions: Optional[discord.AllowedMentions] = None,
) -> Optional[str]:
    """
    Send content to the channel the message came from.

    `what` names the message in logs ("post-delete text", "post-delete gif").
    Returns None on success, or a short error description.
    """
    try:
        if allowed_mentions is None:
            await message.channel.send(content)
        else:
            await message.channel.send(content, allowed_mentions=allowed_mentions)
    except discord.HTTPException as e:
        logger.error(
            "Could not send %s. messageID=%s channelID=%s error=%s",
            what,
            message.id,
            message.channel.id,
            e,
        )
        return f"{what}: {e}"
    except Exception as e:
        logger.exception(
            "Unexpected error sending %s. messageID=%s channelID=%s",
            what,
            message.id,
            message.channel.id,
        )
        return f"{what}: {e}"
    return None
