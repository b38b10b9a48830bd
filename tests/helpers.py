"""Fake Discord objects shared by the tests."""

from unittest.mock import AsyncMock, Mock


def make_message(content, message_id=1001, channel_id=2002, author_id=3003):
    """Build a fake discord.Message with async delete and channel.send."""
    message = Mock()
    message.id = message_id
    message.content = content
    message.delete = AsyncMock()
    message.channel = Mock()
    message.channel.id = channel_id
    message.channel.send = AsyncMock()
    message.author = Mock()
    message.author.id = author_id
    message.author.name = "hacker"
    message.author.mention = f"<@{author_id}>"
    return message
