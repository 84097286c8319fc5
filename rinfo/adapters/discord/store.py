"""MessageStore implementation backed by discord.Client."""

from typing import Any, List

import discord

from rinfo.domain.errors import DecodeFailure, FetchFailure
from rinfo.domain.models import FetchedMessage, MessageReference, ReactionInfo


def _emoji_name(emoji: Any) -> str:
    """Unicode character for standard emoji, name for custom ones."""
    if isinstance(emoji, str):
        return emoji
    return emoji.name or str(emoji.id)


def _emoji_display(emoji: Any) -> str:
    if isinstance(emoji, str):
        return emoji
    # <:name:id> markup is unreadable inside a code block
    return f":{_emoji_name(emoji)}:"


def _to_fetched(reference: MessageReference, message: Any) -> FetchedMessage:
    try:
        reactions = [
            ReactionInfo(
                emoji_name=_emoji_name(r.emoji),
                display=_emoji_display(r.emoji),
                count=r.count,
                handle=r,
            )
            for r in message.reactions
        ]
        return FetchedMessage(
            reference=reference,
            author_id=message.author.id,
            reactions=reactions,
        )
    except (AttributeError, TypeError) as e:
        raise DecodeFailure(f"unexpected message shape: {e}") from e


class DiscordMessageStore:
    """MessageStore port implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def _resolve_channel(self, channel_id: int):
        channel = self._client.get_channel(channel_id)
        if channel is None:
            channel = await self._client.fetch_channel(channel_id)
        return channel

    async def fetch_message(self, reference: MessageReference) -> FetchedMessage:
        try:
            channel = await self._resolve_channel(reference.channel_id)
            fetch = getattr(channel, "fetch_message", None)
            if fetch is None:
                raise DecodeFailure(f"channel {reference.channel_id} does not hold messages")
            message = await fetch(reference.message_id)
        except discord.NotFound as e:
            raise FetchFailure("Unknown channel or message") from e
        except discord.Forbidden as e:
            raise FetchFailure("Missing access to this channel") from e
        except discord.HTTPException as e:
            raise FetchFailure(str(e)) from e
        return _to_fetched(reference, message)

    async def fetch_reactors(
        self, reference: MessageReference, reaction: ReactionInfo
    ) -> List[int]:
        """All users who reacted with this emoji; discord.py pages through them."""
        if reaction.handle is None:
            raise FetchFailure(f"no reaction handle for {reaction.emoji_name}")
        try:
            return [user.id async for user in reaction.handle.users(limit=None)]
        except discord.HTTPException as e:
            raise FetchFailure(f"{reaction.emoji_name}: {e}") from e
