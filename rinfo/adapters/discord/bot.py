"""Discord client for the reaction info bot.

Event hooks stay thin: they turn gateway events into jobs and hand them to
the EventDispatcher. discord.py owns the gateway connection and keeps the
recent-message cache (max_messages); nothing here writes to it.
"""

import datetime
import sys
from typing import List, Optional

import discord
from discord import app_commands

from rinfo.adapters.discord.commands import register_commands
from rinfo.adapters.discord.store import DiscordMessageStore
from rinfo.config import BotConfig
from rinfo.dispatcher import EventDispatcher
from rinfo.domain.commands import CommandHandler
from rinfo.domain.errors import SendFailure
from rinfo.domain.models import ReplyPayload, RinfoOptions
from rinfo.domain.responses import create_error_response
from rinfo.ports.inbound import IncomingMessage
from rinfo.ports.outbound import MessageStore

BUSY_MESSAGE = "The bot is busy right now, please try again in a moment."
FENCE = "```"

# Discord drops an interaction left unanswered for 3 seconds
INTERACTION_DEADLINE = datetime.timedelta(seconds=2.5)

# Interaction types answered by the command tree
_HANDLED_INTERACTIONS = {
    discord.InteractionType.application_command,
    discord.InteractionType.autocomplete,
}


def _log(msg: str):
    print(msg, file=sys.stderr)


def _split_message(text: str, limit: int = 2000) -> List[str]:
    """Split a message into chunks that fit Discord's character limit.

    Splits on line boundaries. A code block cut by a split is closed at the
    end of its chunk and reopened at the start of the next one.
    """
    if len(text) <= limit:
        return [text]

    reserve = len(FENCE) + 1
    budget = limit - 2 * reserve
    width = budget - reserve
    chunks: List[str] = []
    current: List[str] = []
    size = 0
    in_fence = False

    for line in text.split("\n"):
        pieces = [line[i:i + width] for i in range(0, len(line), width)] or [""]
        for piece in pieces:
            extra = len(piece) + (1 if current else 0)
            if current and size + extra > budget:
                body = "\n".join(current)
                chunks.append(body + "\n" + FENCE if in_fence else body)
                current = [FENCE] if in_fence else []
                size = len(FENCE) if in_fence else 0
                extra = len(piece) + (1 if current else 0)
            current.append(piece)
            size += extra
        if line.startswith(FENCE):
            in_fence = not in_fence

    if current:
        chunks.append("\n".join(current))
    return chunks


def _expired(interaction: discord.Interaction) -> bool:
    return discord.utils.utcnow() - interaction.created_at > INTERACTION_DEADLINE


async def send_reply(interaction: discord.Interaction, payload: ReplyPayload) -> None:
    """Answer an interaction with an immediate channel message."""
    if payload.is_error:
        _log(f"[rinfo] interaction {interaction.id} answered with error: {payload.content}")
    chunks = _split_message(payload.content)
    mentions = discord.AllowedMentions.none()
    try:
        await interaction.response.send_message(
            chunks[0], ephemeral=payload.ephemeral, allowed_mentions=mentions
        )
        for chunk in chunks[1:]:
            await interaction.followup.send(
                chunk, ephemeral=payload.ephemeral, allowed_mentions=mentions
            )
    except (discord.HTTPException, discord.InteractionResponded) as e:
        raise SendFailure(f"interaction {interaction.id}: {e}") from e


class ReactionInfoBot(discord.Client):
    """Gateway client answering !ping, /rinfo and the Reaction Info menu."""

    def __init__(
        self,
        config: BotConfig,
        dispatcher: Optional[EventDispatcher] = None,
        store: Optional[MessageStore] = None,
        **discord_kwargs,
    ):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.reactions = True
        super().__init__(
            intents=intents, max_messages=config.message_cache_size, **discord_kwargs
        )

        self.config = config
        self.dispatcher = dispatcher or EventDispatcher(
            workers=config.workers, queue_size=config.queue_size
        )
        self.handler = CommandHandler(store or DiscordMessageStore(self))
        self.tree = app_commands.CommandTree(self)
        self.tree.error(self._on_tree_error)
        register_commands(self.tree, self)

    async def setup_hook(self) -> None:  # pragma: no cover - network call
        await self.dispatcher.start()
        _log("[rinfo] Registering application commands...")
        if self.config.guild_id:
            guild = discord.Object(id=self.config.guild_id)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
        else:
            synced = await self.tree.sync()
        _log(f"[rinfo] Application commands registered successfully ({len(synced)} command(s))")

    async def close(self) -> None:
        await self.dispatcher.stop()
        await super().close()

    async def on_ready(self):
        _log(f"[rinfo] logged in as {self.user}")

    @staticmethod
    def _to_incoming(message: discord.Message) -> IncomingMessage:
        return IncomingMessage(
            content=message.content,
            channel_id=message.channel.id,
            is_bot=message.author.bot,
        )

    async def on_message(self, message: discord.Message):
        # Guard: self.user can be None before on_ready fires
        if not self.user or message.author == self.user:
            return

        incoming = self._to_incoming(message)
        if incoming.is_bot:
            return

        reply = self.handler.handle_text(incoming.content)
        if reply is None:
            return

        channel = message.channel

        async def _send():
            try:
                await channel.send(reply)
            except discord.HTTPException as e:
                raise SendFailure(f"channel {incoming.channel_id}: {e}") from e

        self.dispatcher.submit(f"text:{message.id}", _send)

    async def on_interaction(self, interaction: discord.Interaction):
        # The command tree has already been handed application commands
        if interaction.type not in _HANDLED_INTERACTIONS:
            _log(f"[rinfo] ignoring unknown interaction type: {interaction.type}")

    async def _on_tree_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ):
        _log(f"[rinfo] command error ({interaction.command and interaction.command.name}): {error!r}")

    async def submit_rinfo(self, interaction: discord.Interaction, options: RinfoOptions):
        async def _job():
            if self._skip_expired(interaction):
                return
            payload = await self.handler.handle_rinfo(options)
            await send_reply(interaction, payload)

        if not self.dispatcher.submit(f"rinfo:{interaction.id}", _job):
            await self._reject_busy(interaction)

    async def submit_context_menu(self, interaction: discord.Interaction, target_id: int):
        async def _job():
            if self._skip_expired(interaction):
                return
            await send_reply(interaction, self.handler.handle_context_menu(target_id))

        if not self.dispatcher.submit(f"context_menu:{interaction.id}", _job):
            await self._reject_busy(interaction)

    @staticmethod
    def _skip_expired(interaction: discord.Interaction) -> bool:
        # Checked when a worker picks the job up; queue time counts too
        if not _expired(interaction):
            return False
        _log(f"[rinfo] interaction {interaction.id} expired before a worker picked it up")
        return True

    async def _reject_busy(self, interaction: discord.Interaction):
        payload = create_error_response(BUSY_MESSAGE)
        payload.ephemeral = True
        try:
            await send_reply(interaction, payload)
        except SendFailure as e:
            _log(f"[rinfo] busy reply failed: {e}")
