"""Discord adapter: discord.py client, command schema and message store."""

from rinfo.adapters.discord.bot import ReactionInfoBot, send_reply
from rinfo.adapters.discord.store import DiscordMessageStore

__all__ = ["ReactionInfoBot", "DiscordMessageStore", "send_reply"]
