"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

MAX_SNOWFLAKE = 2**64 - 1


def _check_snowflake(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 < value <= MAX_SNOWFLAKE:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class MessageReference:
    """(channel, message) pair locating a single message."""

    channel_id: int
    message_id: int

    def __post_init__(self):
        _check_snowflake("channel_id", self.channel_id)
        _check_snowflake("message_id", self.message_id)

    def url(self, guild_id: int) -> str:
        return f"https://discord.com/channels/{guild_id}/{self.channel_id}/{self.message_id}"


@dataclass
class ReactionInfo:
    """One emoji reaction on a fetched message."""

    emoji_name: str  # unicode character or custom emoji name, used for exclusion
    display: str
    count: int = 0
    handle: Any = None  # adapter object used to fetch reactors


@dataclass
class FetchedMessage:
    reference: MessageReference
    author_id: int
    reactions: List[ReactionInfo] = field(default_factory=list)


# emoji display -> user mentions, in message order
ReactionSummary = Dict[str, List[str]]


@dataclass
class ReplyPayload:
    """Success or error reply, always sent as an immediate channel message."""

    content: str
    is_error: bool = False
    ephemeral: bool = False


@dataclass
class RinfoOptions:
    """Arguments of the /rinfo slash command."""

    message: str
    exclude_user: Optional[str] = None
    exclude_reaction: Optional[str] = None
    include_message_user: bool = False
    user_only: bool = False
