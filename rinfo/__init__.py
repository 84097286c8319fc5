"""rinfo: Discord bot summarizing message reactions."""

from rinfo.config import __version__, BotConfig
from rinfo.dispatcher import EventDispatcher
from rinfo.domain import (
    CommandHandler,
    MessageReference,
    ReplyPayload,
    create_error_response,
    create_response,
    parse_message_identifier,
)

__all__ = [
    "__version__",
    "BotConfig",
    "EventDispatcher",
    "CommandHandler",
    "MessageReference",
    "ReplyPayload",
    "create_error_response",
    "create_response",
    "parse_message_identifier",
]
