"""Domain layer: pure Python, no framework dependencies."""

from rinfo.domain.models import (
    FetchedMessage,
    MessageReference,
    ReactionInfo,
    ReplyPayload,
    RinfoOptions,
)
from rinfo.domain.errors import (
    AmbiguousIdentifier,
    DecodeFailure,
    FetchFailure,
    IdentifierError,
    InvalidFormat,
    RinfoError,
    SendFailure,
)
from rinfo.domain.identifier import parse_message_identifier, format_message_url
from rinfo.domain.responses import create_response, create_error_response
from rinfo.domain.reactions import filter_reactions, format_reaction_info
from rinfo.domain.commands import CommandHandler

__all__ = [
    "FetchedMessage",
    "MessageReference",
    "ReactionInfo",
    "ReplyPayload",
    "RinfoOptions",
    "AmbiguousIdentifier",
    "DecodeFailure",
    "FetchFailure",
    "IdentifierError",
    "InvalidFormat",
    "RinfoError",
    "SendFailure",
    "parse_message_identifier",
    "format_message_url",
    "create_response",
    "create_error_response",
    "filter_reactions",
    "format_reaction_info",
    "CommandHandler",
]
