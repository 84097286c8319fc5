"""Message identifier parsing.

Pure Python, no framework dependencies.
"""

import re

from rinfo.domain.errors import AmbiguousIdentifier, InvalidFormat
from rinfo.domain.models import MAX_SNOWFLAKE, MessageReference

# https://discord.com/channels/<guild>/<channel>/<message>
MESSAGE_URL_RE = re.compile(r"https://discord\.com/channels/(?:[0-9]+)/([0-9]+)/([0-9]+)")

# Matches the empty string too: no input is treated as a missing channel
_NUMERIC_RE = re.compile(r"[0-9]*")


def parse_message_identifier(message_identifier: str) -> MessageReference:
    """Parse a message URL into a MessageReference.

    A bare numeric message ID is rejected with AmbiguousIdentifier since the
    channel cannot be derived from it. Anything that does not contain a
    message URL raises InvalidFormat.
    """
    text = message_identifier.strip()

    if _NUMERIC_RE.fullmatch(text):
        raise AmbiguousIdentifier(
            "When providing just a message ID, you must also specify the channel ID"
        )

    match = MESSAGE_URL_RE.search(text)
    if not match:
        raise InvalidFormat(
            "Invalid message identifier format. Please provide a valid Discord message URL"
        )

    channel_id, message_id = int(match.group(1)), int(match.group(2))
    if not (0 < channel_id <= MAX_SNOWFLAKE and 0 < message_id <= MAX_SNOWFLAKE):
        raise InvalidFormat("Channel and message IDs must be non-zero 64-bit integers")
    return MessageReference(channel_id=channel_id, message_id=message_id)


def format_message_url(guild_id: int, reference: MessageReference) -> str:
    """Inverse of parse_message_identifier for a known guild."""
    return reference.url(guild_id)
