"""Command handling: turns parsed commands into replies.

Stateless: each call runs start-to-finish against the injected MessageStore.
"""

from typing import Optional

from rinfo.domain.errors import DecodeFailure, FetchFailure, IdentifierError
from rinfo.domain.identifier import parse_message_identifier
from rinfo.domain.models import ReactionSummary, ReplyPayload, RinfoOptions
from rinfo.domain.reactions import (
    filter_reactions,
    format_reaction_info,
    mention,
    parse_user_exclusions,
    wrap_reply,
)
from rinfo.domain.responses import create_error_response, create_response
from rinfo.ports.outbound import MessageStore

PING_TRIGGER = "!ping"
PING_REPLY = "Pong!"


class CommandHandler:
    """Produces replies for !ping, /rinfo and the Reaction Info context menu."""

    def __init__(self, store: MessageStore):
        self._store = store

    @staticmethod
    def handle_text(content: str) -> Optional[str]:
        """Reply for a plain text message, or None when it is not a command."""
        if content == PING_TRIGGER:
            return PING_REPLY
        return None

    async def handle_rinfo(self, options: RinfoOptions) -> ReplyPayload:
        try:
            reference = parse_message_identifier(options.message)
        except IdentifierError as e:
            return create_error_response(f"Error parsing message identifier: {e}")

        try:
            message = await self._store.fetch_message(reference)
        except FetchFailure as e:
            return create_error_response(f"Error fetching message: {e}")
        except DecodeFailure as e:
            return create_error_response(f"Error parsing message: {e}")

        excluded_users = parse_user_exclusions(options.exclude_user)
        if not options.include_message_user:
            excluded_users.add(message.author_id)

        summary: ReactionSummary = {}
        for reaction in filter_reactions(message.reactions, options.exclude_reaction):
            try:
                user_ids = await self._store.fetch_reactors(reference, reaction)
            except FetchFailure as e:
                return create_error_response(f"Error fetching reactions: {e}")
            mentions = [mention(u) for u in user_ids if u not in excluded_users]
            if mentions:
                summary.setdefault(reaction.display, []).extend(mentions)

        block = format_reaction_info(summary, options.user_only)
        return create_response(wrap_reply(options.message, block))

    @staticmethod
    def handle_context_menu(target_message_id: int) -> ReplyPayload:
        return create_response(f"Context Menu Command\nMessage ID: {target_message_id}")
