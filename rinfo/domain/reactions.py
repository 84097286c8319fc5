"""Reaction filtering and summary formatting.

Pure Python, no framework dependencies.
"""

import re
from typing import Iterable, List, Optional, Set

from rinfo.domain.models import ReactionInfo, ReactionSummary

NO_REACTIONS = "No reactions found."
USERS_PREFIX = "Users who reacted: "

# <@123> or <@!123> (nickname form)
_MENTION_RE = re.compile(r"<@!?([0-9]+)>")
_USER_ID_RE = re.compile(r"[0-9]+")


def split_tokens(text: Optional[str]) -> Set[str]:
    """Split a comma-separated argument into trimmed, non-empty tokens."""
    if not text:
        return set()
    return {token.strip() for token in text.split(",") if token.strip()}


def filter_reactions(
    reactions: Iterable[ReactionInfo], exclude_reaction: Optional[str]
) -> List[ReactionInfo]:
    """Drop reactions whose emoji name exactly matches an excluded token."""
    excluded = split_tokens(exclude_reaction)
    return [r for r in reactions if r.emoji_name not in excluded]


def parse_user_exclusions(exclude_user: Optional[str]) -> Set[int]:
    """Parse excluded users given as raw IDs or mentions. Unknown tokens are ignored."""
    user_ids: Set[int] = set()
    for token in split_tokens(exclude_user):
        match = _MENTION_RE.fullmatch(token)
        if match:
            user_ids.add(int(match.group(1)))
        elif _USER_ID_RE.fullmatch(token):
            user_ids.add(int(token))
    return user_ids


def mention(user_id: int) -> str:
    return f"<@{user_id}>"


def format_reaction_info(summary: ReactionSummary, user_only: bool = False) -> str:
    """Render a reaction summary, grouped by emoji or as a flat user list."""
    if not summary:
        return NO_REACTIONS

    if user_only:
        # dict keeps first-seen order while de-duplicating
        users = dict.fromkeys(u for mentions in summary.values() for u in mentions)
        return USERS_PREFIX + " ".join(users)

    return "".join(f"{emoji}: {' '.join(mentions)}\n" for emoji, mentions in summary.items())


def wrap_reply(message_identifier: str, block: str) -> str:
    """Place the rendered block under the message reference in a code block."""
    return f"📝 <{message_identifier}>\n\n```\n{block}\n```"
