"""Tests for domain/reactions.py: filtering and summary formatting."""

from rinfo.domain.models import ReactionInfo
from rinfo.domain.reactions import (
    NO_REACTIONS,
    filter_reactions,
    format_reaction_info,
    mention,
    parse_user_exclusions,
    split_tokens,
    wrap_reply,
)


def _reaction(name: str, display: str = "") -> ReactionInfo:
    return ReactionInfo(emoji_name=name, display=display or name, count=1)


class TestSplitTokens:
    def test_none_and_empty(self):
        assert split_tokens(None) == set()
        assert split_tokens("") == set()
        assert split_tokens(" , ,") == set()

    def test_trims(self):
        assert split_tokens(" a, b ,c ") == {"a", "b", "c"}


class TestFilterReactions:
    def test_no_exclusion_keeps_all(self):
        reactions = [_reaction("👍"), _reaction("party")]
        assert filter_reactions(reactions, None) == reactions
        assert filter_reactions(reactions, "") == reactions

    def test_exact_match_removed(self):
        reactions = [_reaction("👍"), _reaction("party"), _reaction("❤️")]
        kept = filter_reactions(reactions, "party, 👍")
        assert [r.emoji_name for r in kept] == ["❤️"]

    def test_case_sensitive(self):
        reactions = [_reaction("Party")]
        assert filter_reactions(reactions, "party") == reactions

    def test_no_partial_match(self):
        reactions = [_reaction("partyparrot")]
        assert filter_reactions(reactions, "party") == reactions


class TestParseUserExclusions:
    def test_ids_and_mentions(self):
        assert parse_user_exclusions("1, <@2>, <@!3>") == {1, 2, 3}

    def test_garbage_ignored(self):
        assert parse_user_exclusions("bob, @alice, <#4>") == set()

    def test_non_ascii_digits_ignored(self):
        assert parse_user_exclusions("²") == set()
        assert parse_user_exclusions("¹², <@³>, 5") == {5}

    def test_none(self):
        assert parse_user_exclusions(None) == set()


class TestFormatReactionInfo:
    def test_empty(self):
        assert format_reaction_info({}) == "No reactions found."
        assert format_reaction_info({}, user_only=True) == NO_REACTIONS

    def test_grouped(self):
        summary = {"👍": [mention(1), mention(2)], ":party:": [mention(3)]}
        assert format_reaction_info(summary) == "👍: <@1> <@2>\n:party:: <@3>\n"

    def test_user_only_dedups(self):
        summary = {"👍": ["<@1>", "<@2>"], "🎉": ["<@2>", "<@3>"], "❤️": ["<@1>"]}
        result = format_reaction_info(summary, user_only=True)
        assert result == "Users who reacted: <@1> <@2> <@3>"


class TestWrapReply:
    def test_template(self):
        assert wrap_reply("url", "body") == "📝 <url>\n\n```\nbody\n```"
