"""Tests for domain/identifier.py: pure Python, no Discord dependency."""

import pytest

from rinfo.domain.errors import AmbiguousIdentifier, IdentifierError, InvalidFormat
from rinfo.domain.identifier import format_message_url, parse_message_identifier
from rinfo.domain.models import MessageReference

VALID_URL = (
    "https://discord.com/channels/123456789012345678/234567890123456789/345678901234567890"
)


class TestParseMessageIdentifier:
    def test_valid_url(self):
        ref = parse_message_identifier(VALID_URL)
        assert ref.channel_id == 234567890123456789
        assert ref.message_id == 345678901234567890

    def test_invalid_url(self):
        with pytest.raises(InvalidFormat, match="Invalid message identifier format"):
            parse_message_identifier("https://discord.com/invalid/url")

    @pytest.mark.parametrize("text", ["123456789012345678", "0", "42"])
    def test_numeric_id_is_ambiguous(self, text):
        with pytest.raises(AmbiguousIdentifier, match="When providing just a message ID"):
            parse_message_identifier(text)

    def test_surrounding_whitespace(self):
        ref = parse_message_identifier(f"  {VALID_URL}\n")
        assert ref == MessageReference(234567890123456789, 345678901234567890)

    def test_url_inside_text(self):
        ref = parse_message_identifier(f"see {VALID_URL} please")
        assert ref.message_id == 345678901234567890

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_is_ambiguous(self, text):
        with pytest.raises(AmbiguousIdentifier):
            parse_message_identifier(text)

    def test_mention_shorthand_rejected(self):
        with pytest.raises(InvalidFormat):
            parse_message_identifier("<#234567890123456789>")

    def test_partial_url_rejected(self):
        with pytest.raises(InvalidFormat):
            parse_message_identifier("https://discord.com/channels/1/2")

    def test_zero_segment_rejected(self):
        with pytest.raises(InvalidFormat):
            parse_message_identifier("https://discord.com/channels/1/0/3")

    def test_overflowing_segment_rejected(self):
        with pytest.raises(InvalidFormat):
            parse_message_identifier("https://discord.com/channels/1/2/18446744073709551616")

    def test_errors_share_base_class(self):
        with pytest.raises(IdentifierError):
            parse_message_identifier("nope")


class TestFormatMessageUrl:
    def test_parse_reproduces_pair(self):
        ref = MessageReference(channel_id=111, message_id=222)
        url = format_message_url(999, ref)
        assert url == "https://discord.com/channels/999/111/222"
        assert parse_message_identifier(url) == ref


class TestMessageReference:
    def test_frozen(self):
        ref = MessageReference(1, 2)
        with pytest.raises(Exception):
            ref.channel_id = 3

    @pytest.mark.parametrize("channel_id,message_id", [(0, 1), (1, 0), (-1, 1), (1, 2**64)])
    def test_out_of_range(self, channel_id, message_id):
        with pytest.raises(ValueError):
            MessageReference(channel_id, message_id)

    def test_non_integer(self):
        with pytest.raises(ValueError):
            MessageReference("1", 2)
