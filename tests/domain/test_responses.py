"""Tests for the interaction reply builder."""

import pytest

from rinfo.domain.models import ReplyPayload
from rinfo.domain.responses import create_error_response, create_response


class TestCreateErrorResponse:
    @pytest.mark.parametrize("message", ["Test error message", "", "multi\nline"])
    def test_prefixes_error(self, message):
        payload = create_error_response(message)
        assert payload.content == "Error: " + message
        assert payload.is_error is True
        assert payload.ephemeral is False


class TestCreateResponse:
    def test_success(self):
        payload = create_response("hello")
        assert payload == ReplyPayload(content="hello")
        assert payload.is_error is False

    def test_ephemeral(self):
        assert create_response("quiet", ephemeral=True).ephemeral is True
