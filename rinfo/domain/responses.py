"""Interaction reply construction."""

from rinfo.domain.models import ReplyPayload


def create_response(content: str, ephemeral: bool = False) -> ReplyPayload:
    return ReplyPayload(content=content, ephemeral=ephemeral)


def create_error_response(error_message: str) -> ReplyPayload:
    """Build an immediate channel reply carrying an error message."""
    return ReplyPayload(content=f"Error: {error_message}", is_error=True)
