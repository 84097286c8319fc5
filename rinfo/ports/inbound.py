"""Inbound port: platform-agnostic message representation."""

from dataclasses import dataclass


@dataclass
class IncomingMessage:
    """Gateway message reduced to what text commands need."""

    content: str
    channel_id: int
    is_bot: bool
