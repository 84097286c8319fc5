"""Port interfaces (Hexagonal Architecture)."""

from rinfo.ports.inbound import IncomingMessage
from rinfo.ports.outbound import MessageStore

__all__ = [
    "IncomingMessage",
    "MessageStore",
]
