"""Outbound ports: interfaces for external system adapters."""

from typing import List, Protocol, runtime_checkable

from rinfo.domain.models import FetchedMessage, MessageReference, ReactionInfo


@runtime_checkable
class MessageStore(Protocol):
    """Read access to messages and their reactors.

    Implementations raise FetchFailure for network/API errors and
    DecodeFailure when a payload cannot be read as a message.
    """

    async def fetch_message(self, reference: MessageReference) -> FetchedMessage: ...

    async def fetch_reactors(
        self, reference: MessageReference, reaction: ReactionInfo
    ) -> List[int]: ...
