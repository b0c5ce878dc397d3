"""Proposal event emitter port.

Publishes lifecycle notifications to external observers. Emission happens
after state is committed; an emitter failure propagates to the caller.
"""

from __future__ import annotations

from typing import Protocol

from sealedvote.domain.events.proposal import ProposalEvent


class ProposalEventEmitterPort(Protocol):
    """Protocol for proposal notification emission."""

    async def emit(self, event: ProposalEvent) -> None:
        """Publish ``event`` to observers."""
        ...
