"""Proposal repository port.

Append-only arena of proposals keyed by a monotonically increasing int,
together with the per-(proposal, voter) vote records. Nothing is ever
removed.
"""

from __future__ import annotations

from typing import Protocol

from sealedvote.domain.models.proposal import Proposal


class ProposalRepositoryProtocol(Protocol):
    """Port for proposal and vote-record storage."""

    async def count(self) -> int:
        """Return the number of proposals created so far."""
        ...

    async def insert(self, proposal: Proposal) -> None:
        """Append a new proposal.

        Raises:
            ValueError: If ``proposal.id`` is not exactly count() + 1.
        """
        ...

    async def get(self, proposal_id: int) -> Proposal | None:
        """Return the proposal, or None if it does not exist."""
        ...

    async def update(self, proposal: Proposal) -> None:
        """Replace a stored proposal with a newer version of itself.

        Raises:
            KeyError: If no proposal with that id exists.
        """
        ...

    async def has_voted(self, proposal_id: int, voter: str) -> bool:
        """Return True if ``voter`` has a vote record for the proposal."""
        ...

    async def record_vote(self, proposal: Proposal, voter: str) -> None:
        """Set the vote record and store the updated proposal in one write.

        Raises:
            ValueError: If the vote record is already set.
            KeyError: If the proposal does not exist.
        """
        ...
