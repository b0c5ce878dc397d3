"""Proposal repository stub implementation.

In-memory ProposalRepositoryProtocol for development and testing. The
proposal arena is a list indexed by id - 1; vote records are a set of
(proposal_id, voter) pairs. Nothing is ever removed.

WARNING: This is a development stub. Not for production use.
"""

from __future__ import annotations

from sealedvote.domain.models.proposal import Proposal

# DEV_MODE_WATERMARK per dev stub convention
DEV_MODE_WATERMARK: str = "DEV_STUB:ProposalRepositoryStub:v1"


class ProposalRepositoryStub:
    """In-memory proposal arena with vote records.

    Attributes:
        _proposals: Proposals in id order (id N at index N - 1).
        _vote_records: Set (proposal_id, voter) pairs.
    """

    def __init__(self) -> None:
        self._proposals: list[Proposal] = []
        self._vote_records: set[tuple[int, str]] = set()

    async def count(self) -> int:
        return len(self._proposals)

    async def insert(self, proposal: Proposal) -> None:
        expected = len(self._proposals) + 1
        if proposal.id != expected:
            raise ValueError(
                f"Proposal ids are sequential: expected {expected}, got {proposal.id}"
            )
        self._proposals.append(proposal)

    async def get(self, proposal_id: int) -> Proposal | None:
        if 1 <= proposal_id <= len(self._proposals):
            return self._proposals[proposal_id - 1]
        return None

    async def update(self, proposal: Proposal) -> None:
        if await self.get(proposal.id) is None:
            raise KeyError(proposal.id)
        self._proposals[proposal.id - 1] = proposal

    async def has_voted(self, proposal_id: int, voter: str) -> bool:
        return (proposal_id, voter) in self._vote_records

    async def record_vote(self, proposal: Proposal, voter: str) -> None:
        key = (proposal.id, voter)
        if key in self._vote_records:
            raise ValueError(f"Vote record already set for {key}")
        if await self.get(proposal.id) is None:
            raise KeyError(proposal.id)
        self._proposals[proposal.id - 1] = proposal
        self._vote_records.add(key)

    def clear(self) -> None:
        """Reset the arena (test helper)."""
        self._proposals.clear()
        self._vote_records.clear()
