"""Proposal domain model.

A proposal collects encrypted votes until its deadline, then exposes its
two encrypted running sums for out-of-band decryption, and finally holds
the published plaintext result.

State Machine:
    OPEN -> CLOSED            (deadline passes)
    CLOSED -> TALLY_REQUESTED (first decryption request issued)
    TALLY_REQUESTED -> TALLY_REQUESTED (further requests, 0..N in flight)
    TALLY_REQUESTED -> FINALIZED (first verified callback commits results)

    FINALIZED is terminal. Creation places a proposal directly in OPEN.

The phase is never stored. It is derived from the clock, the published
flag and whether any decryption request has been recorded, so it cannot
drift from the fields that actually gate each operation.

Invariants:
    - final_for_votes/final_against_votes are authoritative only when
      results_published is True; before that they read as 0.
    - results_published goes False -> True exactly once.
    - The encrypted sums change only through with_vote_added().
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from sealedvote.domain.errors.voting import (
    AlreadyFinalizedError,
    ResultsFinalizedError,
)
from sealedvote.domain.models.ciphertext import CiphertextHandle

# Id 0 is reserved: it never names a proposal
NONEXISTENT_PROPOSAL_ID: int = 0


class ProposalPhase(Enum):
    """Lifecycle phase of a proposal.

    Phases:
        OPEN: Votes accepted (now < deadline).
        CLOSED: Deadline passed, no tally requested yet.
        TALLY_REQUESTED: At least one decryption request outstanding.
        FINALIZED: Results published. Terminal.
    """

    OPEN = "OPEN"
    CLOSED = "CLOSED"
    TALLY_REQUESTED = "TALLY_REQUESTED"
    FINALIZED = "FINALIZED"

    def is_terminal(self) -> bool:
        """Check whether no further transitions are possible."""
        return self is ProposalPhase.FINALIZED

    def valid_transitions(self) -> frozenset[ProposalPhase]:
        """Get the phases reachable from this one."""
        return PHASE_TRANSITIONS[self]


PHASE_TRANSITIONS: dict[ProposalPhase, frozenset[ProposalPhase]] = {
    ProposalPhase.OPEN: frozenset({ProposalPhase.CLOSED}),
    ProposalPhase.CLOSED: frozenset({ProposalPhase.TALLY_REQUESTED}),
    ProposalPhase.TALLY_REQUESTED: frozenset(
        {ProposalPhase.TALLY_REQUESTED, ProposalPhase.FINALIZED}
    ),
    ProposalPhase.FINALIZED: frozenset(),
}


@dataclass(frozen=True, eq=True)
class Proposal:
    """A confidential proposal.

    Frozen: every change produces a new instance which the repository
    stores in a single write.

    Attributes:
        id: Sequential id, starting at 1.
        description: Free text.
        creator: Identity that created the proposal.
        voting_deadline: Votes accepted strictly before this instant (UTC).
        encrypted_for_votes: Running encrypted sum of "for" indicators.
        encrypted_against_votes: Running encrypted sum of "against" indicators.
        created_at: Creation timestamp (UTC).
        voter_count: Number of vote records.
        results_published: Whether final results are committed.
        final_for_votes: Published "for" count (0 until published).
        final_against_votes: Published "against" count (0 until published).
    """

    id: int
    description: str
    creator: str
    voting_deadline: datetime
    encrypted_for_votes: CiphertextHandle
    encrypted_against_votes: CiphertextHandle
    created_at: datetime
    voter_count: int = field(default=0)
    results_published: bool = field(default=False)
    final_for_votes: int = field(default=0)
    final_against_votes: int = field(default=0)

    def __post_init__(self) -> None:
        """Validate proposal fields."""
        if self.id <= NONEXISTENT_PROPOSAL_ID:
            raise ValueError(f"Proposal id must be positive, got {self.id}")
        if self.voting_deadline.tzinfo is None:
            raise ValueError("voting_deadline must be timezone-aware")
        if not self.results_published and (
            self.final_for_votes or self.final_against_votes
        ):
            raise ValueError("Final tallies cannot be set before publication")

    def is_open_at(self, now: datetime) -> bool:
        """Check whether votes are accepted at ``now``.

        The deadline itself is already closed.
        """
        return now < self.voting_deadline

    def phase_at(self, now: datetime, tally_requested: bool) -> ProposalPhase:
        """Derive the lifecycle phase at ``now``.

        Args:
            now: Current time.
            tally_requested: Whether any decryption request has been recorded.
        """
        if self.results_published:
            return ProposalPhase.FINALIZED
        if self.is_open_at(now):
            return ProposalPhase.OPEN
        if tally_requested:
            return ProposalPhase.TALLY_REQUESTED
        return ProposalPhase.CLOSED

    def with_vote_added(
        self,
        encrypted_for_votes: CiphertextHandle,
        encrypted_against_votes: CiphertextHandle,
    ) -> Proposal:
        """Return a copy carrying new running sums and one more voter."""
        if self.results_published:
            raise ResultsFinalizedError(self.id)
        return replace(
            self,
            encrypted_for_votes=encrypted_for_votes,
            encrypted_against_votes=encrypted_against_votes,
            voter_count=self.voter_count + 1,
        )

    def with_results(self, for_votes: int, against_votes: int) -> Proposal:
        """Return the finalized copy carrying the published counts.

        Raises:
            AlreadyFinalizedError: If results are already published.
        """
        if self.results_published:
            raise AlreadyFinalizedError(self.id)
        if for_votes < 0 or against_votes < 0:
            raise ValueError("Published tallies must be unsigned")
        return replace(
            self,
            results_published=True,
            final_for_votes=for_votes,
            final_against_votes=against_votes,
        )


@dataclass(frozen=True, eq=True)
class ProposalResults:
    """Public view of a proposal's result.

    Fields are zero and ``is_published`` is False until finalization,
    so an unfinalized proposal reveals nothing about its tally.
    """

    for_votes: int
    against_votes: int
    is_published: bool

    @classmethod
    def of(cls, proposal: Proposal) -> ProposalResults:
        if not proposal.results_published:
            return cls(for_votes=0, against_votes=0, is_published=False)
        return cls(
            for_votes=proposal.final_for_votes,
            against_votes=proposal.final_against_votes,
            is_published=True,
        )
