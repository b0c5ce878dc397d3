"""Voting window and finalization errors.

These errors guard the proposal state machine:

    OPEN -> CLOSED -> TALLY_REQUESTED -> FINALIZED

A vote is only accepted in OPEN, a tally is only requestable once the
deadline has passed, and nothing mutates a FINALIZED proposal.
"""

from __future__ import annotations

from datetime import datetime

from sealedvote.domain.exceptions import SealedVoteError


class VotingClosedError(SealedVoteError):
    """Raised when a vote arrives at or after the voting deadline.

    Attributes:
        proposal_id: The proposal voted on.
        voting_deadline: The proposal's deadline.
        attempted_at: When the vote was attempted.
    """

    def __init__(
        self,
        proposal_id: int,
        voting_deadline: datetime,
        attempted_at: datetime,
    ) -> None:
        self.proposal_id = proposal_id
        self.voting_deadline = voting_deadline
        self.attempted_at = attempted_at
        super().__init__(
            f"Voting on proposal {proposal_id} closed at "
            f"{voting_deadline.isoformat()}"
        )


class VotingStillOpenError(SealedVoteError):
    """Raised when a tally is requested before the voting deadline.

    Attributes:
        proposal_id: The proposal whose tally was requested.
        voting_deadline: The proposal's deadline.
    """

    def __init__(self, proposal_id: int, voting_deadline: datetime) -> None:
        self.proposal_id = proposal_id
        self.voting_deadline = voting_deadline
        super().__init__(
            f"Voting on proposal {proposal_id} is open until "
            f"{voting_deadline.isoformat()}"
        )


class DuplicateVoteError(SealedVoteError):
    """Raised when a voter already has a vote record for a proposal.

    A second vote is never a no-op: the record is write-once.

    Attributes:
        proposal_id: The proposal voted on.
        voter: The voter identity.
    """

    def __init__(self, proposal_id: int, voter: str) -> None:
        self.proposal_id = proposal_id
        self.voter = voter
        super().__init__(f"Voter {voter!r} has already voted on proposal {proposal_id}")


class ResultsFinalizedError(SealedVoteError):
    """Raised when a vote arrives for a proposal whose results are published.

    Unreachable while deadlines are honored, since publication requires the
    deadline to have passed. Still guarded so a misconfigured deployment
    cannot fold a vote into a committed result.

    Attributes:
        proposal_id: The finalized proposal.
    """

    def __init__(self, proposal_id: int) -> None:
        self.proposal_id = proposal_id
        super().__init__(f"Results for proposal {proposal_id} are already finalized")


class AlreadyFinalizedError(SealedVoteError):
    """Raised on a tally request or callback for a finalized proposal.

    This is the one-time-write guard: whichever callback lands first wins,
    every later one for the same proposal raises this.

    Attributes:
        proposal_id: The finalized proposal.
        request_id: Decryption request involved, if any.
    """

    def __init__(self, proposal_id: int, request_id: int | None = None) -> None:
        self.proposal_id = proposal_id
        self.request_id = request_id
        suffix = f" (request {request_id})" if request_id is not None else ""
        super().__init__(
            f"Proposal {proposal_id} already has published results{suffix}"
        )
