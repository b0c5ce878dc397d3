"""Proposal lifecycle events.

Notifications consumed by external indexers and front-ends. They are not
part of the correctness contract: state is committed before an event is
emitted.

Event types follow the lowercase.dot.notation convention:
    proposal.created
    proposal.voted            (never carries the vote direction)
    proposal.tally_requested
    proposal.results_published
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, ClassVar

PROPOSAL_CREATED_EVENT_TYPE: str = "proposal.created"
VOTE_CAST_EVENT_TYPE: str = "proposal.voted"
TALLY_REQUESTED_EVENT_TYPE: str = "proposal.tally_requested"
RESULTS_PUBLISHED_EVENT_TYPE: str = "proposal.results_published"


@dataclass(frozen=True, eq=True)
class ProposalEvent:
    """Base class for proposal notifications."""

    event_type: ClassVar[str] = ""

    proposal_id: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict including the event type."""
        data: dict[str, Any] = {"event_type": self.event_type}
        for key, value in asdict(self).items():
            data[key] = value.isoformat() if isinstance(value, datetime) else value
        return data


@dataclass(frozen=True, eq=True)
class ProposalCreatedEvent(ProposalEvent):
    """Emitted when a proposal is created."""

    event_type: ClassVar[str] = PROPOSAL_CREATED_EVENT_TYPE

    creator: str
    description: str
    voting_deadline: datetime


@dataclass(frozen=True, eq=True)
class VoteCastEvent(ProposalEvent):
    """Emitted when a vote is accumulated.

    Deliberately carries only the voter identity. The direction of the
    vote exists nowhere outside the encrypted sums.
    """

    event_type: ClassVar[str] = VOTE_CAST_EVENT_TYPE

    voter: str


@dataclass(frozen=True, eq=True)
class TallyRequestedEvent(ProposalEvent):
    """Emitted when encrypted tallies are submitted for decryption."""

    event_type: ClassVar[str] = TALLY_REQUESTED_EVENT_TYPE

    request_id: int
    requested_by: str


@dataclass(frozen=True, eq=True)
class ResultsPublishedEvent(ProposalEvent):
    """Emitted once, when a verified result is committed."""

    event_type: ClassVar[str] = RESULTS_PUBLISHED_EVENT_TYPE

    for_votes: int
    against_votes: int
