"""Domain events for SealedVote."""

from sealedvote.domain.events.proposal import (
    PROPOSAL_CREATED_EVENT_TYPE,
    RESULTS_PUBLISHED_EVENT_TYPE,
    TALLY_REQUESTED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    ProposalCreatedEvent,
    ProposalEvent,
    ResultsPublishedEvent,
    TallyRequestedEvent,
    VoteCastEvent,
)

__all__: list[str] = [
    "PROPOSAL_CREATED_EVENT_TYPE",
    "RESULTS_PUBLISHED_EVENT_TYPE",
    "TALLY_REQUESTED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "ProposalCreatedEvent",
    "ProposalEvent",
    "ResultsPublishedEvent",
    "TallyRequestedEvent",
    "VoteCastEvent",
]
