"""Application services for SealedVote."""

from sealedvote.application.services.administrator_policy import (
    SingleAdministratorPolicy,
)
from sealedvote.application.services.confidential_voting_service import (
    ConfidentialVotingService,
)
from sealedvote.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from sealedvote.application.services.result_publisher_service import (
    ResultPublisherService,
)
from sealedvote.application.services.tally_coordinator_service import (
    TallyCoordinatorService,
)
from sealedvote.application.services.vote_accumulator_service import (
    VoteAccumulatorService,
)

__all__: list[str] = [
    "ConfidentialVotingService",
    "ProposalLedgerService",
    "ResultPublisherService",
    "SingleAdministratorPolicy",
    "TallyCoordinatorService",
    "VoteAccumulatorService",
]
