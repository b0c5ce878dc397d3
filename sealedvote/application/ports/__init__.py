"""Application ports - Protocol interfaces for external collaborators."""

from sealedvote.application.ports.authorization_policy import AuthorizationPolicy
from sealedvote.application.ports.confidential_compute import (
    ConfidentialComputeProtocol,
)
from sealedvote.application.ports.decryption_request_repository import (
    DecryptionRequestRepositoryProtocol,
)
from sealedvote.application.ports.proposal_event_emitter import (
    ProposalEventEmitterPort,
)
from sealedvote.application.ports.proposal_repository import (
    ProposalRepositoryProtocol,
)
from sealedvote.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "AuthorizationPolicy",
    "ConfidentialComputeProtocol",
    "DecryptionRequestRepositoryProtocol",
    "ProposalEventEmitterPort",
    "ProposalRepositoryProtocol",
    "TimeAuthorityProtocol",
]
