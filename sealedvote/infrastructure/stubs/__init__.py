"""In-memory stubs for development and testing.

WARNING: Not for production use.
"""

from sealedvote.infrastructure.stubs.confidential_compute_stub import (
    ConfidentialComputeStub,
)
from sealedvote.infrastructure.stubs.decryption_request_repository_stub import (
    DecryptionRequestRepositoryStub,
)
from sealedvote.infrastructure.stubs.proposal_event_emitter_stub import (
    ProposalEventEmitterStub,
)
from sealedvote.infrastructure.stubs.proposal_repository_stub import (
    ProposalRepositoryStub,
)

__all__: list[str] = [
    "ConfidentialComputeStub",
    "DecryptionRequestRepositoryStub",
    "ProposalEventEmitterStub",
    "ProposalRepositoryStub",
]
