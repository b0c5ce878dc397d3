"""Domain models for SealedVote."""

from sealedvote.domain.models.ciphertext import HANDLE_SIZE, CiphertextHandle
from sealedvote.domain.models.decryption_request import DecryptionRequest
from sealedvote.domain.models.proposal import (
    NONEXISTENT_PROPOSAL_ID,
    Proposal,
    ProposalPhase,
    ProposalResults,
)

__all__: list[str] = [
    "HANDLE_SIZE",
    "NONEXISTENT_PROPOSAL_ID",
    "CiphertextHandle",
    "DecryptionRequest",
    "Proposal",
    "ProposalPhase",
    "ProposalResults",
]
