"""Domain errors for SealedVote.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from SealedVoteError.
"""

from sealedvote.domain.errors.decryption import (
    DecodeError,
    InvalidProofError,
    UnknownRequestError,
)
from sealedvote.domain.errors.proposal import (
    InvalidInputError,
    ProposalNotFoundError,
    UnauthorizedError,
)
from sealedvote.domain.errors.voting import (
    AlreadyFinalizedError,
    DuplicateVoteError,
    ResultsFinalizedError,
    VotingClosedError,
    VotingStillOpenError,
)

__all__: list[str] = [
    "AlreadyFinalizedError",
    "DecodeError",
    "DuplicateVoteError",
    "InvalidInputError",
    "InvalidProofError",
    "ProposalNotFoundError",
    "ResultsFinalizedError",
    "UnauthorizedError",
    "UnknownRequestError",
    "VotingClosedError",
    "VotingStillOpenError",
]
