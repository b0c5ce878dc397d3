"""RFC 7807 problem-detail mapping for domain errors.

Every SealedVoteError maps to one HTTP status and a stable problem type
URN of the form ``urn:sealedvote:error:<kebab-name>``.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from sealedvote.domain.errors import (
    AlreadyFinalizedError,
    DecodeError,
    DuplicateVoteError,
    InvalidInputError,
    InvalidProofError,
    ProposalNotFoundError,
    ResultsFinalizedError,
    UnauthorizedError,
    UnknownRequestError,
    VotingClosedError,
    VotingStillOpenError,
)
from sealedvote.domain.exceptions import SealedVoteError

# error class -> (status, problem name, title)
_PROBLEMS: dict[type[SealedVoteError], tuple[int, str, str]] = {
    UnauthorizedError: (403, "unauthorized", "Unauthorized"),
    ProposalNotFoundError: (404, "not-found", "Proposal Not Found"),
    UnknownRequestError: (404, "unknown-request", "Unknown Decryption Request"),
    InvalidInputError: (400, "invalid-input", "Invalid Input"),
    DecodeError: (400, "decode-error", "Malformed Payload"),
    VotingClosedError: (409, "voting-closed", "Voting Closed"),
    VotingStillOpenError: (409, "voting-still-open", "Voting Still Open"),
    DuplicateVoteError: (409, "duplicate-vote", "Duplicate Vote"),
    ResultsFinalizedError: (409, "results-finalized", "Results Finalized"),
    AlreadyFinalizedError: (409, "already-finalized", "Already Finalized"),
    InvalidProofError: (401, "invalid-proof", "Invalid Proof"),
}


def problem_for(error: SealedVoteError, request: Request) -> HTTPException:
    """Build the HTTPException carrying the problem details for ``error``."""
    status, name, title = _PROBLEMS.get(
        type(error), (500, "internal", "Internal Error")
    )
    return HTTPException(
        status_code=status,
        detail={
            "type": f"urn:sealedvote:error:{name}",
            "title": title,
            "status": status,
            "detail": str(error),
            "instance": str(request.url),
        },
    )
