"""Proposal API request/response models.

Ciphertext handles cross the API in their 32-byte transport form, hex
encoded with an optional ``0x`` prefix. Plaintext tallies appear only
once results are published.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# ISO 8601 with Z suffix
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]

HANDLE_HEX_PATTERN = r"^(0x|0X)?[0-9a-fA-F]{64}$"
HEX_PATTERN = r"^(0x|0X)?([0-9a-fA-F]{2})*$"


def hex_to_bytes(text: str) -> bytes:
    """Decode a validated hex string, with or without ``0x``."""
    return bytes.fromhex(text[2:] if text[:2].lower() == "0x" else text)


class CreateProposalRequest(BaseModel):
    """Request body for creating a proposal.

    Duration is not range-checked here: non-positive values reach the
    ledger and are rejected there with the domain's InvalidInput error.
    """

    description: str = Field(..., description="Free-text proposal description")
    voting_duration_seconds: int = Field(
        ..., description="Length of the voting window in seconds"
    )


class CreateProposalResponse(BaseModel):
    proposal_id: int
    voting_deadline: DateTimeWithZ


class ProposalResponse(BaseModel):
    """Read-only proposal snapshot.

    final_for_votes/final_against_votes are null until results_published.
    """

    proposal_id: int
    description: str
    creator: str
    voting_deadline: DateTimeWithZ
    created_at: DateTimeWithZ
    phase: str
    voter_count: int
    results_published: bool
    encrypted_for_votes: str = Field(..., description="Hex transport form")
    encrypted_against_votes: str = Field(..., description="Hex transport form")
    final_for_votes: int | None = None
    final_against_votes: int | None = None


class CastVoteRequest(BaseModel):
    """Two encrypted single-bit indicators, one per direction."""

    encrypted_choice_for: str = Field(..., pattern=HANDLE_HEX_PATTERN)
    encrypted_choice_against: str = Field(..., pattern=HANDLE_HEX_PATTERN)


class VoteStatusResponse(BaseModel):
    proposal_id: int
    voter: str
    has_voted: bool


class TallyRequestResponse(BaseModel):
    proposal_id: int
    request_id: int


class ResultsResponse(BaseModel):
    proposal_id: int
    for_votes: int
    against_votes: int
    is_published: bool


class DecryptionCallbackRequest(BaseModel):
    """Oracle callback body: request id, plaintext payload and proof."""

    request_id: int = Field(..., ge=0)
    payload_hex: str = Field(..., pattern=HEX_PATTERN)
    proof_hex: str = Field(..., pattern=HEX_PATTERN)
