"""Decryption request correlation record.

Maps an oracle-issued request id back to the proposal awaiting its
result. Entries are written once by the tally coordinator and never
deleted; a proposal may have any number of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sealedvote.domain.models.proposal import NONEXISTENT_PROPOSAL_ID


@dataclass(frozen=True, eq=True)
class DecryptionRequest:
    """Correlation between a decryption request and its proposal.

    Attributes:
        request_id: Opaque id issued by the decryption library.
        proposal_id: Proposal whose tallies were submitted.
        requested_by: Identity that triggered the request.
        requested_at: When the request was issued (UTC).
    """

    request_id: int
    proposal_id: int
    requested_by: str
    requested_at: datetime

    def __post_init__(self) -> None:
        if self.proposal_id == NONEXISTENT_PROPOSAL_ID:
            raise ValueError("A decryption request must reference a proposal")
