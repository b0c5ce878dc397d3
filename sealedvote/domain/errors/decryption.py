"""Decryption callback errors.

The callback entry point is reachable by whoever the decryption library
lets through. Each of these errors bounds what a malicious or buggy
caller can do there: unknown correlations, forged results and malformed
payloads are all rejected before any state is written.
"""

from __future__ import annotations

from sealedvote.domain.exceptions import SealedVoteError


class UnknownRequestError(SealedVoteError):
    """Raised when a callback references no recorded decryption request.

    Attributes:
        request_id: The unrecognized request id.
    """

    def __init__(self, request_id: int) -> None:
        self.request_id = request_id
        super().__init__(f"Unknown decryption request {request_id}")


class InvalidProofError(SealedVoteError):
    """Raised when the oracle's authenticity proof does not verify.

    Attributes:
        request_id: The request the callback claimed to answer.
        proposal_id: The correlated proposal.
    """

    def __init__(self, request_id: int, proposal_id: int) -> None:
        self.request_id = request_id
        self.proposal_id = proposal_id
        super().__init__(
            f"Decryption proof for request {request_id} "
            f"(proposal {proposal_id}) failed verification"
        )


class DecodeError(SealedVoteError):
    """Raised when a decrypted payload has the wrong shape.

    Attributes:
        expected_length: Byte length the payload must have.
        actual_length: Byte length that was received.
        reason: What is wrong when the length itself is right.
    """

    def __init__(
        self, expected_length: int, actual_length: int, reason: str | None = None
    ) -> None:
        self.expected_length = expected_length
        self.actual_length = actual_length
        self.reason = reason
        if reason is None:
            reason = f"expected {expected_length} bytes, got {actual_length}"
        super().__init__(f"Malformed tally payload: {reason}")
