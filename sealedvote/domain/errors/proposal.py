"""Proposal ledger errors.

Raised when a proposal cannot be created or referenced:

- UnauthorizedError: caller lacks the privilege for the operation
- ProposalNotFoundError: the id is 0, above the current count, or unknown
- InvalidInputError: malformed creation parameters or ciphertext input
"""

from __future__ import annotations

from sealedvote.domain.exceptions import SealedVoteError


class UnauthorizedError(SealedVoteError):
    """Raised when a caller is not permitted to perform an operation.

    Attributes:
        caller: Identity that attempted the operation.
        operation: Name of the rejected operation.
    """

    def __init__(self, caller: str, operation: str = "create_proposal") -> None:
        self.caller = caller
        self.operation = operation
        super().__init__(f"Caller {caller!r} is not authorized to {operation}")


class ProposalNotFoundError(SealedVoteError):
    """Raised when a proposal id does not reference an existing proposal.

    Id 0 is reserved to mean "does not exist" and always raises this.

    Attributes:
        proposal_id: The id that was looked up.
    """

    def __init__(self, proposal_id: int) -> None:
        self.proposal_id = proposal_id
        super().__init__(f"Proposal {proposal_id} not found")


class InvalidInputError(SealedVoteError):
    """Raised when operation parameters are malformed.

    Attributes:
        field: Name of the offending parameter.
        reason: Why the value was rejected.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
