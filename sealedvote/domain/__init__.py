"""
Domain layer - Pure business logic for SealedVote.

This layer contains:
- Domain models (Proposal, CiphertextHandle, DecryptionRequest)
- Domain events (proposal notifications)
- Domain services (tally payload codec)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from sealedvote.domain.exceptions import SealedVoteError

__all__: list[str] = ["SealedVoteError"]
