"""Decryption request correlation port.

Maps oracle request ids to proposals. Written by the tally coordinator,
read by the result publisher. Entries are never deleted, so a replayed
callback still resolves and is then rejected by the finalization guard.
"""

from __future__ import annotations

from typing import Protocol

from sealedvote.domain.models.decryption_request import DecryptionRequest


class DecryptionRequestRepositoryProtocol(Protocol):
    """Port for the request correlation table."""

    async def save(self, request: DecryptionRequest) -> None:
        """Record a correlation.

        Raises:
            ValueError: If the request id is already recorded.
        """
        ...

    async def get(self, request_id: int) -> DecryptionRequest | None:
        """Return the correlation for ``request_id``, or None."""
        ...

    async def list_for_proposal(self, proposal_id: int) -> list[DecryptionRequest]:
        """Return every correlation for a proposal, oldest first."""
        ...
