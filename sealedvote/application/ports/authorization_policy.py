"""Authorization policy port.

Proposal creation is privileged. Which callers hold that privilege is an
injected policy so the ledger can be exercised without a live identity
system.
"""

from __future__ import annotations

from typing import Protocol


class AuthorizationPolicy(Protocol):
    """Decides whether a caller may create proposals."""

    def can_create_proposal(self, caller: str) -> bool:
        """Return True if ``caller`` may create a proposal."""
        ...
