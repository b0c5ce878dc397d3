"""Voting API dependencies.

Dependency injection for the voting core. Provides one process-wide
instance wired with the in-memory development collaborators and a
structlog notification emitter.

Note: These are stub implementations. Production would supply a real
confidential-computation library and durable repositories through
build_voting_components().
"""

from sealedvote.application.services import ConfidentialVotingService
from sealedvote.bootstrap.voting import VotingComponents, build_voting_components
from sealedvote.config.voting_config import VotingConfig
from sealedvote.infrastructure.adapters import StructlogEventEmitter

_components: VotingComponents | None = None


def get_voting_components() -> VotingComponents:
    """Get the singleton voting components.

    Returns:
        Wired VotingComponents.
    """
    global _components
    if _components is None:
        _components = build_voting_components(
            VotingConfig.from_environment(),
            event_emitter=StructlogEventEmitter(),
        )
    return _components


def get_voting_service() -> ConfidentialVotingService:
    """Get the serialized voting service."""
    return get_voting_components().service


def reset_voting_components() -> None:
    """Drop the singleton so the next request rebuilds it (test helper)."""
    global _components
    _components = None
