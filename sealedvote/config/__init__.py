"""Configuration for SealedVote."""

from sealedvote.config.voting_config import DEFAULT_VOTING_CONFIG, VotingConfig

__all__: list[str] = ["DEFAULT_VOTING_CONFIG", "VotingConfig"]
