"""Bootstrap wiring for SealedVote."""

from sealedvote.bootstrap.voting import VotingComponents, build_voting_components

__all__: list[str] = ["VotingComponents", "build_voting_components"]
