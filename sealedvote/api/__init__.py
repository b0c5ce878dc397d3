"""HTTP API for SealedVote."""
