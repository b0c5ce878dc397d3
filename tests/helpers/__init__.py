"""Test helpers for SealedVote tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    cast_plain_vote, create_proposal, close_voting, deliver: lifecycle shortcuts
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.voting_flow import (
    cast_plain_vote,
    close_voting,
    create_proposal,
    deliver,
)

__all__ = [
    "FakeTimeAuthority",
    "cast_plain_vote",
    "close_voting",
    "create_proposal",
    "deliver",
]
