"""Unit tests for the Proposal domain model."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from sealedvote.domain.errors import AlreadyFinalizedError, ResultsFinalizedError
from sealedvote.domain.models import (
    CiphertextHandle,
    Proposal,
    ProposalPhase,
    ProposalResults,
)

CREATED_AT = datetime(2026, 1, 1, tzinfo=timezone.utc)
DEADLINE = CREATED_AT + timedelta(days=1)


def _handle(fill: int) -> CiphertextHandle:
    return CiphertextHandle(bytes([fill]) * 32)


def _proposal(**overrides) -> Proposal:
    fields = {
        "id": 1,
        "description": "Fund the library",
        "creator": "admin",
        "voting_deadline": DEADLINE,
        "encrypted_for_votes": _handle(1),
        "encrypted_against_votes": _handle(2),
        "created_at": CREATED_AT,
    }
    fields.update(overrides)
    return Proposal(**fields)


class TestProposalConstruction:
    """Tests for field validation."""

    def test_defaults(self) -> None:
        proposal = _proposal()
        assert proposal.voter_count == 0
        assert proposal.results_published is False
        assert proposal.final_for_votes == 0
        assert proposal.final_against_votes == 0

    @pytest.mark.parametrize("bad_id", [0, -1])
    def test_rejects_non_positive_id(self, bad_id: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            _proposal(id=bad_id)

    def test_rejects_naive_deadline(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            _proposal(voting_deadline=datetime(2026, 1, 2))

    def test_rejects_finals_before_publication(self) -> None:
        with pytest.raises(ValueError, match="before publication"):
            _proposal(final_for_votes=3)

    def test_is_frozen(self) -> None:
        proposal = _proposal()
        with pytest.raises(FrozenInstanceError):
            proposal.voter_count = 5  # type: ignore[misc]


class TestVotingWindow:
    """The deadline instant itself is closed."""

    def test_open_before_deadline(self) -> None:
        assert _proposal().is_open_at(DEADLINE - timedelta(microseconds=1))

    def test_closed_at_deadline(self) -> None:
        assert not _proposal().is_open_at(DEADLINE)

    def test_closed_after_deadline(self) -> None:
        assert not _proposal().is_open_at(DEADLINE + timedelta(seconds=1))


class TestPhase:
    def test_open(self) -> None:
        assert _proposal().phase_at(CREATED_AT, False) is ProposalPhase.OPEN

    def test_closed(self) -> None:
        assert _proposal().phase_at(DEADLINE, False) is ProposalPhase.CLOSED

    def test_tally_requested(self) -> None:
        assert (
            _proposal().phase_at(DEADLINE, True) is ProposalPhase.TALLY_REQUESTED
        )

    def test_finalized_wins(self) -> None:
        finalized = _proposal().with_results(1, 0)
        assert finalized.phase_at(DEADLINE, True) is ProposalPhase.FINALIZED

    def test_finalized_is_terminal(self) -> None:
        assert ProposalPhase.FINALIZED.is_terminal()
        assert ProposalPhase.FINALIZED.valid_transitions() == frozenset()

    def test_tally_requested_may_repeat(self) -> None:
        transitions = ProposalPhase.TALLY_REQUESTED.valid_transitions()
        assert ProposalPhase.TALLY_REQUESTED in transitions
        assert ProposalPhase.FINALIZED in transitions

    def test_open_only_closes(self) -> None:
        assert ProposalPhase.OPEN.valid_transitions() == frozenset(
            {ProposalPhase.CLOSED}
        )


class TestWithVoteAdded:
    def test_replaces_sums_and_counts_voter(self) -> None:
        proposal = _proposal()
        updated = proposal.with_vote_added(_handle(7), _handle(8))

        assert updated.encrypted_for_votes == _handle(7)
        assert updated.encrypted_against_votes == _handle(8)
        assert updated.voter_count == 1
        # Original untouched
        assert proposal.voter_count == 0
        assert proposal.encrypted_for_votes == _handle(1)

    def test_rejected_after_publication(self) -> None:
        finalized = _proposal().with_results(2, 1)
        with pytest.raises(ResultsFinalizedError):
            finalized.with_vote_added(_handle(7), _handle(8))


class TestWithResults:
    def test_publishes_counts(self) -> None:
        finalized = _proposal().with_results(2, 1)
        assert finalized.results_published is True
        assert finalized.final_for_votes == 2
        assert finalized.final_against_votes == 1

    def test_only_once(self) -> None:
        finalized = _proposal().with_results(2, 1)
        with pytest.raises(AlreadyFinalizedError):
            finalized.with_results(5, 5)

    def test_rejects_negative_counts(self) -> None:
        with pytest.raises(ValueError, match="unsigned"):
            _proposal().with_results(-1, 0)


class TestProposalResults:
    def test_unpublished_reads_zero(self) -> None:
        assert ProposalResults.of(_proposal()) == ProposalResults(0, 0, False)

    def test_published(self) -> None:
        finalized = _proposal().with_results(2, 1)
        assert ProposalResults.of(finalized) == ProposalResults(2, 1, True)
