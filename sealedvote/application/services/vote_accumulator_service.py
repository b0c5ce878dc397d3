"""VoteAccumulatorService application service.

Receives one encrypted vote per voter per proposal and folds it into the
proposal's running encrypted sums. This is the only path that mutates
those sums.

Encoding contract:
    A vote is two encrypted single-bit indicators, one per direction. The
    accumulator cannot check that exactly one of them encrypts 1: the
    values are opaque here. Range and exclusivity are the encrypting
    client's responsibility, optionally backed by a proof system layered
    on top. A client that encrypts values outside {0, 1} skews the
    aggregate without detection.

Ordering:
    Homomorphic addition commutes, so any serialization of concurrent
    voters yields the same aggregate.
"""

from __future__ import annotations

import structlog

from sealedvote.application.ports.confidential_compute import (
    ConfidentialComputeProtocol,
)
from sealedvote.application.ports.proposal_event_emitter import (
    ProposalEventEmitterPort,
)
from sealedvote.application.ports.proposal_repository import (
    ProposalRepositoryProtocol,
)
from sealedvote.application.ports.time_authority import TimeAuthorityProtocol
from sealedvote.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from sealedvote.domain.errors import (
    DuplicateVoteError,
    InvalidInputError,
    ResultsFinalizedError,
    VotingClosedError,
)
from sealedvote.domain.events.proposal import VoteCastEvent
from sealedvote.domain.models.ciphertext import CiphertextHandle

logger = structlog.get_logger()


class VoteAccumulatorService:
    """Accepts encrypted votes during the open window."""

    def __init__(
        self,
        ledger: ProposalLedgerService,
        repository: ProposalRepositoryProtocol,
        compute: ConfidentialComputeProtocol,
        event_emitter: ProposalEventEmitterPort,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        """Initialize the service with required dependencies.

        Raises:
            TypeError: If any required dependency is None.
        """
        if ledger is None:
            raise TypeError("ledger is required")
        if repository is None:
            raise TypeError("repository is required")
        if compute is None:
            raise TypeError("compute is required")
        if event_emitter is None:
            raise TypeError("event_emitter is required")
        if time_authority is None:
            raise TypeError("time_authority is required")

        self._ledger = ledger
        self._repository = repository
        self._compute = compute
        self._event_emitter = event_emitter
        self._time = time_authority

    async def cast_vote(
        self,
        proposal_id: int,
        encrypted_choice_for: CiphertextHandle,
        encrypted_choice_against: CiphertextHandle,
        voter: str,
    ) -> None:
        """Record ``voter``'s encrypted vote on a proposal.

        Preconditions are checked in this order, each with its own error:
            1. proposal exists (ProposalNotFoundError)
            2. now < voting_deadline (VotingClosedError)
            3. voter has no vote record (DuplicateVoteError)
            4. results not published (ResultsFinalizedError)

        Both sums are computed before anything is written, so a failure in
        the library leaves the proposal and the vote record untouched.

        Raises:
            InvalidInputError: If ``voter`` is empty.
        """
        if not voter:
            raise InvalidInputError("voter", "must not be empty")

        log = logger.bind(proposal_id=proposal_id, voter=voter)
        proposal = await self._ledger.get(proposal_id)

        now = self._time.utcnow()
        if not proposal.is_open_at(now):
            log.warning("vote_rejected", reason="voting_closed")
            raise VotingClosedError(proposal_id, proposal.voting_deadline, now)

        if await self._repository.has_voted(proposal_id, voter):
            log.warning("vote_rejected", reason="duplicate_vote")
            raise DuplicateVoteError(proposal_id, voter)

        if proposal.results_published:
            log.warning("vote_rejected", reason="results_finalized")
            raise ResultsFinalizedError(proposal_id)

        new_for = await self._compute.add(
            proposal.encrypted_for_votes, encrypted_choice_for
        )
        new_against = await self._compute.add(
            proposal.encrypted_against_votes, encrypted_choice_against
        )
        await self._repository.record_vote(
            proposal.with_vote_added(new_for, new_against), voter
        )

        log.info(
            "vote_cast",
            voter_count=proposal.voter_count + 1,
            encrypted_for_votes=new_for,
            encrypted_against_votes=new_against,
        )
        await self._event_emitter.emit(
            VoteCastEvent(proposal_id=proposal_id, voter=voter)
        )
