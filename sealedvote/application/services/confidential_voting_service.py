"""ConfidentialVotingService - serialized entry point to the voting core.

Composes the four component services behind one asyncio.Lock. Every
operation, reads included, runs to completion before the next one starts,
so no two operations interleave across an await. Together with each
service validating all preconditions before its single write, this gives
every public operation all-or-nothing semantics.

Architecture Pattern:
    create()                  -> ProposalLedgerService
    cast_vote()               -> VoteAccumulatorService
    request_tally()           -> TallyCoordinatorService
    on_decryption_callback()  -> ResultPublisherService
    get()/get_results()/...   -> read accessors, side-effect free
"""

from __future__ import annotations

import asyncio
from datetime import timedelta

from sealedvote.application.ports.time_authority import TimeAuthorityProtocol
from sealedvote.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from sealedvote.application.services.result_publisher_service import (
    ResultPublisherService,
)
from sealedvote.application.services.tally_coordinator_service import (
    TallyCoordinatorService,
)
from sealedvote.application.services.vote_accumulator_service import (
    VoteAccumulatorService,
)
from sealedvote.domain.models.ciphertext import CiphertextHandle
from sealedvote.domain.models.proposal import Proposal, ProposalPhase, ProposalResults


class ConfidentialVotingService:
    """Serialized facade over the confidential voting services."""

    def __init__(
        self,
        ledger: ProposalLedgerService,
        accumulator: VoteAccumulatorService,
        coordinator: TallyCoordinatorService,
        publisher: ResultPublisherService,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._ledger = ledger
        self._accumulator = accumulator
        self._coordinator = coordinator
        self._publisher = publisher
        self._time = time_authority
        self._lock = asyncio.Lock()

    async def create(
        self,
        description: str,
        voting_duration: timedelta,
        caller: str,
    ) -> int:
        async with self._lock:
            return await self._ledger.create(description, voting_duration, caller)

    async def cast_vote(
        self,
        proposal_id: int,
        encrypted_choice_for: CiphertextHandle,
        encrypted_choice_against: CiphertextHandle,
        voter: str,
    ) -> None:
        async with self._lock:
            await self._accumulator.cast_vote(
                proposal_id, encrypted_choice_for, encrypted_choice_against, voter
            )

    async def request_tally(self, proposal_id: int, caller: str) -> int:
        async with self._lock:
            return await self._coordinator.request_tally(proposal_id, caller)

    async def on_decryption_callback(
        self,
        request_id: int,
        payload: bytes,
        proof: bytes,
    ) -> None:
        """Entry point for the decryption oracle; see ResultPublisherService."""
        async with self._lock:
            await self._publisher.on_decryption_callback(request_id, payload, proof)

    async def get(self, proposal_id: int) -> Proposal:
        async with self._lock:
            return await self._ledger.get(proposal_id)

    async def get_results(self, proposal_id: int) -> ProposalResults:
        async with self._lock:
            return await self._publisher.get_results(proposal_id)

    async def count(self) -> int:
        async with self._lock:
            return await self._ledger.count()

    async def has_voted(self, proposal_id: int, voter: str) -> bool:
        async with self._lock:
            return await self._ledger.has_voted(proposal_id, voter)

    async def pending_requests(self, proposal_id: int) -> list[int]:
        """Return ids of decryption requests still awaiting a callback.

        Once a proposal is finalized no request is outstanding: any later
        callback is rejected, so the list is empty.
        """
        async with self._lock:
            proposal = await self._ledger.get(proposal_id)
            if proposal.results_published:
                return []
            requests = await self._coordinator.list_requests(proposal_id)
            return [r.request_id for r in requests]

    async def phase(self, proposal_id: int) -> ProposalPhase:
        """Return the proposal's current lifecycle phase."""
        async with self._lock:
            proposal = await self._ledger.get(proposal_id)
            requests = await self._coordinator.list_requests(proposal_id)
            return proposal.phase_at(self._time.utcnow(), bool(requests))
