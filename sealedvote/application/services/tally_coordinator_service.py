"""TallyCoordinatorService application service.

Turns a closed proposal's encrypted sums into an out-of-band decryption
request and records which proposal the request belongs to.

The request and its answer are two independent messages. This service
never waits for the oracle: it records request_id -> proposal_id in the
correlation table and returns. ResultPublisherService picks the answer up
whenever, if ever, it arrives.

Retries:
    request_tally may be called repeatedly for the same proposal (for
    example after a dropped submission). Each call yields a new,
    independent correlation. Nothing here de-duplicates; the publisher's
    one-time finalization guard is what prevents double application.
"""

from __future__ import annotations

import structlog

from sealedvote.application.ports.confidential_compute import (
    ConfidentialComputeProtocol,
)
from sealedvote.application.ports.decryption_request_repository import (
    DecryptionRequestRepositoryProtocol,
)
from sealedvote.application.ports.proposal_event_emitter import (
    ProposalEventEmitterPort,
)
from sealedvote.application.ports.time_authority import TimeAuthorityProtocol
from sealedvote.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from sealedvote.config.voting_config import DEFAULT_VOTING_CONFIG, VotingConfig
from sealedvote.domain.errors import AlreadyFinalizedError, VotingStillOpenError
from sealedvote.domain.events.proposal import TallyRequestedEvent
from sealedvote.domain.models.decryption_request import DecryptionRequest

logger = structlog.get_logger()


class TallyCoordinatorService:
    """Issues decryption requests for closed proposals.

    Attributes:
        _ledger: Resolves proposal ids.
        _requests: Correlation table.
        _compute: Confidential-computation library.
        _event_emitter: Notification sink.
        _time: Time authority.
        _config: Supplies the callback selector.
    """

    def __init__(
        self,
        ledger: ProposalLedgerService,
        requests: DecryptionRequestRepositoryProtocol,
        compute: ConfidentialComputeProtocol,
        event_emitter: ProposalEventEmitterPort,
        time_authority: TimeAuthorityProtocol,
        config: VotingConfig = DEFAULT_VOTING_CONFIG,
    ) -> None:
        """Initialize the service with required dependencies.

        Raises:
            TypeError: If any required dependency is None.
        """
        if ledger is None:
            raise TypeError("ledger is required")
        if requests is None:
            raise TypeError("requests is required")
        if compute is None:
            raise TypeError("compute is required")
        if event_emitter is None:
            raise TypeError("event_emitter is required")
        if time_authority is None:
            raise TypeError("time_authority is required")

        self._ledger = ledger
        self._requests = requests
        self._compute = compute
        self._event_emitter = event_emitter
        self._time = time_authority
        self._config = config

    async def request_tally(self, proposal_id: int, caller: str) -> int:
        """Submit a closed proposal's encrypted sums for decryption.

        Any caller may do this once the deadline has passed: it only
        triggers computation over data that can no longer change.

        Args:
            proposal_id: Proposal to tally.
            caller: Identity requesting the tally (recorded, not checked).

        Returns:
            The oracle's request id.

        Raises:
            ProposalNotFoundError: If the proposal does not exist.
            VotingStillOpenError: If now < voting_deadline.
            AlreadyFinalizedError: If results are already published.
        """
        log = logger.bind(proposal_id=proposal_id, caller=caller)
        proposal = await self._ledger.get(proposal_id)

        now = self._time.utcnow()
        if proposal.is_open_at(now):
            log.warning("tally_request_rejected", reason="voting_still_open")
            raise VotingStillOpenError(proposal_id, proposal.voting_deadline)

        if proposal.results_published:
            log.warning("tally_request_rejected", reason="already_finalized")
            raise AlreadyFinalizedError(proposal_id)

        # Order matters: the oracle returns plaintexts in submission order
        handles = [
            await self._compute.to_transport_form(proposal.encrypted_for_votes),
            await self._compute.to_transport_form(proposal.encrypted_against_votes),
        ]
        request_id = await self._compute.request_decryption(
            handles, self._config.callback_selector
        )

        await self._requests.save(
            DecryptionRequest(
                request_id=request_id,
                proposal_id=proposal_id,
                requested_by=caller,
                requested_at=now,
            )
        )

        log.info("tally_requested", request_id=request_id)
        await self._event_emitter.emit(
            TallyRequestedEvent(
                proposal_id=proposal_id,
                request_id=request_id,
                requested_by=caller,
            )
        )
        return request_id

    async def list_requests(self, proposal_id: int) -> list[DecryptionRequest]:
        """Return every decryption request issued for a proposal.

        Raises:
            ProposalNotFoundError: If the proposal does not exist.
        """
        await self._ledger.get(proposal_id)
        return await self._requests.list_for_proposal(proposal_id)
