"""ResultPublisherService application service.

Consumes the decryption oracle's asynchronous callback, verifies it, and
commits the plaintext tally as the proposal's final result, exactly once.

Callback flow (each step must pass before the next runs):
    1. Resolve request_id -> proposal_id   (UnknownRequestError)
    2. Proposal not yet finalized           (AlreadyFinalizedError)
    3. Verify proof over payload+request_id (InvalidProofError)
    4. Decode payload into (for, against)   (DecodeError)
    5. Commit finals, set results_published
    6. Emit proposal.results_published

Nothing decoded from the payload is trusted before step 3 succeeds. Step
2 makes the callback idempotent per proposal even though several requests
may be in flight for it: the first verified callback wins and every later
one is rejected with the committed values left untouched.
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
from sealedvote.application.ports.proposal_repository import (
    ProposalRepositoryProtocol,
)
from sealedvote.application.services.proposal_ledger_service import (
    ProposalLedgerService,
)
from sealedvote.domain.errors import (
    AlreadyFinalizedError,
    InvalidProofError,
    UnknownRequestError,
)
from sealedvote.domain.events.proposal import ResultsPublishedEvent
from sealedvote.domain.models.proposal import NONEXISTENT_PROPOSAL_ID, ProposalResults
from sealedvote.domain.services.tally_payload import decode_tally_payload

logger = structlog.get_logger()


class ResultPublisherService:
    """Verifies decryption callbacks and publishes final results.

    Attributes:
        _ledger: Resolves proposal ids.
        _repository: Proposal arena (for the finalization write).
        _requests: Correlation table.
        _compute: Provides the oracle's authenticity check.
        _event_emitter: Notification sink.
    """

    def __init__(
        self,
        ledger: ProposalLedgerService,
        repository: ProposalRepositoryProtocol,
        requests: DecryptionRequestRepositoryProtocol,
        compute: ConfidentialComputeProtocol,
        event_emitter: ProposalEventEmitterPort,
    ) -> None:
        """Initialize the service with required dependencies.

        Raises:
            TypeError: If any required dependency is None.
        """
        if ledger is None:
            raise TypeError("ledger is required")
        if repository is None:
            raise TypeError("repository is required")
        if requests is None:
            raise TypeError("requests is required")
        if compute is None:
            raise TypeError("compute is required")
        if event_emitter is None:
            raise TypeError("event_emitter is required")

        self._ledger = ledger
        self._repository = repository
        self._requests = requests
        self._compute = compute
        self._event_emitter = event_emitter

    async def on_decryption_callback(
        self,
        request_id: int,
        payload: bytes,
        proof: bytes,
    ) -> None:
        """Handle the oracle's answer to a decryption request.

        Args:
            request_id: Id returned by request_decryption().
            payload: Plaintext tallies, two 32-byte big-endian words.
            proof: Oracle's authenticity proof over request_id and payload.

        Raises:
            UnknownRequestError: If no correlation exists for ``request_id``.
            AlreadyFinalizedError: If the proposal's results are published.
            InvalidProofError: If the proof does not verify.
            DecodeError: If the payload is malformed.
        """
        log = logger.bind(request_id=request_id)

        correlation = await self._requests.get(request_id)
        proposal_id = (
            correlation.proposal_id if correlation else NONEXISTENT_PROPOSAL_ID
        )
        if proposal_id == NONEXISTENT_PROPOSAL_ID:
            log.warning("decryption_callback_rejected", reason="unknown_request")
            raise UnknownRequestError(request_id)

        log = log.bind(proposal_id=proposal_id)
        proposal = await self._ledger.get(proposal_id)

        if proposal.results_published:
            log.warning("decryption_callback_rejected", reason="already_finalized")
            raise AlreadyFinalizedError(proposal_id, request_id=request_id)

        if not await self._verify(request_id, proposal_id, payload, proof):
            log.warning(
                "decryption_callback_rejected",
                reason="invalid_proof",
                payload=payload,
                proof=proof,
            )
            raise InvalidProofError(request_id, proposal_id)

        counts = decode_tally_payload(payload)
        await self._repository.update(
            proposal.with_results(counts.for_votes, counts.against_votes)
        )

        log.info(
            "results_published",
            for_votes=counts.for_votes,
            against_votes=counts.against_votes,
        )
        await self._event_emitter.emit(
            ResultsPublishedEvent(
                proposal_id=proposal_id,
                for_votes=counts.for_votes,
                against_votes=counts.against_votes,
            )
        )

    async def get_results(self, proposal_id: int) -> ProposalResults:
        """Return the public result view.

        Unpublished proposals report (0, 0, False) rather than failing:
        existence and finalization are distinct conditions.

        Raises:
            ProposalNotFoundError: If the proposal does not exist.
        """
        return ProposalResults.of(await self._ledger.get(proposal_id))

    async def _verify(
        self,
        request_id: int,
        proposal_id: int,
        payload: bytes,
        proof: bytes,
    ) -> bool:
        """Run the library's authenticity check.

        The contract allows the check to raise instead of returning False;
        either outcome is a verification failure.
        """
        try:
            return bool(
                await self._compute.verify_authenticity(request_id, payload, proof)
            )
        except InvalidProofError:
            raise
        except Exception as exc:
            logger.warning(
                "proof_verification_raised",
                request_id=request_id,
                proposal_id=proposal_id,
                error_type=type(exc).__name__,
            )
            raise InvalidProofError(request_id, proposal_id) from exc
