"""ProposalLedgerService application service.

Owns proposal creation and identity. Every other service resolves
proposals through get(), so the NotFound rule lives in one place.

Invariants:
    - Ids are sequential from 1 and never reused; 0 never resolves.
    - Both encrypted tallies start as fresh encryptions of zero.
    - A failed create leaves the arena untouched.
"""

from __future__ import annotations

from datetime import timedelta

import structlog

from sealedvote.application.ports.authorization_policy import AuthorizationPolicy
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
from sealedvote.config.voting_config import DEFAULT_VOTING_CONFIG, VotingConfig
from sealedvote.domain.errors import (
    InvalidInputError,
    ProposalNotFoundError,
    UnauthorizedError,
)
from sealedvote.domain.events.proposal import ProposalCreatedEvent
from sealedvote.domain.models.proposal import NONEXISTENT_PROPOSAL_ID, Proposal

logger = structlog.get_logger()


class ProposalLedgerService:
    """Creates proposals and resolves proposal ids.

    Attributes:
        _repository: Proposal arena.
        _compute: Confidential-computation library.
        _event_emitter: Notification sink.
        _time: Time authority.
        _policy: Decides who may create proposals.
        _config: Creation limits.
    """

    def __init__(
        self,
        repository: ProposalRepositoryProtocol,
        compute: ConfidentialComputeProtocol,
        event_emitter: ProposalEventEmitterPort,
        time_authority: TimeAuthorityProtocol,
        policy: AuthorizationPolicy,
        config: VotingConfig = DEFAULT_VOTING_CONFIG,
    ) -> None:
        """Initialize the service with required dependencies.

        Raises:
            TypeError: If any required dependency is None.
        """
        if repository is None:
            raise TypeError("repository is required")
        if compute is None:
            raise TypeError("compute is required")
        if event_emitter is None:
            raise TypeError("event_emitter is required")
        if time_authority is None:
            raise TypeError("time_authority is required")
        if policy is None:
            raise TypeError("policy is required")

        self._repository = repository
        self._compute = compute
        self._event_emitter = event_emitter
        self._time = time_authority
        self._policy = policy
        self._config = config

    async def create(
        self,
        description: str,
        voting_duration: timedelta,
        caller: str,
    ) -> int:
        """Create a proposal whose voting window opens now.

        Flow:
            1. Authorization (Unauthorized)
            2. Parameter validation (InvalidInput)
            3. Allocate id, encrypt zero tallies, store
            4. Emit proposal.created

        Args:
            description: Free-text description.
            voting_duration: Length of the voting window; must be positive.
            caller: Identity creating the proposal.

        Returns:
            The new proposal id.

        Raises:
            UnauthorizedError: If the policy rejects ``caller``.
            InvalidInputError: If description or duration is unacceptable.
        """
        log = logger.bind(caller=caller)

        if not self._policy.can_create_proposal(caller):
            log.warning("proposal_creation_rejected", reason="unauthorized")
            raise UnauthorizedError(caller, operation="create_proposal")

        self._validate_description(description)
        self._validate_duration(voting_duration)

        now = self._time.utcnow()
        try:
            voting_deadline = now + voting_duration
        except OverflowError:
            raise InvalidInputError(
                "voting_duration", "deadline is beyond the representable range"
            ) from None
        encrypted_for = await self._compute.encrypt_zero()
        encrypted_against = await self._compute.encrypt_zero()

        proposal = Proposal(
            id=await self._repository.count() + 1,
            description=description,
            creator=caller,
            voting_deadline=voting_deadline,
            encrypted_for_votes=encrypted_for,
            encrypted_against_votes=encrypted_against,
            created_at=now,
        )
        await self._repository.insert(proposal)

        log.info(
            "proposal_created",
            proposal_id=proposal.id,
            voting_deadline=proposal.voting_deadline.isoformat(),
        )

        await self._event_emitter.emit(
            ProposalCreatedEvent(
                proposal_id=proposal.id,
                creator=caller,
                description=description,
                voting_deadline=proposal.voting_deadline,
            )
        )
        return proposal.id

    async def get(self, proposal_id: int) -> Proposal:
        """Return the proposal snapshot.

        Raises:
            ProposalNotFoundError: If the id is 0, above the count, or unknown.
        """
        if proposal_id <= NONEXISTENT_PROPOSAL_ID:
            raise ProposalNotFoundError(proposal_id)
        if proposal_id > await self._repository.count():
            raise ProposalNotFoundError(proposal_id)
        proposal = await self._repository.get(proposal_id)
        if proposal is None:
            raise ProposalNotFoundError(proposal_id)
        return proposal

    async def count(self) -> int:
        """Return the number of proposals created so far."""
        return await self._repository.count()

    async def has_voted(self, proposal_id: int, voter: str) -> bool:
        """Return whether ``voter`` has voted on the proposal.

        Raises:
            ProposalNotFoundError: If the proposal does not exist.
        """
        await self.get(proposal_id)
        return await self._repository.has_voted(proposal_id, voter)

    def _validate_description(self, description: str) -> None:
        if not description or not description.strip():
            raise InvalidInputError("description", "must not be empty")
        if len(description) > self._config.max_description_length:
            raise InvalidInputError(
                "description",
                f"exceeds {self._config.max_description_length} characters",
            )

    def _validate_duration(self, voting_duration: timedelta) -> None:
        if not isinstance(voting_duration, timedelta):
            raise InvalidInputError("voting_duration", "must be a time span")
        if voting_duration <= timedelta(0):
            raise InvalidInputError("voting_duration", "must be positive")
        if voting_duration.total_seconds() > self._config.max_voting_duration_seconds:
            raise InvalidInputError(
                "voting_duration",
                f"exceeds {self._config.max_voting_duration_seconds} seconds",
            )
