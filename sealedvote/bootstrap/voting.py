"""Bootstrap wiring for the confidential voting core.

Builds a ConfidentialVotingService from its collaborators. Anything not
supplied gets the in-memory development implementation.
"""

from __future__ import annotations

from dataclasses import dataclass

from sealedvote.application.ports.authorization_policy import AuthorizationPolicy
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
from sealedvote.application.ports.time_authority import TimeAuthorityProtocol
from sealedvote.application.services import (
    ConfidentialVotingService,
    ProposalLedgerService,
    ResultPublisherService,
    SingleAdministratorPolicy,
    TallyCoordinatorService,
    VoteAccumulatorService,
)
from sealedvote.config.voting_config import VotingConfig
from sealedvote.infrastructure.adapters import SystemTimeAuthority
from sealedvote.infrastructure.stubs import (
    ConfidentialComputeStub,
    DecryptionRequestRepositoryStub,
    ProposalEventEmitterStub,
    ProposalRepositoryStub,
)


@dataclass
class VotingComponents:
    """Everything a running voting core is built from.

    Kept together so tests and the API layer can reach the collaborators
    (for example the compute stub, to play the oracle).
    """

    service: ConfidentialVotingService
    compute: ConfidentialComputeProtocol
    repository: ProposalRepositoryProtocol
    requests: DecryptionRequestRepositoryProtocol
    event_emitter: ProposalEventEmitterPort
    time_authority: TimeAuthorityProtocol
    config: VotingConfig


def build_voting_components(
    config: VotingConfig | None = None,
    *,
    compute: ConfidentialComputeProtocol | None = None,
    repository: ProposalRepositoryProtocol | None = None,
    requests: DecryptionRequestRepositoryProtocol | None = None,
    event_emitter: ProposalEventEmitterPort | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    policy: AuthorizationPolicy | None = None,
) -> VotingComponents:
    """Wire the voting services together.

    Args:
        config: Voting configuration (defaults to the environment).
        compute: Confidential-computation library.
        repository: Proposal arena.
        requests: Decryption request correlation table.
        event_emitter: Notification sink.
        time_authority: Clock.
        policy: Proposal-creation authorization policy. Defaults to
            SingleAdministratorPolicy(config.administrator_id).

    Returns:
        The wired components.
    """
    config = config or VotingConfig.from_environment()
    compute = compute or ConfidentialComputeStub()
    repository = repository or ProposalRepositoryStub()
    requests = requests or DecryptionRequestRepositoryStub()
    event_emitter = event_emitter or ProposalEventEmitterStub()
    time_authority = time_authority or SystemTimeAuthority()
    policy = policy or SingleAdministratorPolicy(config.administrator_id)

    ledger = ProposalLedgerService(
        repository=repository,
        compute=compute,
        event_emitter=event_emitter,
        time_authority=time_authority,
        policy=policy,
        config=config,
    )
    service = ConfidentialVotingService(
        ledger=ledger,
        accumulator=VoteAccumulatorService(
            ledger=ledger,
            repository=repository,
            compute=compute,
            event_emitter=event_emitter,
            time_authority=time_authority,
        ),
        coordinator=TallyCoordinatorService(
            ledger=ledger,
            requests=requests,
            compute=compute,
            event_emitter=event_emitter,
            time_authority=time_authority,
            config=config,
        ),
        publisher=ResultPublisherService(
            ledger=ledger,
            repository=repository,
            requests=requests,
            compute=compute,
            event_emitter=event_emitter,
        ),
        time_authority=time_authority,
    )
    return VotingComponents(
        service=service,
        compute=compute,
        repository=repository,
        requests=requests,
        event_emitter=event_emitter,
        time_authority=time_authority,
        config=config,
    )
