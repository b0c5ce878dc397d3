"""
Pytest configuration and shared fixtures for SealedVote tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Time-dependent tests use FakeTimeAuthority, never the wall clock
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from collections.abc import AsyncIterator
from datetime import timedelta

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from sealedvote.api.dependencies.voting import (
    get_voting_components,
    get_voting_service,
)
from sealedvote.api.middleware import LoggingMiddleware
from sealedvote.api.routes.decryption import router as decryption_router
from sealedvote.api.routes.health import router as health_router
from sealedvote.api.routes.proposal import router as proposal_router
from sealedvote.bootstrap.voting import VotingComponents, build_voting_components
from sealedvote.config.voting_config import VotingConfig
from sealedvote.infrastructure.stubs import (
    ConfidentialComputeStub,
    DecryptionRequestRepositoryStub,
    ProposalEventEmitterStub,
    ProposalRepositoryStub,
)
from tests.helpers import FakeTimeAuthority

ADMIN = "admin"


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from sealedvote import __version__

    return __version__


@pytest.fixture
def fake_time() -> FakeTimeAuthority:
    return FakeTimeAuthority()


@pytest.fixture
def voting_config() -> VotingConfig:
    return VotingConfig(administrator_id=ADMIN)


@pytest.fixture
def compute() -> ConfidentialComputeStub:
    return ConfidentialComputeStub()


@pytest.fixture
def repository() -> ProposalRepositoryStub:
    return ProposalRepositoryStub()


@pytest.fixture
def request_repository() -> DecryptionRequestRepositoryStub:
    return DecryptionRequestRepositoryStub()


@pytest.fixture
def emitter() -> ProposalEventEmitterStub:
    return ProposalEventEmitterStub()


@pytest.fixture
def components(
    voting_config: VotingConfig,
    compute: ConfidentialComputeStub,
    repository: ProposalRepositoryStub,
    request_repository: DecryptionRequestRepositoryStub,
    emitter: ProposalEventEmitterStub,
    fake_time: FakeTimeAuthority,
) -> VotingComponents:
    """Fully wired voting core on in-memory stubs and a frozen clock."""
    return build_voting_components(
        voting_config,
        compute=compute,
        repository=repository,
        requests=request_repository,
        event_emitter=emitter,
        time_authority=fake_time,
    )


@pytest.fixture
def one_day() -> timedelta:
    return timedelta(days=1)


@pytest.fixture
def api_app(components: VotingComponents) -> FastAPI:
    """API app serving the fixture-wired voting core."""
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)
    app.include_router(health_router)
    app.include_router(proposal_router)
    app.include_router(decryption_router)
    app.dependency_overrides[get_voting_components] = lambda: components
    app.dependency_overrides[get_voting_service] = lambda: components.service
    return app


@pytest_asyncio.fixture
async def api_client(api_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
