"""FastAPI application entry point for SealedVote."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from sealedvote import __version__
from sealedvote.api.middleware import LoggingMiddleware
from sealedvote.api.routes.decryption import router as decryption_router
from sealedvote.api.routes.health import router as health_router
from sealedvote.api.routes.proposal import router as proposal_router
from sealedvote.config.voting_config import VotingConfig
from sealedvote.infrastructure.observability import configure_structlog


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    load_dotenv()
    configure_structlog(environment=VotingConfig.from_environment().environment)
    yield


app = FastAPI(
    title="SealedVote API",
    description="Confidential proposal voting with encrypted tallies",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(proposal_router)
app.include_router(decryption_router)
