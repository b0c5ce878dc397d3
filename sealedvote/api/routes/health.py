"""Health check endpoint for the SealedVote API."""

from fastapi import APIRouter, Depends

from sealedvote.api.dependencies.voting import get_voting_service
from sealedvote.api.models.health import HealthResponse
from sealedvote.application.services import ConfidentialVotingService

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> HealthResponse:
    """Return health status and whether the voting core is reachable."""
    return HealthResponse(
        status="healthy",
        available=True,
        proposal_count=await service.count(),
    )
