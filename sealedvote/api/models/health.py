"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        available: Whether the voting core is wired and accepting calls.
        proposal_count: Number of proposals created so far.
    """

    status: str
    available: bool
    proposal_count: int
