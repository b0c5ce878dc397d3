"""In-memory decryption request correlation table for development and testing."""

from __future__ import annotations

from sealedvote.domain.models.decryption_request import DecryptionRequest

# DEV_MODE_WATERMARK per dev stub convention
DEV_MODE_WATERMARK: str = "DEV_STUB:DecryptionRequestRepositoryStub:v1"


class DecryptionRequestRepositoryStub:
    """In-memory DecryptionRequestRepositoryProtocol."""

    def __init__(self) -> None:
        self._requests: dict[int, DecryptionRequest] = {}

    async def save(self, request: DecryptionRequest) -> None:
        if request.request_id in self._requests:
            raise ValueError(f"Request {request.request_id} already recorded")
        self._requests[request.request_id] = request

    async def get(self, request_id: int) -> DecryptionRequest | None:
        return self._requests.get(request_id)

    async def list_for_proposal(self, proposal_id: int) -> list[DecryptionRequest]:
        return [r for r in self._requests.values() if r.proposal_id == proposal_id]
