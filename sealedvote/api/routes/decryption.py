"""Decryption callback route.

The single entry point through which the decryption oracle delivers a
plaintext tally. The handler relies on the publisher's checks (known
request, not yet finalized, valid proof, well-formed payload) rather than
on any protection of the route itself.
"""

from fastapi import APIRouter, Depends, Request, Response

from sealedvote.api.dependencies.voting import get_voting_service
from sealedvote.api.errors import problem_for
from sealedvote.api.models.proposal import DecryptionCallbackRequest, hex_to_bytes
from sealedvote.application.services import ConfidentialVotingService
from sealedvote.domain.exceptions import SealedVoteError

router = APIRouter(prefix="/v1/decryption", tags=["decryption"])


@router.post("/callback", status_code=204, response_class=Response)
async def decryption_callback(
    body: DecryptionCallbackRequest,
    request: Request,
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> Response:
    try:
        await service.on_decryption_callback(
            body.request_id,
            hex_to_bytes(body.payload_hex),
            hex_to_bytes(body.proof_hex),
        )
    except SealedVoteError as e:
        raise problem_for(e, request) from None
    return Response(status_code=204)
