"""Proposal API routes.

FastAPI router for the proposal lifecycle: create, read, vote, request
tally, read results. The caller identity comes from the X-Caller-ID
header; authenticating it is the deployment's concern.

Domain errors are returned as RFC 7807 problem details.
"""

from datetime import timedelta

from fastapi import APIRouter, Depends, Header, Request

from sealedvote.api.dependencies.voting import (
    get_voting_components,
    get_voting_service,
)
from sealedvote.api.errors import problem_for
from sealedvote.api.models.proposal import (
    CastVoteRequest,
    CreateProposalRequest,
    CreateProposalResponse,
    ProposalResponse,
    ResultsResponse,
    TallyRequestResponse,
    VoteStatusResponse,
    hex_to_bytes,
)
from sealedvote.application.services import ConfidentialVotingService
from sealedvote.bootstrap.voting import VotingComponents
from sealedvote.domain.errors import InvalidInputError
from sealedvote.domain.exceptions import SealedVoteError

router = APIRouter(prefix="/v1/proposals", tags=["proposals"])


@router.post("", response_model=CreateProposalResponse, status_code=201)
async def create_proposal(
    body: CreateProposalRequest,
    request: Request,
    caller: str = Header(..., alias="X-Caller-ID", min_length=1),
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> CreateProposalResponse:
    """Create a proposal (administrator only)."""
    try:
        proposal_id = await service.create(
            body.description,
            _voting_duration(body.voting_duration_seconds),
            caller,
        )
        proposal = await service.get(proposal_id)
    except SealedVoteError as e:
        raise problem_for(e, request) from None

    return CreateProposalResponse(
        proposal_id=proposal_id,
        voting_deadline=proposal.voting_deadline,
    )


@router.get("/{proposal_id}", response_model=ProposalResponse)
async def get_proposal(
    proposal_id: int,
    request: Request,
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> ProposalResponse:
    """Return the proposal snapshot. Tallies are shown encrypted until published."""
    try:
        proposal = await service.get(proposal_id)
        phase = await service.phase(proposal_id)
    except SealedVoteError as e:
        raise problem_for(e, request) from None

    published = proposal.results_published
    return ProposalResponse(
        proposal_id=proposal.id,
        description=proposal.description,
        creator=proposal.creator,
        voting_deadline=proposal.voting_deadline,
        created_at=proposal.created_at,
        phase=phase.value,
        voter_count=proposal.voter_count,
        results_published=published,
        encrypted_for_votes=proposal.encrypted_for_votes.hex(),
        encrypted_against_votes=proposal.encrypted_against_votes.hex(),
        final_for_votes=proposal.final_for_votes if published else None,
        final_against_votes=proposal.final_against_votes if published else None,
    )


@router.post("/{proposal_id}/votes", status_code=202)
async def cast_vote(
    proposal_id: int,
    body: CastVoteRequest,
    request: Request,
    caller: str = Header(..., alias="X-Caller-ID", min_length=1),
    components: VotingComponents = Depends(get_voting_components),
) -> dict[str, int | str]:
    """Cast the caller's encrypted vote."""
    try:
        await components.service.get(proposal_id)
        encrypted_for = await components.compute.from_transport_form(
            hex_to_bytes(body.encrypted_choice_for)
        )
        encrypted_against = await components.compute.from_transport_form(
            hex_to_bytes(body.encrypted_choice_against)
        )
        await components.service.cast_vote(
            proposal_id, encrypted_for, encrypted_against, caller
        )
    except SealedVoteError as e:
        raise problem_for(e, request) from None

    return {"proposal_id": proposal_id, "voter": caller}


@router.get("/{proposal_id}/votes/{voter}", response_model=VoteStatusResponse)
async def get_vote_status(
    proposal_id: int,
    voter: str,
    request: Request,
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> VoteStatusResponse:
    """Report whether ``voter`` has voted. Never reveals the direction."""
    try:
        has_voted = await service.has_voted(proposal_id, voter)
    except SealedVoteError as e:
        raise problem_for(e, request) from None
    return VoteStatusResponse(
        proposal_id=proposal_id, voter=voter, has_voted=has_voted
    )


@router.post(
    "/{proposal_id}/tally",
    response_model=TallyRequestResponse,
    status_code=202,
)
async def request_tally(
    proposal_id: int,
    request: Request,
    caller: str = Header(..., alias="X-Caller-ID", min_length=1),
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> TallyRequestResponse:
    """Submit the closed proposal's encrypted tallies for decryption.

    Returns 202: the result is published later by the oracle callback.
    """
    try:
        request_id = await service.request_tally(proposal_id, caller)
    except SealedVoteError as e:
        raise problem_for(e, request) from None
    return TallyRequestResponse(proposal_id=proposal_id, request_id=request_id)


@router.get("/{proposal_id}/results", response_model=ResultsResponse)
async def get_results(
    proposal_id: int,
    request: Request,
    service: ConfidentialVotingService = Depends(get_voting_service),
) -> ResultsResponse:
    try:
        results = await service.get_results(proposal_id)
    except SealedVoteError as e:
        raise problem_for(e, request) from None
    return ResultsResponse(
        proposal_id=proposal_id,
        for_votes=results.for_votes,
        against_votes=results.against_votes,
        is_published=results.is_published,
    )


def _voting_duration(seconds: int) -> timedelta:
    """Convert the request's duration, rejecting values timedelta cannot hold."""
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise InvalidInputError(
            "voting_duration", f"{seconds} seconds is out of range"
        ) from None
