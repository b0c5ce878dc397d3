"""Unit tests for ResultPublisherService."""

import pytest

from sealedvote.bootstrap.voting import VotingComponents, build_voting_components
from sealedvote.domain.errors import (
    AlreadyFinalizedError,
    DecodeError,
    InvalidProofError,
    UnknownRequestError,
)
from sealedvote.domain.models import ProposalResults
from sealedvote.domain.services.tally_payload import encode_tally_payload
from sealedvote.infrastructure.stubs import ConfidentialComputeStub
from tests.helpers import cast_plain_vote, close_voting, create_proposal, deliver


class RaisingVerifierCompute(ConfidentialComputeStub):
    """Compute stub whose authenticity check raises instead of returning."""

    async def verify_authenticity(
        self, request_id: int, payload: bytes, proof: bytes
    ) -> bool:
        raise RuntimeError("verifier unavailable")


async def _closed_with_request(components: VotingComponents) -> tuple[int, int]:
    pid = await create_proposal(components)
    await cast_plain_vote(components, pid, "alice", 1, 0)
    await cast_plain_vote(components, pid, "bob", 1, 0)
    await cast_plain_vote(components, pid, "carol", 0, 1)
    await close_voting(components, pid)
    return pid, await components.service.request_tally(pid, "dave")


class TestOnDecryptionCallback:
    """Tests for verifying and committing oracle callbacks."""

    @pytest.mark.asyncio
    async def test_publishes_verified_result(
        self, components: VotingComponents
    ) -> None:
        pid, request_id = await _closed_with_request(components)

        await deliver(components, request_id)

        assert await components.service.get_results(pid) == ProposalResults(2, 1, True)
        published = components.event_emitter.events_of("proposal.results_published")
        assert [e.to_dict()["for_votes"] for e in published] == [2]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("request_id", [0, 42])
    async def test_unknown_request(
        self, components: VotingComponents, request_id: int
    ) -> None:
        pid, _ = await _closed_with_request(components)
        payload = encode_tally_payload(9, 9)

        with pytest.raises(UnknownRequestError):
            await components.service.on_decryption_callback(
                request_id, payload, components.compute.sign(request_id, payload)
            )
        assert (await components.service.get_results(pid)).is_published is False

    @pytest.mark.asyncio
    async def test_tampered_payload_is_rejected(
        self, components: VotingComponents
    ) -> None:
        pid, request_id = await _closed_with_request(components)
        _, proof = components.compute.fulfill(request_id)

        with pytest.raises(InvalidProofError) as exc_info:
            await components.service.on_decryption_callback(
                request_id, encode_tally_payload(0, 3), proof
            )

        assert exc_info.value.proposal_id == pid
        assert await components.service.get_results(pid) == ProposalResults(0, 0, False)

    @pytest.mark.asyncio
    async def test_proof_is_bound_to_request_id(
        self, components: VotingComponents
    ) -> None:
        pid, first = await _closed_with_request(components)
        second = await components.service.request_tally(pid, "dave")
        payload, proof = components.compute.fulfill(first)

        with pytest.raises(InvalidProofError):
            await components.service.on_decryption_callback(second, payload, proof)

    @pytest.mark.asyncio
    async def test_verifier_raising_counts_as_invalid(
        self, components: VotingComponents
    ) -> None:
        raising = build_voting_components(
            components.config,
            compute=RaisingVerifierCompute(),
            time_authority=components.time_authority,
        )
        pid, request_id = await _closed_with_request(raising)
        payload, proof = raising.compute.fulfill(request_id)

        with pytest.raises(InvalidProofError) as exc_info:
            await raising.service.on_decryption_callback(request_id, payload, proof)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert (await raising.service.get_results(pid)).is_published is False

    @pytest.mark.asyncio
    async def test_verified_but_malformed_payload(
        self, components: VotingComponents
    ) -> None:
        pid, request_id = await _closed_with_request(components)
        payload = encode_tally_payload(2, 1)[:40]

        with pytest.raises(DecodeError):
            await components.service.on_decryption_callback(
                request_id, payload, components.compute.sign(request_id, payload)
            )
        assert (await components.service.get_results(pid)).is_published is False

    @pytest.mark.asyncio
    async def test_signed_count_beyond_64_bits_is_rejected(
        self, components: VotingComponents
    ) -> None:
        pid, request_id = await _closed_with_request(components)
        payload = encode_tally_payload(1 << 64, 1)

        with pytest.raises(DecodeError, match="exceeds 64 bits"):
            await components.service.on_decryption_callback(
                request_id, payload, components.compute.sign(request_id, payload)
            )
        assert await components.service.get_results(pid) == ProposalResults(0, 0, False)

    @pytest.mark.asyncio
    async def test_second_callback_keeps_first_result(
        self, components: VotingComponents
    ) -> None:
        pid, first = await _closed_with_request(components)
        second = await components.service.request_tally(pid, "erin")
        await deliver(components, first)

        payload = encode_tally_payload(100, 100)
        with pytest.raises(AlreadyFinalizedError) as exc_info:
            await components.service.on_decryption_callback(
                second, payload, components.compute.sign(second, payload)
            )

        assert exc_info.value.request_id == second
        assert await components.service.get_results(pid) == ProposalResults(2, 1, True)

    @pytest.mark.asyncio
    async def test_replayed_callback_is_rejected(
        self, components: VotingComponents
    ) -> None:
        pid, request_id = await _closed_with_request(components)
        await deliver(components, request_id)

        with pytest.raises(AlreadyFinalizedError):
            await deliver(components, request_id)
        assert len(components.event_emitter.events_of("proposal.results_published")) == 1

    @pytest.mark.asyncio
    async def test_finalization_checked_before_proof(
        self, components: VotingComponents
    ) -> None:
        pid, request_id = await _closed_with_request(components)
        await deliver(components, request_id)

        with pytest.raises(AlreadyFinalizedError):
            await components.service.on_decryption_callback(
                request_id, b"", b"not a signature"
            )


class TestGetResults:
    @pytest.mark.asyncio
    async def test_unpublished_reads_zero(self, components: VotingComponents) -> None:
        pid = await create_proposal(components)
        await cast_plain_vote(components, pid, "alice", 1, 0)
        assert await components.service.get_results(pid) == ProposalResults(0, 0, False)

    @pytest.mark.asyncio
    async def test_zero_voters(self, components: VotingComponents) -> None:
        pid = await create_proposal(components)
        await close_voting(components, pid)
        await deliver(components, await components.service.request_tally(pid, "bob"))
        assert await components.service.get_results(pid) == ProposalResults(0, 0, True)
