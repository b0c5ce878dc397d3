"""Integration tests for the HTTP surface.

Uses ASGI transport, no server or container required.
"""

from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from sealedvote.api.dependencies.voting import (
    get_voting_components,
    reset_voting_components,
)
from sealedvote.api.main import app
from sealedvote.bootstrap.voting import VotingComponents
from sealedvote.infrastructure.adapters import StructlogEventEmitter
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def fresh_singleton(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SEALEDVOTE_ADMINISTRATOR_ID", "0xadmin")
    reset_voting_components()
    yield
    reset_voting_components()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_default_wiring_serves_health(fresh_singleton) -> None:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/v1/health")

    assert response.status_code == 200
    assert response.json()["proposal_count"] == 0
    components = get_voting_components()
    assert components.config.administrator_id == "0xadmin"
    assert isinstance(components.event_emitter, StructlogEventEmitter)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_http_end_to_end(
    api_client: AsyncClient,
    components: VotingComponents,
    fake_time: FakeTimeAuthority,
) -> None:
    created = await api_client.post(
        "/v1/proposals",
        json={"description": "Adopt the budget", "voting_duration_seconds": 60},
        headers={"X-Caller-ID": "admin"},
    )
    pid = created.json()["proposal_id"]

    for voter, choice in [("alice", (1, 0)), ("bob", (1, 0)), ("carol", (0, 1))]:
        compute = components.compute
        response = await api_client.post(
            f"/v1/proposals/{pid}/votes",
            json={
                "encrypted_choice_for": (await compute.encrypt(choice[0])).hex(),
                "encrypted_choice_against": (await compute.encrypt(choice[1])).hex(),
            },
            headers={"X-Caller-ID": voter},
        )
        assert response.status_code == 202

    fake_time.advance(delta=timedelta(seconds=60))
    snapshot = (await api_client.get(f"/v1/proposals/{pid}")).json()
    assert snapshot["phase"] == "CLOSED"
    assert snapshot["voter_count"] == 3

    tally = await api_client.post(
        f"/v1/proposals/{pid}/tally", headers={"X-Caller-ID": "anyone"}
    )
    request_id = tally.json()["request_id"]
    payload, proof = components.compute.fulfill(request_id)

    callback = await api_client.post(
        "/v1/decryption/callback",
        json={
            "request_id": request_id,
            "payload_hex": payload.hex(),
            "proof_hex": proof.hex(),
        },
    )
    assert callback.status_code == 204

    replay = await api_client.post(
        "/v1/decryption/callback",
        json={
            "request_id": request_id,
            "payload_hex": payload.hex(),
            "proof_hex": proof.hex(),
        },
    )
    assert replay.status_code == 409

    snapshot = (await api_client.get(f"/v1/proposals/{pid}")).json()
    assert snapshot["phase"] == "FINALIZED"
    assert snapshot["final_for_votes"] == 2
    assert snapshot["final_against_votes"] == 1
