"""Unit tests for LoggingMiddleware."""

from collections.abc import Iterator

import pytest
import structlog
from httpx import AsyncClient
from structlog.testing import LogCapture


@pytest.fixture
def log_capture() -> Iterator[LogCapture]:
    """Capture log entries with request context variables merged in."""
    capture = LogCapture()
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars, capture]
    )
    yield capture
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.mark.asyncio
async def test_service_logs_carry_request_context(
    api_client: AsyncClient, log_capture: LogCapture
) -> None:
    await api_client.post(
        "/v1/proposals",
        json={"description": "Budget", "voting_duration_seconds": 60},
        headers={"X-Caller-ID": "admin", "X-Correlation-ID": "req-9"},
    )

    (created,) = [e for e in log_capture.entries if e["event"] == "proposal_created"]
    assert created["caller"] == "admin"
    assert created["method"] == "POST"
    assert created["path"] == "/v1/proposals"


@pytest.mark.asyncio
async def test_completion_logged_with_status(
    api_client: AsyncClient, log_capture: LogCapture
) -> None:
    await api_client.get("/v1/proposals/1")

    (completed,) = [
        e for e in log_capture.entries if e["event"] == "request_completed"
    ]
    assert completed["status_code"] == 404
    assert completed["log_level"] == "info"
    assert "caller" not in completed


@pytest.mark.asyncio
async def test_context_does_not_leak_between_requests(
    api_client: AsyncClient, log_capture: LogCapture
) -> None:
    await api_client.get("/v1/health", headers={"X-Caller-ID": "alice"})
    await api_client.get("/v1/health")

    completed = [e for e in log_capture.entries if e["event"] == "request_completed"]
    assert "caller" not in completed[-1]
