"""Unit tests for structured logging and correlation ID management."""

import asyncio
import json
import logging
import re
from collections.abc import Iterator

import pytest
import structlog

from sealedvote.domain.models import CiphertextHandle
from sealedvote.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    get_logger_for_service,
    redact_sealed_values,
    set_correlation_id,
)
from sealedvote.infrastructure.observability.logging import _get_log_level


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    set_correlation_id("")


class TestCorrelationId:
    def test_generate_returns_uuid4(self) -> None:
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
        )
        assert uuid_pattern.match(generate_correlation_id())

    def test_unset_is_empty(self) -> None:
        set_correlation_id("")
        assert get_correlation_id() == ""

    def test_set_and_get(self) -> None:
        set_correlation_id("req-1")
        assert get_correlation_id() == "req-1"

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        results: dict[str, str] = {}

        async def task(name: str) -> None:
            set_correlation_id(name)
            await asyncio.sleep(0.01)
            results[name] = get_correlation_id()

        await asyncio.gather(task("a"), task("b"), task("c"))
        assert results == {"a": "a", "b": "b", "c": "c"}


class TestCorrelationIdProcessor:
    def test_adds_id_when_set(self) -> None:
        set_correlation_id("req-2")
        event = correlation_id_processor(None, "info", {"event": "x"})
        assert event["correlation_id"] == "req-2"

    def test_leaves_event_alone_when_unset(self) -> None:
        set_correlation_id("")
        assert correlation_id_processor(None, "info", {"event": "x"}) == {"event": "x"}


class TestConfigureStructlog:
    def test_production_renders_json(self) -> None:
        configure_structlog(environment="production")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert correlation_id_processor in processors
        assert redact_sealed_values in processors

    def test_development_renders_console(self) -> None:
        configure_structlog(environment="development")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("nope", logging.INFO)],
    )
    def test_log_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: int
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", value)
        assert _get_log_level() == expected


class TestRedactSealedValues:
    def test_shortens_handles_and_bytes(self) -> None:
        event = redact_sealed_values(
            None,
            "info",
            {
                "event": "vote_cast",
                "encrypted_for_votes": CiphertextHandle(b"\xab" * 32),
                "tally_handle": b"\x01\x02\x03\x04\x05" * 4,
                "proof": "0x" + "cd" * 64,
            },
        )
        assert event == {
            "event": "vote_cast",
            "encrypted_for_votes": "abababab...",
            "tally_handle": "01020304...",
            "proof": "cdcdcdcd...",
        }

    @pytest.mark.parametrize(
        "key",
        ["choice_for", "choice_against", "encrypted_choice_for", "encrypted_choice_against"],
    )
    def test_drops_vote_choices(self, key: str) -> None:
        event = redact_sealed_values(
            None, "info", {"event": "vote_cast", "voter": "alice", key: b"\x00" * 32}
        )
        assert event == {"event": "vote_cast", "voter": "alice"}

    def test_leaves_plain_fields_alone(self) -> None:
        event = {"event": "results_published", "proposal_id": 3, "for_votes": 12}
        assert redact_sealed_values(None, "info", dict(event)) == event

    def test_configured_output_has_no_full_ciphertext(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        handle = CiphertextHandle(b"\x9f" * 32)
        configure_structlog(environment="production")
        structlog.get_logger().info(
            "vote_cast",
            voter="alice",
            encrypted_for_votes=handle,
            encrypted_choice_for=b"\x01" * 32,
        )

        line = json.loads(capsys.readouterr().out.strip())
        assert line["encrypted_for_votes"] == "9f9f9f9f..."
        assert "encrypted_choice_for" not in line
        assert handle.value.hex() not in json.dumps(line)


def test_service_logger_binds_context() -> None:
    with structlog.testing.capture_logs() as logs:
        get_logger_for_service("ProposalLedgerService").info("proposal_created")

    assert logs == [
        {
            "event": "proposal_created",
            "log_level": "info",
            "service": "ProposalLedgerService",
            "component": "voting",
        }
    ]
