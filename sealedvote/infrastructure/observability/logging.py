"""structlog configuration for the voting services.

Production renders one JSON object per line, development a coloured
console line. Both run the same processor chain, which ends with
``redact_sealed_values`` so that no log line, whatever a caller binds,
carries a full ciphertext or a voter's encrypted choice:

    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "vote_cast",
        "correlation_id": "uuid",
        "proposal_id": 1,
        "encrypted_for_votes": "9f3a61c0...",
    }
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from sealedvote.domain.models import CiphertextHandle
from sealedvote.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Hex digits kept when a sealed value is shortened
SEALED_PREFIX_LENGTH = 8

# A vote's encrypted choice is linkable to the voter bound on the same line
_CHOICE_KEYS = frozenset(
    {
        "choice_for",
        "choice_against",
        "encrypted_choice_for",
        "encrypted_choice_against",
    }
)
_SEALED_SUFFIXES = ("_handle", "_proof", "_payload")


def _get_log_level() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def _is_sealed_key(key: str) -> bool:
    return (
        key.startswith("encrypted_")
        or key in ("handle", "proof", "payload")
        or key.endswith(_SEALED_SUFFIXES)
    )


def _shorten(value: Any) -> Any:
    if isinstance(value, CiphertextHandle):
        return value.short() + "..."
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()[:SEALED_PREFIX_LENGTH] + "..."
    if isinstance(value, str):
        digits = value[2:] if value.startswith(("0x", "0X")) else value
        if len(digits) > SEALED_PREFIX_LENGTH:
            return digits[:SEALED_PREFIX_LENGTH] + "..."
    return value


def redact_sealed_values(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Drop encrypted vote choices and shorten ciphertexts, proofs and payloads.

    Keys named ``encrypted_*``, ``*_handle``, ``*_proof`` or ``*_payload``
    keep only a short hex prefix, enough to tell two values apart in a
    trace. Choice keys are removed outright.
    """
    for key in list(event_dict):
        if key in _CHOICE_KEYS:
            del event_dict[key]
        elif _is_sealed_key(key):
            event_dict[key] = _shorten(event_dict[key])
    return event_dict


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog once at startup.

    Args:
        environment: 'production' for JSON output, anything else for console.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        cast(Processor, redact_sealed_values),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "voting"
) -> structlog.BoundLogger:
    """Return a logger with ``service`` and ``component`` bound."""
    return structlog.get_logger().bind(service=service_name, component=component)
