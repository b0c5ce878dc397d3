"""Structured-log event emitter.

Publishes proposal notifications as structlog entries so log shippers
and indexers can follow the proposal lifecycle. Each entry carries the
event type under ``event_type`` and the event fields alongside.
"""

from __future__ import annotations

from structlog.typing import FilteringBoundLogger

from sealedvote.domain.events.proposal import ProposalEvent
from sealedvote.infrastructure.observability.logging import get_logger_for_service


class StructlogEventEmitter:
    """ProposalEventEmitterPort that writes events to a bound logger."""

    def __init__(self, logger: FilteringBoundLogger | None = None) -> None:
        self._log = logger or get_logger_for_service(
            "StructlogEventEmitter", component="notifications"
        )

    async def emit(self, event: ProposalEvent) -> None:
        self._log.info("proposal_event", **event.to_dict())
