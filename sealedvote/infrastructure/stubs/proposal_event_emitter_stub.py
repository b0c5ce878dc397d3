"""Stub implementation of ProposalEventEmitterPort for testing.

Captures emitted events for test assertions without a real event sink.

Usage in tests:
    stub = ProposalEventEmitterStub()
    ledger = ProposalLedgerService(..., event_emitter=stub)

    await ledger.create("Adopt budget", timedelta(days=7), caller="admin")

    assert stub.event_types() == ["proposal.created"]
"""

from __future__ import annotations

from sealedvote.domain.events.proposal import ProposalEvent


class ProposalEventEmitterStub:
    """Records every emitted event in order.

    Attributes:
        emitted_events: Events in emission order.
    """

    def __init__(self) -> None:
        self.emitted_events: list[ProposalEvent] = []

    async def emit(self, event: ProposalEvent) -> None:
        self.emitted_events.append(event)

    def event_types(self) -> list[str]:
        """Return the event type of each emitted event, in order."""
        return [e.event_type for e in self.emitted_events]

    def events_of(self, event_type: str) -> list[ProposalEvent]:
        return [e for e in self.emitted_events if e.event_type == event_type]

    def reset(self) -> None:
        self.emitted_events.clear()
