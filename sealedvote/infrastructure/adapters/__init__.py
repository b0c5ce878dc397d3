"""Infrastructure adapters for SealedVote."""

from sealedvote.infrastructure.adapters.structlog_event_emitter import (
    StructlogEventEmitter,
)
from sealedvote.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__: list[str] = ["StructlogEventEmitter", "SystemTimeAuthority"]
