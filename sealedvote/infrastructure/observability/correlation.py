"""Per-request correlation ids for log lines.

The HTTP middleware sets one id per inbound request; every line logged
while serving it, from any service, carries it as ``correlation_id``.
Decryption request ids are a different thing: they tie an oracle answer
to its proposal and are persisted, whereas correlation ids live only in
the current task's context.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the current id, or "" outside a request."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add ``correlation_id`` when one is set; lines logged at startup have none."""
    correlation_id = _correlation_id.get()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
