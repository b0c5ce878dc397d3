"""Observability infrastructure for structured logging and correlation.

Usage:
    from sealedvote.infrastructure.observability import (
        configure_structlog,
        get_correlation_id,
        set_correlation_id,
    )

    # At startup
    configure_structlog(environment="production")

    # In request handling
    set_correlation_id(request_correlation_id)
"""

from sealedvote.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from sealedvote.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
    redact_sealed_values,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "redact_sealed_values",
    "set_correlation_id",
]
