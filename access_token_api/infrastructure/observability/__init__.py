"""Observability infrastructure for structured logging.

This module provides:
- Structured JSON logging with structlog
- A correlation ID processor so a host application can tie token
  events to its own unit of work

Usage:
    from access_token_api.infrastructure.observability import (
        configure_structlog,
        set_correlation_id,
    )

    configure_structlog(environment="production")

    # Every access_token_* event logged in this context carries the ID
    set_correlation_id(job_id)
    await service.validate("checkout", token)
"""

from access_token_api.infrastructure.observability.correlation import (
    correlation_id_processor,
    get_correlation_id,
    set_correlation_id,
)
from access_token_api.infrastructure.observability.logging import configure_structlog

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "get_correlation_id",
    "set_correlation_id",
]
