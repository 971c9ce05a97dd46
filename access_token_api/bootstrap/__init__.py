"""Dependency wiring for the access token API."""

from access_token_api.bootstrap.access_token_service import (
    create_access_token_service,
    create_expiring_store,
)
from access_token_api.bootstrap.logging import configure_structlog

__all__: list[str] = [
    "configure_structlog",
    "create_access_token_service",
    "create_expiring_store",
]
