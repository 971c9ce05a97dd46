"""Domain errors for the access token API.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from AccessTokenError.
"""

from access_token_api.domain.errors.access_token import (
    ConfigurationError,
    InvalidArgumentError,
    StorageConsistencyError,
    StorageError,
)

__all__: list[str] = [
    "ConfigurationError",
    "InvalidArgumentError",
    "StorageConsistencyError",
    "StorageError",
]
