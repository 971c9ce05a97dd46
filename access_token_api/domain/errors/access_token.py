"""Access token errors.

This module defines the failures raised while issuing, validating and
revoking action-scoped access tokens.

Error Taxonomy:
- InvalidArgumentError: caller input violates a precondition (recoverable)
- ConfigurationError: digest output does not fit the store key limit (fatal)
- StorageError: the backing store failed a read, write or delete
- StorageConsistencyError: a revoke did not take effect in the store
"""

from __future__ import annotations

from typing import Any

from access_token_api.domain.exceptions import AccessTokenError


class InvalidArgumentError(AccessTokenError, ValueError):
    """Raised when a caller supplies input that violates a precondition.

    The message echoes the offending value so the caller can correct it.
    Never retried automatically.

    Attributes:
        field: Name of the offending argument.
        value: The value that was passed.
    """

    def __init__(self, field: str, value: Any, requirement: str) -> None:
        """Initialize with the offending field and value.

        Args:
            field: Name of the offending argument.
            value: The value that was passed.
            requirement: Human-readable statement of the violated rule.
        """
        super().__init__(f"{requirement}. You passed `{value!r}` for {field}")
        self.field = field
        self.value = value
        self.requirement = requirement


class ConfigurationError(AccessTokenError):
    """Raised when the digest algorithm cannot address the store.

    This is a startup error. It must not be caught and retried per call.

    Attributes:
        algorithm: The configured digest algorithm.
        key_length: Length of the storage key the algorithm produces.
        max_key_length: The store's key-length limit.
    """

    def __init__(
        self,
        message: str = "",
        algorithm: str = "",
        key_length: int | None = None,
        max_key_length: int | None = None,
    ) -> None:
        """Initialize with algorithm details.

        Args:
            message: Error description. Built from the details when empty.
            algorithm: The configured digest algorithm.
            key_length: Length of the storage key the algorithm produces.
            max_key_length: The store's key-length limit.
        """
        if not message:
            message = (
                f"Algorithm {algorithm!r} produces a storage key that is too long "
                f"({key_length} > {max_key_length}). Consider using md5."
            )
        super().__init__(message)
        self.algorithm = algorithm
        self.key_length = key_length
        self.max_key_length = max_key_length


class StorageError(AccessTokenError):
    """Raised when the expiring key-value store fails an operation.

    Propagated to the caller, who decides whether to retry.

    Attributes:
        operation: Store operation that failed (get, set, update, delete).
        key: Storage key the operation addressed.
    """

    def __init__(self, operation: str, key: str, message: str = "") -> None:
        """Initialize with the failed operation.

        Args:
            operation: Store operation that failed.
            key: Storage key the operation addressed.
            message: Optional detail appended to the default message.
        """
        text = f"Store {operation} failed for key {key}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)
        self.operation = operation
        self.key = key


class StorageConsistencyError(StorageError):
    """Raised when a revoked token still validates afterwards.

    Indicates the store's delete did not take effect or raced with a
    concurrent write.

    Attributes:
        action: The action the token was issued for.
    """

    def __init__(self, action: str, key: str) -> None:
        """Initialize with the action whose token could not be removed.

        Args:
            action: The action the token was issued for.
            key: Storage key that should have been deleted.
        """
        super().__init__(
            operation="delete",
            key=key,
            message=f"access token for action {action!r} failed to remove",
        )
        self.action = action
