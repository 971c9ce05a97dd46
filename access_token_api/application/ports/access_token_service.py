"""Access Token Service port.

Protocol defining the interface for issuing, validating and revoking
action-scoped access tokens.

Developer Golden Rules:
1. Protocol-based DI - all implementations through ports
2. Tokens are OPAQUE to clients
3. (action, token) is the only credential for a grant
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class AccessTokenServiceProtocol(Protocol):
    """Protocol for access token lifecycle operations.

    This service handles:
    - Token issuance with a TTL and a remaining-use counter
    - Token validation that consumes one use
    - Explicit revocation before expiry
    """

    @abstractmethod
    async def issue(
        self,
        action: str,
        ttl_minutes: int | None = None,
        retries: int | None = None,
    ) -> str:
        """Issue a new token for an action.

        Args:
            action: Action the token authorizes (at least 4 chars trimmed).
            ttl_minutes: Lifetime in minutes (positive).
            retries: Permitted validations, 0 for unlimited until expiry.

        Returns:
            The opaque token.

        Raises:
            InvalidArgumentError: If any argument violates its precondition.
            StorageError: If the store write fails.
        """
        ...

    @abstractmethod
    async def validate(self, action: str, token: str) -> bool:
        """Validate a token against its action, consuming one use.

        Args:
            action: Action the token was issued for.
            token: Token to validate.

        Returns:
            True if the token was valid for this call, False otherwise.

        Raises:
            InvalidArgumentError: If action or token are malformed.
            StorageError: If a store read or write fails.
        """
        ...

    @abstractmethod
    async def revoke(self, action: str, token: str) -> bool:
        """Remove a token before it expires.

        Args:
            action: Action the token was issued for.
            token: Token to remove.

        Returns:
            True once the token is confirmed absent.

        Raises:
            InvalidArgumentError: If action or token are malformed.
            StorageConsistencyError: If the token still validates afterwards.
            StorageError: If a store operation fails.
        """
        ...

    @abstractmethod
    def derive_key(self, action: str, token: str) -> str:
        """Return the storage key for an (action, token) pair."""
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release the resources of the underlying store."""
        ...
