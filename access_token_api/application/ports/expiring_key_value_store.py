"""Expiring Key-Value Store Port for access token state.

This module defines the abstract interface of the store that holds one
usage counter per issued token. The store owns expiry: an entry is
absent once its TTL has elapsed, and nothing in the application layer
tracks time on its behalf.

Developer Golden Rules:
1. SET RESETS TTL - set() creates or overwrites and starts a new TTL window
2. UPDATE KEEPS TTL - update() must never extend an entry's lifetime
3. DELETE IS IDEMPOTENT - deleting an absent key is not an error
4. FAIL LOUD - backend failures raise StorageError, never return a default
5. CLOSE ONCE - aclose() releases backend connections at shutdown
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExpiringKeyValueStorePort(Protocol):
    """Protocol for a key-value store with per-key expiry.

    Keys are hex digests no longer than the configured key-length limit
    (45 characters by default). Values are signed integers.

    Usage:
        await store.set(key, -3, ttl_seconds=300)
        value = await store.get(key)       # -3
        await store.update(key, -2)        # TTL unchanged
        await store.delete(key)
        await store.get(key)               # None
    """

    async def set(self, key: str, value: int, ttl_seconds: int) -> None:
        """Create or overwrite an entry, resetting its TTL.

        Args:
            key: Storage key.
            value: Integer value to store.
            ttl_seconds: Seconds until the entry expires.

        Raises:
            StorageError: If the write fails.
        """
        ...

    async def get(self, key: str) -> int | None:
        """Read an entry.

        Args:
            key: Storage key.

        Returns:
            The stored integer, or None if the key is absent or expired.

        Raises:
            StorageError: If the read fails or the value is not an integer.
        """
        ...

    async def update(self, key: str, value: int) -> None:
        """Overwrite an entry's value without resetting its TTL.

        Does nothing if the key is absent, so an entry that expired
        between a read and this write is not recreated.

        Args:
            key: Storage key.
            value: New integer value.

        Raises:
            StorageError: If the write fails.
        """
        ...

    async def delete(self, key: str) -> None:
        """Remove an entry immediately. No error if already absent.

        Args:
            key: Storage key.

        Raises:
            StorageError: If the delete fails.
        """
        ...

    async def aclose(self) -> None:
        """Release any connections held by the store.

        Called once at shutdown; the store is not used afterwards.
        """
        ...
