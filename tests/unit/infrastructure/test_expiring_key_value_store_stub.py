"""Unit tests for ExpiringKeyValueStoreStub.

Tests the in-memory implementation of ExpiringKeyValueStorePort.
"""

from __future__ import annotations

import pytest

from access_token_api.application.ports.expiring_key_value_store import (
    ExpiringKeyValueStorePort,
)
from access_token_api.domain.errors import StorageError
from access_token_api.infrastructure.stubs.expiring_key_value_store_stub import (
    ExpiringKeyValueStoreStub,
)
from tests.helpers import FakeTimeAuthority


class TestExpiringKeyValueStoreStubImplementsProtocol:
    """Tests that stub implements protocol."""

    def test_stub_implements_protocol(self) -> None:
        """Stub is a valid ExpiringKeyValueStorePort implementation."""
        stub = ExpiringKeyValueStoreStub()
        assert isinstance(stub, ExpiringKeyValueStorePort)


class TestExpiringKeyValueStoreStubOperations:
    """Tests for get/set/update/delete."""

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(
        self, memory_store: ExpiringKeyValueStoreStub
    ) -> None:
        """Absent keys read as None."""
        assert await memory_store.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, memory_store: ExpiringKeyValueStoreStub) -> None:
        """A stored value is returned until it expires."""
        await memory_store.set("key", -2, ttl_seconds=60)
        assert await memory_store.get("key") == -2
        assert len(memory_store) == 1

    @pytest.mark.asyncio
    async def test_entry_expires_after_ttl(
        self,
        memory_store: ExpiringKeyValueStoreStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        """Entries are absent once the TTL has elapsed."""
        await memory_store.set("key", -2, ttl_seconds=60)

        fake_time_authority.advance(seconds=59)
        assert await memory_store.get("key") == -2

        fake_time_authority.advance(seconds=1)
        assert await memory_store.get("key") is None
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_set_resets_ttl(
        self,
        memory_store: ExpiringKeyValueStoreStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        """Overwriting with set starts a new TTL window."""
        await memory_store.set("key", -2, ttl_seconds=60)
        fake_time_authority.advance(seconds=50)
        await memory_store.set("key", -3, ttl_seconds=60)

        fake_time_authority.advance(seconds=50)
        assert await memory_store.get("key") == -3

    @pytest.mark.asyncio
    async def test_update_keeps_ttl(
        self,
        memory_store: ExpiringKeyValueStoreStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        """update changes the value but not the deadline."""
        await memory_store.set("key", -3, ttl_seconds=60)
        fake_time_authority.advance(seconds=50)
        await memory_store.update("key", -2)

        assert await memory_store.get("key") == -2
        assert memory_store.ttl_remaining("key") == 10

        fake_time_authority.advance(seconds=10)
        assert await memory_store.get("key") is None

    @pytest.mark.asyncio
    async def test_update_absent_key_does_not_create(
        self, memory_store: ExpiringKeyValueStoreStub
    ) -> None:
        """update never creates an entry without a TTL."""
        await memory_store.update("key", -1)
        assert await memory_store.get("key") is None

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(
        self, memory_store: ExpiringKeyValueStoreStub
    ) -> None:
        """Deleting twice, or deleting nothing, is not an error."""
        await memory_store.set("key", -1, ttl_seconds=60)
        await memory_store.delete("key")
        await memory_store.delete("key")
        await memory_store.delete("never-set")
        assert await memory_store.get("key") is None

    @pytest.mark.asyncio
    async def test_clear(self, memory_store: ExpiringKeyValueStoreStub) -> None:
        """clear removes everything."""
        await memory_store.set("a", -1, ttl_seconds=60)
        await memory_store.set("b", -1, ttl_seconds=60)
        memory_store.clear()
        assert len(memory_store) == 0

    @pytest.mark.asyncio
    async def test_aclose_keeps_entries(
        self, memory_store: ExpiringKeyValueStoreStub
    ) -> None:
        """Closing the in-memory store releases nothing and loses nothing."""
        await memory_store.set("key", -2, ttl_seconds=60)
        await memory_store.aclose()
        assert await memory_store.get("key") == -2


class TestExpiringKeyValueStoreStubFailureInjection:
    """Tests for simulated backend failures."""

    @pytest.mark.asyncio
    async def test_fail_on_raises_storage_error(self) -> None:
        """Selected operations raise StorageError naming the operation."""
        stub = ExpiringKeyValueStoreStub(fail_on={"get"})

        with pytest.raises(StorageError) as exc_info:
            await stub.get("key")
        assert exc_info.value.operation == "get"
        assert exc_info.value.key == "key"

        await stub.set("key", -1, ttl_seconds=60)

    @pytest.mark.asyncio
    async def test_ignore_deletes(self) -> None:
        """ignore_deletes leaves entries in place."""
        stub = ExpiringKeyValueStoreStub(ignore_deletes=True)
        await stub.set("key", -1, ttl_seconds=60)
        await stub.delete("key")
        assert await stub.get("key") == -1
