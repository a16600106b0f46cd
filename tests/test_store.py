"""Tests for the draft store."""

import asyncio
from pathlib import Path

import pytest

from logaline.db.connection import DraftStore
from logaline.db.exceptions import StoreError, StoreInitError, StoreWriteError
from logaline.db.repositories.draft import DraftRepository


@pytest.mark.asyncio
async def test_put_then_get(test_store: DraftStore) -> None:
    """Test that a saved draft can be read back."""
    task = test_store.put("k", "v")
    assert task is not None
    await task

    record = await test_store.get("k")
    assert record is not None
    assert record.name == "k"
    assert record.text == "v"


@pytest.mark.asyncio
async def test_get_missing_returns_none(test_store: DraftStore, store_errors: list[StoreError]) -> None:
    assert await test_store.get("missing") is None
    assert store_errors == []


@pytest.mark.asyncio
async def test_put_overwrites_existing_draft(test_store: DraftStore) -> None:
    test_store.put("k", "first")
    test_store.put("k", "second")
    await test_store.drain()

    record = await test_store.get("k")
    assert record is not None
    assert record.text == "second"


@pytest.mark.asyncio
async def test_text_is_stored_exactly(test_store: DraftStore) -> None:
    text = "  Hi---/haɪ/---Hola---a.png|hi|me---greet\n\n\n  trailing  \n"
    await test_store.put("k", text)

    record = await test_store.get("k")
    assert record is not None
    assert record.text == text


@pytest.mark.asyncio
async def test_operations_before_open_are_dropped(tmp_path: Path) -> None:
    """Test that reads and writes issued before open are no-ops."""
    store = DraftStore(tmp_path / "drafts.db")

    assert not store.is_ready
    assert store.put("k", "lost") is None
    assert await store.get("k") is None

    await store.open()
    try:
        assert await store.get("k") is None
    finally:
        await store.close()


@pytest.mark.asyncio
async def test_drafts_survive_reopen(tmp_path: Path) -> None:
    path = tmp_path / "drafts.db"

    store = DraftStore(path)
    await store.open()
    store.put("interview-one--src", "saved")
    await store.close()

    reopened = DraftStore(path)
    assert await reopened.open() is not None
    try:
        record = await reopened.get("interview-one--src")
        assert record is not None
        assert record.text == "saved"
    finally:
        await reopened.close()


@pytest.mark.asyncio
async def test_concurrent_open_returns_one_handle(tmp_path: Path) -> None:
    store = DraftStore(tmp_path / "drafts.db")

    first, second = await asyncio.gather(store.open(), store.open())
    try:
        assert first is not None
        assert first is second
        assert await store.open() is first
    finally:
        await store.close()


@pytest.mark.asyncio
async def test_schema_version_is_recorded(test_store: DraftStore) -> None:
    assert test_store.handle is not None
    cursor = await test_store.handle.execute("PRAGMA user_version")
    row = await cursor.fetchone()
    await cursor.close()
    assert row[0] == 1


@pytest.mark.asyncio
async def test_open_failure_is_reported_not_raised(tmp_path: Path) -> None:
    """Test that an unusable location degrades to a closed store."""
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("")
    errors: list[StoreError] = []
    store = DraftStore(blocker / "drafts.db", on_error=errors.append)

    assert await store.open() is None
    assert not store.is_ready
    assert isinstance(store.init_error, StoreInitError)
    assert errors == [store.init_error]
    assert store.put("k", "v") is None
    await store.close()


@pytest.mark.asyncio
async def test_newer_schema_version_fails_to_open(tmp_path: Path) -> None:
    path = tmp_path / "drafts.db"
    newer = DraftStore(path, version=2)
    await newer.open()
    await newer.close()

    store = DraftStore(path, version=1)
    assert await store.open() is None
    assert isinstance(store.init_error, StoreInitError)


@pytest.mark.asyncio
async def test_write_failure_is_reported_not_raised(
    test_store: DraftStore,
    store_errors: list[StoreError],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    async def failing_upsert(self: DraftRepository, name: str, text: str) -> None:
        raise StoreWriteError("disk full")

    monkeypatch.setattr(DraftRepository, "upsert", failing_upsert)

    task = test_store.put("k", "v")
    assert task is not None
    await task

    assert len(store_errors) == 1
    assert isinstance(store_errors[0], StoreWriteError)


@pytest.mark.asyncio
async def test_record_holds_only_name_and_text(test_store: DraftStore) -> None:
    await test_store.put("k", "v")

    record = await test_store.get("k")
    assert record is not None
    assert record.model_dump() == {"name": "k", "text": "v"}
