"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio

from logaline.db.connection import DraftStore
from logaline.db.exceptions import StoreError


@pytest.fixture
def store_errors() -> list[StoreError]:
    """Collect errors reported by the store."""
    return []


@pytest_asyncio.fixture
async def test_store(tmp_path: Path, store_errors: list[StoreError]) -> AsyncIterator[DraftStore]:
    """Create an opened draft store with a temporary path."""
    store = DraftStore(tmp_path / "drafts.db", on_error=store_errors.append)
    await store.open()

    yield store

    await store.close()
