"""Tests for the transcript export script."""

import json
from pathlib import Path

import pytest

from logaline.core.config import settings
from logaline.db.connection import DraftStore
from logaline.db.exceptions import StoreReadError
from logaline.db.repositories.draft import DraftRepository
from logaline.models.draft import DraftRecord
from scripts import export_transcript


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the store at a temporary directory."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    return tmp_path


async def _seed(name: str, text: str) -> None:
    store = DraftStore()
    await store.open()
    store.put(name, text)
    await store.close()


@pytest.mark.asyncio
async def test_export_prints_segments(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    await _seed("interview-one--src", "Intro\n\nHi---/haɪ/---Hola---a.png|hi|me---greet")

    assert await export_transcript.main("Interview One.mp3", format_text=False) == 0

    segments = json.loads(capsys.readouterr().out)
    assert [s["kind"] for s in segments] == ["bare", "rich"]
    assert segments[1]["imageCredit"] == "me"


@pytest.mark.asyncio
async def test_export_missing_draft(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert await export_transcript.main("Interview One.mp3", format_text=False) == 1
    assert "No draft stored" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_export_read_failure_is_not_reported_as_missing(
    data_dir: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test that a failed read exits with the store error code."""
    await _seed("interview-one--src", "stored")

    async def failing_get(self: DraftRepository, name: str) -> DraftRecord | None:
        raise StoreReadError("locked")

    monkeypatch.setattr(DraftRepository, "get_by_name", failing_get)

    assert await export_transcript.main("Interview One.mp3", format_text=False) == 2
    err = capsys.readouterr().err
    assert "could not read the draft" in err
    assert "No draft stored" not in err
