"""Draft repository for database operations."""

import aiosqlite
import structlog

from logaline.db.exceptions import StoreReadError, StoreWriteError
from logaline.models.draft import DraftRecord

logger = structlog.get_logger(__name__)


class DraftRepository:
    """Repository for draft upserts and lookups in the ``texts`` collection."""

    def __init__(self, connection: aiosqlite.Connection):
        """Initialize with database connection."""
        self.conn = connection

    async def upsert(self, name: str, text: str) -> None:
        """Insert or replace the draft stored under ``name``."""
        try:
            await self.conn.execute(
                """
                INSERT INTO texts (name, text)
                VALUES (?, ?)
                ON CONFLICT(name) DO UPDATE SET text = excluded.text
                """,
                (name, text),
            )
            await self.conn.commit()
        except aiosqlite.Error as e:
            raise StoreWriteError(f"Failed to save draft {name!r}: {e}") from e

        logger.debug("draft_saved", name=name, chars=len(text))

    async def get_by_name(self, name: str) -> DraftRecord | None:
        """Get a draft by its document key."""
        try:
            cursor = await self.conn.execute(
                "SELECT name, text FROM texts WHERE name = ?",
                (name,),
            )
            row = await cursor.fetchone()
            await cursor.close()
        except aiosqlite.Error as e:
            raise StoreReadError(f"Failed to load draft {name!r}: {e}") from e

        if row is None:
            return None
        return DraftRecord(name=row[0], text=row[1])
