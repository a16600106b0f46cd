"""Async draft store backed by a local SQLite file."""

import asyncio
from pathlib import Path
from typing import Callable

import aiosqlite
import structlog

from logaline.core.config import settings
from logaline.db.exceptions import StoreError, StoreInitError, StoreReadError, StoreWriteError
from logaline.db.repositories.draft import DraftRepository
from logaline.models.draft import DraftRecord

logger = structlog.get_logger(__name__)

ErrorHandler = Callable[[StoreError], None]

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS texts (
        name TEXT PRIMARY KEY,
        text TEXT NOT NULL
    )
    """,
)


class DraftStore:
    """Embedded key-value store for drafts with a single ``texts`` collection.

    The store is unusable until :meth:`open` completes. Reads issued before
    that return ``None`` and writes are dropped, not queued: a write made
    before the store is ready is lost.

    Failures never propagate out of :meth:`open` or :meth:`put`. They are
    logged and passed to ``on_error``. :meth:`get` also re-raises its
    ``StoreReadError`` so the caller can tell a failed read from a miss.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        version: int | None = None,
        on_error: ErrorHandler | None = None,
    ):
        """Initialize store manager."""
        self.path = Path(path) if path is not None else settings.store_path
        self.version = version if version is not None else settings.store_version
        self.on_error = on_error
        self.init_error: StoreInitError | None = None
        self._connection: aiosqlite.Connection | None = None
        self._open_lock = asyncio.Lock()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def is_ready(self) -> bool:
        """Check if the store has been opened."""
        return self._connection is not None

    @property
    def handle(self) -> aiosqlite.Connection | None:
        """Get the open connection, or None before open completes."""
        return self._connection

    async def open(self) -> aiosqlite.Connection | None:
        """Open the store, creating the schema on first-ever use.

        Safe to call repeatedly and concurrently; the file is opened once.

        Returns:
            The store handle, or None if initialization failed
        """
        async with self._open_lock:
            if self._connection is not None:
                return self._connection

            try:
                connection = await self._connect()
            except StoreInitError as e:
                self.init_error = e
                logger.error("store_init_failed", path=str(self.path), error=str(e))
                self._notify(e)
                return None

            self._connection = connection
            self.init_error = None
            logger.info("store_opened", path=str(self.path), version=self.version)
            return connection

    async def close(self) -> None:
        """Wait for in-flight writes and close the store."""
        await self.drain()
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            logger.info("store_closed", path=str(self.path))

    def put(self, name: str, text: str) -> asyncio.Task[None] | None:
        """Schedule an upsert of ``text`` under ``name`` without waiting for it.

        Must be called from the running event loop. Writes for the same key
        may complete out of order; the stored value is whichever completes last.

        Returns:
            The scheduled write, or None if the store is not ready and the
            write was dropped
        """
        if self._connection is None:
            logger.debug("draft_write_dropped", name=name, reason="store_not_ready")
            return None

        task = asyncio.get_running_loop().create_task(
            self._write(self._connection, name, text)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def get(self, name: str) -> DraftRecord | None:
        """Get the draft stored under ``name``.

        Returns:
            The record, or None if there is none or the store is not ready

        Raises:
            StoreReadError: If the lookup itself failed
        """
        if self._connection is None:
            logger.debug("draft_read_dropped", name=name, reason="store_not_ready")
            return None

        try:
            return await DraftRepository(self._connection).get_by_name(name)
        except StoreReadError as e:
            logger.error("draft_read_failed", name=name, error=str(e))
            self._notify(e)
            raise

    async def drain(self) -> None:
        """Wait until every scheduled write has completed."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def _write(self, connection: aiosqlite.Connection, name: str, text: str) -> None:
        try:
            await DraftRepository(connection).upsert(name, text)
        except StoreWriteError as e:
            logger.error("draft_write_failed", name=name, error=str(e))
            self._notify(e)

    async def _connect(self) -> aiosqlite.Connection:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            connection = await aiosqlite.connect(str(self.path))
        except (OSError, aiosqlite.Error) as e:
            raise StoreInitError(f"Cannot open store at {self.path}: {e}") from e

        try:
            await self._init_schema(connection)
        except BaseException:
            await connection.close()
            raise
        return connection

    async def _init_schema(self, connection: aiosqlite.Connection) -> None:
        """Create the schema on first open; reuse it afterwards."""
        try:
            cursor = await connection.execute("PRAGMA user_version")
            row = await cursor.fetchone()
            await cursor.close()
            current = row[0] if row else 0

            if current == self.version:
                return
            if current != 0:
                # Only a single schema version exists; nothing to migrate from or to.
                raise StoreInitError(
                    f"Store {self.path.name} is at version {current}, expected {self.version}"
                )

            for statement in SCHEMA:
                await connection.execute(statement)
            await connection.execute(f"PRAGMA user_version = {int(self.version)}")
            await connection.commit()
        except aiosqlite.Error as e:
            raise StoreInitError(f"Cannot initialize schema: {e}") from e

        logger.info("store_schema_created", path=str(self.path), version=self.version)

    def _notify(self, error: StoreError) -> None:
        if self.on_error is not None:
            self.on_error(error)
