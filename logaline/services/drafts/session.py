"""Draft session - keeps the editable text of the active source persisted."""

from enum import Enum

import structlog

from logaline.db.connection import DraftStore
from logaline.db.exceptions import StoreReadError
from logaline.models.transcript import TranscriptSegment
from logaline.services.drafts.keys import source_draft_key
from logaline.services.transcript import format_blank_lines, parse_transcript

logger = structlog.get_logger(__name__)

UNTITLED = "Untitled"


class SessionState(str, Enum):
    """Possible session states."""

    NO_SOURCE_SELECTED = "no_source_selected"
    SOURCE_SELECTED = "source_selected"


class DraftSession:
    """Loads the draft for the selected source and saves every edit.

    Store failures stop here: editing always continues in memory. If the
    draft for a source cannot be read, because the read failed or the store
    was not open yet, the session keeps that source memory-only so the
    stored draft is not overwritten.
    """

    def __init__(self, store: DraftStore):
        """Initialize the session with the draft store it writes to."""
        self.store = store
        self.source_name: str | None = None
        self.key: str | None = None
        self.text = ""
        self.persistent = False
        self._revision = 0

    @property
    def state(self) -> SessionState:
        """Current state of the session."""
        if self.key is None:
            return SessionState.NO_SOURCE_SELECTED
        return SessionState.SOURCE_SELECTED

    @property
    def title(self) -> str:
        """Display name of the active source."""
        return self.source_name or UNTITLED

    async def select_source(self, file_name: str) -> str:
        """Make ``file_name`` the active source and load its draft.

        The text becomes the stored draft, or empty if there is none. A load
        that finishes after another source was selected, or after the text
        was edited, is discarded.

        Args:
            file_name: Display name of the selected source file

        Returns:
            The editable text after loading
        """
        key = source_draft_key(file_name)
        self.source_name = file_name
        self.key = key
        self.persistent = True
        self._revision += 1
        revision = self._revision

        logger.info("source_selected", source=file_name, key=key)

        if not self.store.is_ready:
            # The read would be dropped; an unloaded draft must not be overwritten.
            self.persistent = False
            self.text = ""
            logger.warning("draft_memory_only", key=key, reason="store_not_ready")
            return self.text

        try:
            record = await self.store.get(key)
        except StoreReadError:
            if self.key == key:
                self.persistent = False
            if self._revision == revision:
                self.text = ""
            logger.warning("draft_memory_only", key=key)
            return self.text

        if self._revision != revision:
            logger.info("stale_draft_discarded", key=key, active_key=self.key)
            return self.text

        if record is None:
            logger.info("draft_not_found", key=key)
            self.text = ""
        else:
            logger.info("draft_loaded", key=key, chars=len(record.text))
            self.text = record.text
        return self.text

    def set_text(self, text: str) -> None:
        """Replace the editable text and save it under the active key.

        Saving is fire-and-forget; every call issues a write.
        """
        self.text = text
        self._revision += 1
        if self.key is None or not self.persistent:
            return
        self.store.put(self.key, text)

    def format_text(self) -> str:
        """Canonicalize blank lines in the editable text and save the result."""
        if not self.text:
            return self.text
        self.set_text(format_blank_lines(self.text))
        return self.text

    def transcript(self) -> list[TranscriptSegment]:
        """Parse the editable text into segments."""
        return parse_transcript(self.text)
