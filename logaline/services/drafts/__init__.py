"""Draft keys and editing sessions."""

from logaline.services.drafts.keys import normalize_document_key, source_draft_key
from logaline.services.drafts.session import DraftSession, SessionState

__all__ = ["DraftSession", "SessionState", "normalize_document_key", "source_draft_key"]
