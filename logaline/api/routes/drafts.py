"""Draft editing API routes."""

from fastapi import APIRouter, HTTPException, Request

import structlog

from logaline.models.draft import DraftTextUpdate, DraftView, SourceSelectRequest
from logaline.models.transcript import TranscriptSegment
from logaline.services.drafts import DraftSession
from logaline.services.transcript import FormatError

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/api", tags=["drafts"])


def get_session(request: Request) -> DraftSession:
    """Get the session owned by the application."""
    return request.app.state.session


def _view(session: DraftSession) -> DraftView:
    return DraftView(
        state=session.state.value,
        key=session.key,
        title=session.title,
        text=session.text,
        persistent=session.persistent and session.store.is_ready,
    )


@router.post("/source", response_model=DraftView)
async def select_source(body: SourceSelectRequest, request: Request) -> DraftView:
    """Select a source file and load its draft (empty if new)."""
    session = get_session(request)
    await session.select_source(body.file_name)
    return _view(session)


@router.get("/draft", response_model=DraftView)
async def get_draft(request: Request) -> DraftView:
    """Get the editable text of the active source."""
    return _view(get_session(request))


@router.put("/draft", response_model=DraftView)
async def update_draft(body: DraftTextUpdate, request: Request) -> DraftView:
    """Replace the editable text; the draft is saved in the background."""
    session = get_session(request)
    session.set_text(body.text)
    return _view(session)


@router.post("/draft/format", response_model=DraftView)
async def format_draft(request: Request) -> DraftView:
    """Put one blank line between the lines of the editable text."""
    session = get_session(request)
    session.format_text()
    return _view(session)


@router.get("/transcript", response_model=list[TranscriptSegment])
async def get_transcript(request: Request) -> list[TranscriptSegment]:
    """Parse the editable text into transcript segments."""
    session = get_session(request)
    try:
        return session.transcript()
    except FormatError as e:
        logger.warning("transcript_format_error", key=session.key, index=e.index)
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "index": e.index, "segment": e.segment},
        ) from e
