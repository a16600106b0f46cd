"""Pydantic models for persisted drafts."""

from pydantic import BaseModel, Field


class DraftRecord(BaseModel):
    """Raw editable text stored under a document key."""

    name: str = Field(..., description="Normalized document key")
    text: str = Field(..., description="Editable text exactly as last written")


class SourceSelectRequest(BaseModel):
    """Request to make a source file the active document."""

    file_name: str = Field(
        ...,
        min_length=1,
        description="Display name of the selected source file",
        examples=["Interview One.mp3"],
    )


class DraftTextUpdate(BaseModel):
    """Editable text sent on every change."""

    text: str


class DraftView(BaseModel):
    """Editable text of the active document."""

    state: str
    key: str | None = None
    title: str
    text: str
    persistent: bool = Field(..., description="Whether edits are saved to the store")
