"""Transcript segment models parsed from annotated text."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class BareSegment(BaseModel):
    """Segment carrying only plain text."""

    kind: Literal["bare"] = "bare"
    text: str = Field(..., description="Trimmed utterance text")


class RichSegment(BaseModel):
    """Segment with phonetics, translation, image reference and type."""

    kind: Literal["rich"] = "rich"
    text: str = Field(..., description="Trimmed utterance text")
    ipa: str = Field(..., description="Phonetic transcription")
    translation: str
    image_url: str = Field(..., alias="imageUrl")
    alt_text: str = Field(..., alias="altText")
    image_credit: str = Field(..., alias="imageCredit")
    segment_type: str = Field(..., alias="segmentType")

    model_config = {"populate_by_name": True}


TranscriptSegment = Annotated[Union[BareSegment, RichSegment], Field(discriminator="kind")]
