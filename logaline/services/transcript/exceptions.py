"""Transcript format exceptions."""


class TranscriptFormatError(Exception):
    """Base exception for transcript text format errors."""

    pass


class FormatError(TranscriptFormatError):
    """Raised when a segment's image descriptor is not ``url|alt|credit``."""

    def __init__(self, index: int, segment: str, message: str):
        self.index = index
        self.segment = segment
        super().__init__(f"Segment {index}: {message}")
