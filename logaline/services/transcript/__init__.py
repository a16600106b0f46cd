"""Transcript text formatting and parsing."""

from logaline.services.transcript.exceptions import FormatError, TranscriptFormatError
from logaline.services.transcript.formatter import format_blank_lines
from logaline.services.transcript.parser import parse_segment, parse_transcript

__all__ = [
    "format_blank_lines",
    "parse_segment",
    "parse_transcript",
    "FormatError",
    "TranscriptFormatError",
]
