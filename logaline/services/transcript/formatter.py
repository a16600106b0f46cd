"""Blank-line canonicalization for editable transcript text."""

SEGMENT_DELIMITER = "\n\n"


def format_blank_lines(text: str) -> str:
    """Put exactly one blank line between non-blank lines.

    Lines that are empty after trimming are dropped; the remaining lines are
    kept as written and joined with a blank line, so every line becomes its
    own segment. Running it again changes nothing.

    Args:
        text: Raw editable text

    Returns:
        Text in the canonical form expected by the parser
    """
    lines = [line for line in text.split("\n") if line.strip()]
    return SEGMENT_DELIMITER.join(lines)
