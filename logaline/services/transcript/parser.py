"""Parser for delimiter-annotated transcript text.

Segments are separated by a blank line. A segment is either a bare line of
text or five ``---``-separated fields::

    text---ipa---translation---image_url|alt_text|image_credit---segment_type

Example:
    Hello---/hə.loʊ/---Hola---img.png|greeting|CC0---greeting
"""

import structlog

from logaline.models.transcript import BareSegment, RichSegment, TranscriptSegment
from logaline.services.transcript.exceptions import FormatError
from logaline.services.transcript.formatter import SEGMENT_DELIMITER

logger = structlog.get_logger(__name__)

FIELD_DELIMITER = "---"
IMAGE_DELIMITER = "|"
RICH_FIELD_COUNT = 5
IMAGE_FIELD_COUNT = 3


def parse_transcript(text: str) -> list[TranscriptSegment]:
    """Parse canonical transcript text into segments.

    Every blank-line separated block yields exactly one segment, in input
    order. Blank blocks are not filtered here: they produce a bare segment
    with empty text (run ``format_blank_lines`` first to avoid them).

    A block that does not split into exactly five fields becomes a bare
    segment made of its first field; the other fields are discarded.

    Args:
        text: Transcript text in canonical form

    Returns:
        Ordered list of bare and rich segments

    Raises:
        FormatError: If a five-field block has an image descriptor that does
            not split into url, alt text and credit
    """
    return [
        parse_segment(block, index)
        for index, block in enumerate(text.split(SEGMENT_DELIMITER))
    ]


def parse_segment(block: str, index: int = 0) -> TranscriptSegment:
    """Parse one blank-line separated block."""
    parts = block.split(FIELD_DELIMITER)

    if len(parts) != RICH_FIELD_COUNT:
        if len(parts) > 1:
            logger.warning(
                "segment_fields_discarded",
                index=index,
                field_count=len(parts),
                expected=RICH_FIELD_COUNT,
            )
        return BareSegment(text=parts[0].strip())

    text, ipa, translation, image, segment_type = parts
    image_url, alt_text, image_credit = _split_image(image, block, index)

    return RichSegment(
        text=text.strip(),
        ipa=ipa.strip(),
        translation=translation.strip(),
        image_url=image_url,
        alt_text=alt_text,
        image_credit=image_credit,
        segment_type=segment_type.strip(),
    )


def _split_image(image: str, block: str, index: int) -> tuple[str, str, str]:
    components = [part.strip() for part in image.split(IMAGE_DELIMITER)]
    if len(components) != IMAGE_FIELD_COUNT:
        raise FormatError(
            index,
            block,
            f"image descriptor {image.strip()!r} needs {IMAGE_FIELD_COUNT} "
            f"'{IMAGE_DELIMITER}'-separated parts, got {len(components)}",
        )
    url, alt, credit = components
    return url, alt, credit
