#!/usr/bin/env python3
"""
Export the stored draft of a source file as transcript segments.

Prints the parsed segments as a JSON array on stdout.

Usage:
    python scripts/export_transcript.py "Interview One.mp3"

    # Canonicalize blank lines first and save the result
    python scripts/export_transcript.py "Interview One.mp3" --format
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import TypeAdapter

from logaline.core.logging import setup_logging, get_logger
from logaline.db.connection import DraftStore
from logaline.models.transcript import TranscriptSegment
from logaline.services.drafts import DraftSession
from logaline.services.transcript import FormatError

setup_logging()
logger = get_logger(__name__)

segments_adapter = TypeAdapter(list[TranscriptSegment])


async def main(file_name: str, format_text: bool) -> int:
    """Load, optionally format, and print the draft for ``file_name``.

    Returns:
        0 = success
        1 = no stored draft or malformed segment
        2 = store unavailable or draft unreadable
    """
    store = DraftStore()
    try:
        if await store.open() is None:
            print(f"ERROR: draft store unavailable: {store.init_error}", file=sys.stderr)
            return 2

        session = DraftSession(store)
        text = await session.select_source(file_name)
        if not session.persistent:
            print(f"ERROR: could not read the draft for {session.title}", file=sys.stderr)
            return 2

        if not text:
            logger.warning("draft_empty", key=session.key)
            print(f"No draft stored for {session.title}", file=sys.stderr)
            return 1

        if format_text:
            session.format_text()

        try:
            segments = session.transcript()
        except FormatError as e:
            logger.error("export_failed", key=session.key, index=e.index, error=str(e))
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        data = segments_adapter.dump_python(segments, by_alias=True)
        print(json.dumps(data, ensure_ascii=False, indent=2))
        logger.info("transcript_exported", key=session.key, segments=len(segments))
        return 0
    finally:
        await store.close()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export a stored transcript draft as JSON segments",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("file_name", help="Source file name the draft belongs to")
    parser.add_argument(
        "--format",
        action="store_true",
        help="Canonicalize blank lines and save the draft before exporting",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    sys.exit(asyncio.run(main(file_name=args.file_name, format_text=args.format)))
