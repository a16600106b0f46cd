#!/usr/bin/env python3
"""Initialize the draft store schema."""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from logaline.core.logging import setup_logging, get_logger
from logaline.db.connection import DraftStore

setup_logging()
logger = get_logger(__name__)


async def main() -> int:
    """Open the store once so its schema exists."""
    logger.info("initializing_store")

    store = DraftStore()
    try:
        if await store.open() is None:
            logger.error("store_initialization_failed", error=str(store.init_error))
            return 1
        logger.info("store_initialized_successfully", path=str(store.path))
        return 0
    finally:
        await store.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
