"""Storage keys derived from source file names."""

from logaline.core.config import settings


def normalize_document_key(file_name: str) -> str:
    """Derive a stable document key from a file name.

    Lower-cases the name, keeps only what precedes the first dot and
    replaces spaces with hyphens: ``"My File.wav"`` -> ``"my-file"``,
    ``"a.b.c.txt"`` -> ``"a"``. A name starting with a dot yields ``""``.
    """
    return file_name.lower().split(".")[0].replace(" ", "-")


def source_draft_key(file_name: str) -> str:
    """Key under which the source text for ``file_name`` is stored."""
    return f"{normalize_document_key(file_name)}{settings.source_key_suffix}"
