"""
Document I/O: read a robots.txt file into a document, write it back.

Load flow:
    file (plain or .gz) → text, no newline translation → parser.parse

Save flow:
    serializer.serialize(document, terminator) → text → file

Files are opened with ``newline=""`` so that ``\\r`` characters survive
the trip in both directions and the bytes on disk match what the
serializer produced.
"""
from __future__ import annotations

import gzip
import logging
from pathlib import Path

from robotsedit.core.document import RobotsDocument
from robotsedit.core.errors import DocumentIOError
from robotsedit.core.options import DEFAULT_TERMINATOR, TerminatorOption
from robotsedit.parser import parse
from robotsedit.serializer import serialize

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# File helpers (plain text or gzip)
# ------------------------------------------------------------------

def _is_gz(path: Path) -> bool:
    return path.suffix == ".gz"


def _read_text(path: Path, encoding: str) -> str:
    if _is_gz(path):
        with gzip.open(path, "rt", encoding=encoding, newline="") as f:
            return f.read()
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def _write_text(path: Path, content: str, encoding: str) -> None:
    if _is_gz(path):
        with gzip.open(path, "wt", encoding=encoding, newline="") as f:
            f.write(content)
    else:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)


# ------------------------------------------------------------------
# Load
# ------------------------------------------------------------------

def load_document(file_path: str | Path, encoding: str = "utf-8") -> RobotsDocument:
    """Read a robots.txt file and return its parsed lines."""
    path = Path(file_path)
    document = parse(_read_text(path, encoding))
    logger.debug("Loaded %s (%d lines)", path, len(document))
    return document


# ------------------------------------------------------------------
# Save
# ------------------------------------------------------------------

def save_document(
    document: RobotsDocument,
    file_path: str | Path | None,
    terminator: TerminatorOption = DEFAULT_TERMINATOR,
    encoding: str = "utf-8",
) -> None:
    """
    Serialize *document* and write it to *file_path*.

    Untouched lines are written exactly as they were read; edited
    key/value lines keep their original padding and trailing comment.
    """
    if not file_path:
        raise DocumentIOError("No file path specified for saving the document.")
    path = Path(file_path)
    _write_text(path, serialize(document, terminator), encoding)
    logger.debug("Saved %s (%d lines)", path, len(document))
