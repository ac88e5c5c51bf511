import codecs
import logging
from pathlib import Path

from .base import SourceDocument

logger = logging.getLogger(__name__)

_BOM = codecs.BOM_UTF8.decode("utf-8")


def _read(path: Path, encoding: str) -> str:
    # newline="" keeps "\r\n" so offsets match the file on disk
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def read_markup(path: Path) -> SourceDocument:
    """Read a markup or script file, trying UTF-8 first then latin-1."""
    encoding = "utf-8"
    try:
        text = _read(path, encoding)
    except UnicodeDecodeError:
        logger.warning("%s: not valid UTF-8, falling back to latin-1 encoding", path.name)
        encoding = "latin-1"
        text = _read(path, encoding)

    if text.startswith(_BOM):
        text = text[1:]

    return SourceDocument(
        text=text,
        metadata={
            "source_path": str(path),
            "encoding": encoding,
            "format": path.suffix.lower().lstrip("."),
        },
    )
