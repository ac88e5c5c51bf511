import logging
from pathlib import Path

from .base import SourceDocument
from .markup_reader import read_markup

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".html", ".htm", ".xhtml", ".xul", ".xml", ".svg", ".js"}

UNSUPPORTED_WITH_WARNING: dict[str, str] = {
    ".mht": (
        "MHTML archives are not supported. "
        "Please save the page as plain HTML first (e.g., 'Web Page, HTML only')"
    ),
    ".mhtml": (
        "MHTML archives are not supported. "
        "Please save the page as plain HTML first (e.g., 'Web Page, HTML only')"
    ),
}


def read_document(path: Path) -> SourceDocument | None:
    """Read a document if its extension is supported.

    Returns None if the format is unsupported.
    """
    ext = path.suffix.lower()

    if ext in UNSUPPORTED_WITH_WARNING:
        logger.warning("%s: %s", path.name, UNSUPPORTED_WITH_WARNING[ext])
        return None

    if ext not in SUPPORTED_EXTENSIONS:
        logger.debug("Skipping unsupported file: %s", path.name)
        return None

    return read_markup(path)


def _is_listed(path: Path) -> bool:
    ext = path.suffix.lower()
    return ext in SUPPORTED_EXTENSIONS or ext in UNSUPPORTED_WITH_WARNING


def list_supported_files(path: Path) -> list[Path]:
    """List all supported files in a directory (non-recursive) or return [path] if it's a file."""
    if path.is_file():
        return [path] if _is_listed(path) else []

    return [item for item in sorted(path.iterdir()) if item.is_file() and _is_listed(item)]
