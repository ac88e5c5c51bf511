from pathlib import Path

from ..locator.base import ParseResult
from ..readers.base import SourceDocument


def write_scripts(document: SourceDocument, result: ParseResult, output_dir: Path) -> list[Path]:
    """Write each non-empty inline script to its own file.

    Files are named ``<stem>.script-<index>.js`` so they sort in document order.
    Self-closing and empty blocks produce no file.
    """
    stem = Path(document.url).stem if document.url else "document"
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for block in result.scripts:
        if block.length == 0:
            continue
        output_path = output_dir / f"{stem}.script-{block.index:03d}.js"
        output_path.write_text(block.text(document.text), encoding="utf-8")
        written.append(output_path)
    return written
