import json
from pathlib import Path
from typing import Any

from ..locator.base import ParseResult
from ..readers.base import SourceDocument


def build_report(document: SourceDocument, result: ParseResult) -> dict[str, Any]:
    scripts = []
    for block in result.scripts:
        line, column = result.position(block.content_start)
        scripts.append(
            {
                **block.as_info(),
                "line": line + 1,
                "column": column,
                "self_closing": block.self_closing,
                "attributes": dict(block.attributes),
            }
        )
    return {
        "source_path": document.url,
        "script_count": result.script_count,
        "scripts": scripts,
    }


def write_report(document: SourceDocument, result: ParseResult, output_path: Path) -> None:
    """Save the located script blocks of a document as JSON (lines are 1-based)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(build_report(document, result), f, ensure_ascii=False, indent=2)
