import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import Config
from .locator.base import ParseResult
from .parser import Parser
from .readers.registry import read_document
from .writers.report_writer import write_report
from .writers.script_writer import write_scripts

logger = logging.getLogger(__name__)


def _display_scripts(file_name: str, result: ParseResult, console: Console) -> None:
    """Display located script blocks in a rich table."""
    if not result.script_count:
        console.print(f"  [dim]{file_name}: no script blocks[/dim]")
        return

    table = Table(title=f"{file_name}", show_lines=False, padding=(0, 1))
    table.add_column("#", style="cyan", width=4)
    table.add_column("Start", style="green")
    table.add_column("Length", style="green")
    table.add_column("Line:Col", style="dim")
    table.add_column("Kind", width=8)
    table.add_column("Source", style="yellow")

    for block in result.scripts:
        line, column = result.position(block.content_start)
        if block.self_closing:
            kind = "external"
        elif block.tagless:
            kind = "bare"
        else:
            kind = "inline"
        # Truncate long URLs for display
        src = block.attributes.get("src", "")
        display_src = src if len(src) <= 60 else src[:57] + "..."
        table.add_row(
            str(block.index),
            str(block.start),
            str(block.length),
            f"{line + 1}:{column}",
            kind,
            display_src,
        )

    console.print(table)


def process_file(
    file_path: Path,
    config: Config,
    parser: Parser,
    *,
    console: Console | None = None,
) -> ParseResult | None:
    """Locate the script blocks of a single file and write the configured outputs.

    Returns None when the file format is unsupported.
    """
    if console is None:
        console = Console()

    logger.info("Reading: %s", file_path.name)

    # 1. Read
    document = read_document(file_path)
    if document is None:
        return None

    # 2. Locate
    result = parser.get(document.text, url=document.url)

    # 3. Display
    _display_scripts(file_path.name, result, console)

    if config.dry_run or not result.script_count:
        return result

    # 4. Write
    if config.extract_scripts:
        for path in write_scripts(document, result, config.output_dir):
            logger.info("  Written: %s", path)
    if config.write_report:
        report_path = config.output_dir / f"{file_path.stem}.scripts.json"
        write_report(document, result, report_path)
        logger.info("  Written: %s", report_path)

    return result
