import logging
from importlib.metadata import version
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import Config
from .parser import Parser
from .pipeline import process_file
from .readers.registry import list_supported_files

logger = logging.getLogger(__name__)

console = Console()


@click.command()
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(path_type=Path),
    default="output",
    help="Output directory for extracted scripts and reports.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Show located scripts without writing files.",
)
@click.option("--no-report", is_flag=True, default=False, help="Do not write the JSON report.")
@click.option("--no-extract", is_flag=True, default=False, help="Do not write inline scripts to files.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=version("scriptspan"))
def main(
    input_path: Path,
    output_dir: Path,
    dry_run: bool,
    no_report: bool,
    no_extract: bool,
    verbose: bool,
) -> None:
    """Locate script blocks in markup documents.

    INPUT_PATH can be a single file or a directory of documents.
    Supported formats: .html, .htm, .xhtml, .xul, .xml, .svg, .js
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )

    config = Config(
        output_dir=output_dir,
        dry_run=dry_run,
        write_report=not no_report,
        extract_scripts=not no_extract,
    )
    parser = Parser()

    # Discover files
    files = list_supported_files(input_path)
    if not files:
        console.print("[red]No supported files found.[/red]")
        raise SystemExit(1)

    console.print(f"Found {len(files)} file(s) to process")

    if dry_run:
        console.print("[yellow]Dry run, no files will be written.[/yellow]")
    else:
        config.output_dir.mkdir(parents=True, exist_ok=True)

    # Process files
    total_scripts = 0
    failed = 0
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing...", total=len(files))
        for file_path in files:
            progress.update(task, description=f"Processing {file_path.name}...")
            try:
                result = process_file(file_path, config, parser, console=console)
                if result is not None:
                    total_scripts += result.script_count
            except Exception:
                failed += 1
                console.print(f"  [red]Error processing {file_path.name}[/red]")
                logger.debug("Failed to process %s", file_path.name, exc_info=True)
            progress.advance(task)

    # Summary
    console.print()
    console.print(
        f"[bold green]Done.[/bold green] {total_scripts} script block(s) located across {len(files)} file(s)."
    )
    if failed:
        console.print(f"[red]{failed} file(s) could not be processed.[/red]")

    if not dry_run and total_scripts > 0:
        console.print(f"Output in {config.output_dir}/")
