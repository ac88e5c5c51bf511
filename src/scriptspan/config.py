from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    output_dir: Path = Path("output")
    dry_run: bool = False
    # Write <stem>.scripts.json next to the extracted scripts
    write_report: bool = True
    extract_scripts: bool = True
