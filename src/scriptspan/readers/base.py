from dataclasses import dataclass, field
from typing import Any


@dataclass
class SourceDocument:
    """Full text of a markup or script file."""

    text: str
    # source_path, encoding and other details useful to writers
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def url(self) -> str | None:
        return self.metadata.get("source_path")
