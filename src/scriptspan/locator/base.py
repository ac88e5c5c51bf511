import bisect
from collections.abc import Mapping
from dataclasses import dataclass, field
from operator import attrgetter


class ScriptSpanError(Exception):
    """Base class for locator errors."""


class MalformedMarkupError(ScriptSpanError, ValueError):
    """A script tag could not be closed anywhere before the end of the document."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (at offset {offset})")
        self.offset = offset


class OffsetNotFoundError(ScriptSpanError, LookupError):
    """No script block contains the requested offset."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"No script block contains offset {offset}")
        self.offset = offset


@dataclass(frozen=True)
class ScriptBlock:
    """Location of one script element within a document."""

    index: int
    # For paired tags: offset of the '>' closing the opening tag.
    # For self-closing tags: offset right after '/>'.
    start: int
    # Number of content characters (0 for self-closing tags)
    length: int
    self_closing: bool = False
    # Set when the whole source is a script with no surrounding markup
    tagless: bool = field(default=False, compare=False)
    attributes: Mapping[str, str] = field(default_factory=dict, compare=False)

    @property
    def content_start(self) -> int:
        if self.self_closing or self.tagless:
            return self.start
        return self.start + 1

    @property
    def end(self) -> int:
        return self.start + self.length

    def contains(self, offset: int) -> bool:
        # Inclusive upper bound: covers the tag's '>' plus every content character.
        return self.length > 0 and self.start <= offset <= self.end

    def text(self, document: str) -> str:
        """Return the script's inline content from the document it was located in."""
        return document[self.content_start : self.content_start + self.length]

    def as_info(self) -> dict[str, int]:
        return {"start": self.start, "length": self.length, "index": self.index}


@dataclass(frozen=True)
class ParseResult:
    """Script blocks found in one document, in document order."""

    scripts: tuple[ScriptBlock, ...] = ()
    # Offset of the first character of each line
    line_starts: tuple[int, ...] = (0,)

    @classmethod
    def build(cls, scripts: list[ScriptBlock], document: str) -> "ParseResult":
        lines = document.splitlines(True)
        starts = [0]
        for line in lines:
            starts.append(starts[-1] + len(line))
        if lines and lines[-1].splitlines()[0] == lines[-1]:
            starts.pop()  # last line has no terminator
        return cls(scripts=tuple(scripts), line_starts=tuple(starts))

    @property
    def script_count(self) -> int:
        return len(self.scripts)

    def get_script_info(self, offset: int) -> ScriptBlock:
        """Return the script block containing offset.

        Raises OffsetNotFoundError when the offset lies outside every block,
        which is the normal answer for offsets in the surrounding markup.
        """
        i = bisect.bisect_right(self.scripts, offset, key=attrgetter("start")) - 1
        if i >= 0 and self.scripts[i].contains(offset):
            return self.scripts[i]
        raise OffsetNotFoundError(offset)

    def position(self, offset: int) -> tuple[int, int]:
        """Convert an offset into a 0-based (line, column) pair."""
        if offset < 0:
            raise ValueError("offset must be >= 0")
        line = bisect.bisect_right(self.line_starts, offset) - 1
        return line, offset - self.line_starts[line]

    # camelCase names used by devtools consumers
    @property
    def scriptCount(self) -> int:  # noqa: N802
        return self.script_count

    def getScriptInfo(self, offset: int) -> ScriptBlock:  # noqa: N802
        return self.get_script_info(offset)
