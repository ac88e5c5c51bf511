from .locator import (
    MalformedMarkupError,
    OffsetNotFoundError,
    ParseResult,
    ScriptBlock,
    ScriptSpanError,
    locate,
    parse_attributes,
)
from .parser import Parser

__all__ = [
    "MalformedMarkupError",
    "OffsetNotFoundError",
    "ParseResult",
    "Parser",
    "ScriptBlock",
    "ScriptSpanError",
    "locate",
    "parse_attributes",
]
