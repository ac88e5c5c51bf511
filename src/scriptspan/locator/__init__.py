from .attributes import parse_attributes
from .base import MalformedMarkupError, OffsetNotFoundError, ParseResult, ScriptBlock, ScriptSpanError
from .scanner import locate

__all__ = [
    "MalformedMarkupError",
    "OffsetNotFoundError",
    "ParseResult",
    "ScriptBlock",
    "ScriptSpanError",
    "locate",
    "parse_attributes",
]
