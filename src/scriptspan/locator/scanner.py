import logging
import re

from .attributes import parse_attributes
from .base import MalformedMarkupError, ParseResult, ScriptBlock

logger = logging.getLogger(__name__)

# "<script" must be followed by whitespace, "/", ">" or the end of input so "<scripts>" is not a script tag
_OPEN_TAG = re.compile(r"<script(?=[\s/>]|\Z)", re.IGNORECASE)
_CLOSE_TAG = re.compile(r"</script\s*>", re.IGNORECASE)
# Quoted attribute values never run past the next script tag
_TAG_LIMIT = re.compile(r"</?script", re.IGNORECASE)
# Attribute text up to the first ">" that is not inside a quoted value
_TAG_BODY = re.compile(r"""(?:[^>"']|"[^"]*"|'[^']*')*>""")


def _find_tag_end(document: str, pos: int, tag_start: int) -> int:
    """Return the offset of the '>' terminating the tag whose attributes begin at pos."""
    limit = _TAG_LIMIT.search(document, pos)
    m = _TAG_BODY.match(document, pos, limit.start() if limit else len(document))
    if m:
        return m.end() - 1

    # A quote was left open: recover at the first bare '>'
    tag_end = document.find(">", pos)
    if tag_end == -1:
        raise MalformedMarkupError("Unterminated <script> tag", tag_start)
    logger.debug("Unbalanced quote in <script> tag at offset %d, closing at %d", tag_start, tag_end)
    return tag_end


def locate(document: str) -> ParseResult:
    """Find every script block in a markup document.

    Self-closing tags (``<script src="a.js"/>``) produce a zero-length block
    starting right after ``/>``; no closing tag is looked for. Paired tags
    report the offset of the opening tag's ``>`` as ``start`` and the number
    of content characters before ``</script>`` as ``length``. A paired tag
    with no closing tag owns the rest of the document.

    Raises MalformedMarkupError only when an opening tag is never closed by
    a ``>`` before the end of the document.
    """
    scripts: list[ScriptBlock] = []
    cursor = 0
    doc_len = len(document)

    while True:
        opening = _OPEN_TAG.search(document, cursor)
        if opening is None:
            break

        tag_end = _find_tag_end(document, opening.end(), opening.start())
        attributes = parse_attributes(document[opening.start() : tag_end + 1])

        if tag_end > opening.end() and document[tag_end - 1] == "/":
            start = tag_end + 1
            scripts.append(
                ScriptBlock(
                    index=len(scripts),
                    start=start,
                    length=0,
                    self_closing=True,
                    attributes=attributes,
                )
            )
            cursor = start
            continue

        content_start = tag_end + 1
        closing = _CLOSE_TAG.search(document, content_start)
        if closing is None:
            logger.debug("No </script> for tag at offset %d, block runs to end of document", opening.start())
            content_end = cursor = doc_len
        else:
            content_end = closing.start()
            cursor = closing.end()

        scripts.append(
            ScriptBlock(
                index=len(scripts),
                start=tag_end,
                length=content_end - content_start,
                attributes=attributes,
            )
        )

    return ParseResult.build(scripts, document)
