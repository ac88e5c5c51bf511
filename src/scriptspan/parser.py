import logging
import re

from .locator.base import MalformedMarkupError, ParseResult, ScriptBlock
from .locator.scanner import locate

logger = logging.getLogger(__name__)

# First non-whitespace character is "<": treat the source as markup
_MARKUP_START = re.compile(r"^\s*<")


class Parser:
    """Locates script blocks and caches the results per document URL."""

    def __init__(self) -> None:
        # url -> parse result
        self._cache: dict[str, ParseResult] = {}
        # Errors raised while parsing, in the order they happened
        self.errors: list[MalformedMarkupError] = []

    def get(self, source: str, url: str | None = None) -> ParseResult:
        """Return the script blocks of source, reusing the cached result for url.

        A source that does not start with markup is a bare script: it yields
        a single block covering the whole text.
        """
        if url is not None and url in self._cache:
            return self._cache[url]

        if _MARKUP_START.match(source):
            try:
                result = locate(source)
            except MalformedMarkupError as e:
                self.errors.append(e)
                logger.warning("%s: %s", url or "<source>", e)
                raise
        else:
            block = ScriptBlock(index=0, start=0, length=len(source), tagless=True)
            result = ParseResult.build([block], source)

        logger.debug("%s: %d script block(s)", url or "<source>", result.script_count)
        if url is not None:
            self._cache[url] = result
        return result

    def is_cached(self, url: str) -> bool:
        return url in self._cache

    def clear_cache(self, url: str | None = None) -> None:
        """Forget the result for url, or every cached result when url is None."""
        if url is None:
            self._cache.clear()
        else:
            self._cache.pop(url, None)
