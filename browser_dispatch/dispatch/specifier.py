"""Browser specifier grammar: ``*<tag>`` optionally followed by `` <argument>``."""

import re
from collections.abc import Iterable

from browser_dispatch.models import ParsedSpecifier


class SpecifierPattern:
    """Matcher for the specifiers of a single tag, compiled once."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self._regex = re.compile(rf"\*{re.escape(tag)}( .*)?")

    def parse(self, browser: str) -> ParsedSpecifier | None:
        """
        Match a specifier against this tag.

        Only the single space after the tag is consumed; anything beyond it,
        including further spaces, is part of the argument.

        Returns:
            The parsed specifier, or None if the specifier names another tag.
        """
        match = self._regex.fullmatch(browser)
        if match is None:
            return None

        extra = match.group(1)
        if extra is None:
            return ParsedSpecifier(tag=self.tag, argument=None)
        return ParsedSpecifier(tag=self.tag, argument=extra[1:])

    def __repr__(self) -> str:
        return f"SpecifierPattern({self.tag!r})"


def parse_specifier(browser: str, tags: Iterable[str]) -> ParsedSpecifier | None:
    """Parse a specifier against candidate tags, trying longer tags first."""
    for tag in sorted(tags, key=len, reverse=True):
        parsed = SpecifierPattern(tag).parse(browser)
        if parsed is not None:
            return parsed
    return None
