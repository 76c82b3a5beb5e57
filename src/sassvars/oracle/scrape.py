"""Scraping marker declarations back out of rendered CSS."""

from __future__ import annotations

import re
from collections.abc import Mapping

from sassvars.errors import MarkerNotFoundError

_QUOTES = "\"'"


def _marker_re(marker: str) -> re.Pattern[str]:
    # The marker must be a whole property name directly followed by ":".
    return re.compile(r"(?<![\w-])" + re.escape(marker) + r"[ \t]*:")


def _closes_output(text: str, index: int) -> bool:
    # Only closing braces and whitespace may follow the last declaration.
    return not text[index:].strip("} \t\r\n")


def _value_end(text: str, start: int) -> int:
    """Index of the ``;`` that ends the value starting at *start*.

    Quoted strings (with backslash escapes) and parenthesised groups are
    skipped, so a ``;`` inside ``"red; blue"`` does not end the value.  A
    ``}`` ends the value only when nothing but closing braces follows it,
    which is how compressed output ends the last declaration of the block;
    any other ``}`` is part of the value.  Returns -1 when the value is
    unterminated.
    """
    depth = 0
    quote: str | None = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        elif depth == 0 and ch == ";":
            return i
        elif depth == 0 and ch == "}" and _closes_output(text, i):
            return i
        i += 1
    return -1


class MarkerScraper:
    """Locate ``<marker>: <value>;`` declarations in rendered text."""

    def scrape(self, text: str, markers: Mapping[str, str]) -> dict[str, str]:
        """Return ``{name: value}`` for every ``{name: marker}`` pair.

        Every marker must occur exactly once.
        """
        values: dict[str, str] = {}
        missing: list[str] = []
        duplicated: list[str] = []
        unterminated: list[str] = []

        for name, marker in markers.items():
            matches = list(_marker_re(marker).finditer(text))
            if not matches:
                missing.append(name)
                continue
            if len(matches) > 1:
                duplicated.append(name)
                continue
            start = matches[0].end()
            end = _value_end(text, start)
            if end < 0:
                unterminated.append(name)
                continue
            values[name] = text[start:end].strip()

        if missing:
            raise MarkerNotFoundError(missing)
        if duplicated:
            raise MarkerNotFoundError(duplicated, detail="found more than once")
        if unterminated:
            raise MarkerNotFoundError(unterminated, detail="unterminated")
        return values
