"""Word, line and search scanning over a document's text.

These helpers work on plain strings so they can run without a display.
The window pulls the text out of a ``Gtk.TextBuffer`` and hands it here.
"""
from __future__ import annotations

import re

# Apostrophes and hyphens only join word runs, they never start or end a word.
WORD_RE = re.compile(r"\w+(?:['’-]\w+)*")
LINE_SEPARATOR_RE = re.compile("\r\n|\r|\n|\u2029")
LINE_TERMINATORS = ("\n", "\r", "\u2029")


def scan_words(text: str) -> list[str]:
    return [match.group(0) for match in WORD_RE.finditer(text)]


def count_lines(text: str) -> int:
    """Count lines the way a text iterator walks them.

    An empty text has no lines, and a trailing separator does not open a
    new one: ``"a"`` and ``"a\\n"`` both count 1, ``"a\\nb"`` counts 2.
    """
    if not text:
        return 0
    separators = len(LINE_SEPARATOR_RE.findall(text))
    if text.endswith(LINE_TERMINATORS):
        return separators
    return separators + 1


def find_first(text: str, query: str) -> tuple[int, int] | None:
    if not query:
        return None
    match = re.search(re.escape(query), text, re.IGNORECASE)
    if match is None:
        return None
    return match.start(), match.end()
