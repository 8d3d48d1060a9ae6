"""
RobotsDocument: the ordered list of lines that makes up a robots.txt file.

A document is a plain ``list[RobotsLine]``: list order is the physical
line order and therefore the output order.  It is created by
:func:`robotsedit.parser.parse` and belongs to the caller from then on.
"""
from __future__ import annotations

from typing import Optional

from robotsedit.core.robots_line import RobotsLine

RobotsDocument = list[RobotsLine]


def append(
    document: RobotsDocument,
    key: str,
    value: str,
    raw_text: Optional[str] = None,
) -> RobotsLine:
    """
    Add a ``key: value`` line to the end of *document* and return it.

    An empty or missing ``raw_text`` becomes ``"{key}: {value}"``.  The new line always
    serializes with a single space after the ``:``.
    """
    line = RobotsLine.directive(len(document), key, value, raw_text)
    document.append(line)
    return line


def find(document: RobotsDocument, key: str) -> list[RobotsLine]:
    """Return the key/value lines whose key matches *key*, case-insensitively."""
    wanted = key.strip().lower()
    return [
        line for line in document
        if line.has_key_pair() and line.key.strip().lower() == wanted
    ]
