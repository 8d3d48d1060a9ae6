"""
Parser for robots.txt documents.

Every physical line becomes exactly one :class:`RobotsLine`, whatever it
contains.  Lines that are not comments and have no ``:`` are kept as
pass-through lines, so parsing never fails.
"""
from __future__ import annotations

import logging

from robotsedit.core.document import RobotsDocument
from robotsedit.core.robots_line import COMMENT_INDICATOR, WHITESPACE, RobotsLine

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


def is_comment(text: str) -> bool:
    return text.lstrip(WHITESPACE).startswith(COMMENT_INDICATOR)


def is_empty(text: str) -> bool:
    return not text.strip(WHITESPACE)


def parse(content: str) -> RobotsDocument:
    """
    Parse robots.txt file content into a list of lines.

    ::

        User-Agent: *
        Disallow: /private/ # does not block indexing, add meta noindex

    becomes two lines: ``key="User-Agent", value="*"`` and
    ``key="Disallow", value="/private/",
    comment="# does not block indexing, add meta noindex"``.

    Only ``\\n`` separates lines.  A ``\\r`` before it stays part of the
    line (as trailing padding or comment text) so CRLF input round-trips.
    """
    raw_lines = content.split(LINE_SEPARATOR)
    # drop the empty element produced by a final terminator
    if not raw_lines[-1]:
        raw_lines.pop()

    document = [RobotsLine(text, index).parse() for index, text in enumerate(raw_lines)]
    logger.debug("Parsed robots document: %d lines", len(document))
    return document
