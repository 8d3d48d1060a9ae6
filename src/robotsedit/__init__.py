"""
robotsedit: lossless robots.txt parser and serializer.

Typical use::

    from robotsedit import parse, serialize, append

    lines = parse(text)
    for line in lines:
        if line.key == "Disallow" and line.value == "/tmp/":
            line.value = "/scratch/"
    append(lines, "Sitemap", "https://example.com/sitemap.xml")
    text = serialize(lines)
"""
from robotsedit.core import (
    LineKind,
    LineTerminator,
    RobotsLine,
    RobotsDocument,
    append,
    find,
    RobotsError,
    InvalidLineTerminatorError,
    DocumentIOError,
)
from robotsedit.parser import parse, is_comment, is_empty
from robotsedit.serializer import serialize, to_json, from_dict
from robotsedit.infrastructure import load_document, save_document

__all__ = [
    "LineKind",
    "LineTerminator",
    "RobotsLine",
    "RobotsDocument",
    "append",
    "find",
    "RobotsError",
    "InvalidLineTerminatorError",
    "DocumentIOError",
    "parse",
    "is_comment",
    "is_empty",
    "serialize",
    "to_json",
    "from_dict",
    "load_document",
    "save_document",
]
