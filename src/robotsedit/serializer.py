"""
Serializer for robots.txt documents.

Converts a list of :class:`RobotsLine` back to file text, and provides
JSON round-trip helpers (``from_dict`` / ``to_json``).
"""
from __future__ import annotations

from robotsedit.core.document import RobotsDocument
from robotsedit.core.options import DEFAULT_TERMINATOR, TerminatorOption, resolve_terminator
from robotsedit.core.robots_line import RobotsLine


def serialize(document: RobotsDocument, terminator: TerminatorOption = DEFAULT_TERMINATOR) -> str:
    """Serialize every line in order, each followed by *terminator*."""
    sequence = resolve_terminator(terminator)
    return "".join(line.serialize(sequence) for line in document)


def to_json(line: RobotsLine) -> dict:
    """Convert a RobotsLine to a JSON-safe dict."""
    return {
        "line_number": line.line_number,
        "kind": line.kind.value,
        "raw_text": line.raw_text,
        "key": line.key,
        "value": line.value,
        "comment": line.comment,
        "padding_before": line.padding_before,
        "padding_after": line.padding_after,
    }


def from_dict(fields: dict, index: int) -> RobotsLine:
    """
    Build a RobotsLine from a raw JSON dict.

    The line is re-parsed from ``raw_text`` so comment and padding are
    recovered from the text itself; ``key`` / ``value`` entries, when
    present, are applied on top as edits.
    """
    line = RobotsLine(fields.get("raw_text", ""), index).parse()
    if fields.get("key") is not None:
        line.key = fields["key"]
    if "value" in fields and fields["value"] is not None:
        line.value = fields["value"]
    return line
