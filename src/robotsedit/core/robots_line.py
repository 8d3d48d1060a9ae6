"""
RobotsLine: one physical line of a robots.txt document.

A line keeps its original text next to the pieces it was split into
(key, value, comment, and the whitespace around the value), so that an
untouched line serializes back to exactly what was read and an edited
line only changes where the caller changed it.
"""
from __future__ import annotations

from typing import Optional

from robotsedit.core.line_kind import LineKind
from robotsedit.core.options import DEFAULT_TERMINATOR, TerminatorOption, resolve_terminator

COMMENT_INDICATOR = "#"
KEY_SEPARATOR = ":"

# Same set as ECMAScript \s: the BOM counts as whitespace, the
# \x1c-\x1f separators and \x85 do not.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class RobotsLine:
    """
    Structured view of a single robots.txt line.

    Attributes:
        raw_text:       Original line text, without its terminator.
        index:          0-based position in the document.
        key:            Declaration key (e.g. ``User-agent``).  ``None``
                        when the line carries no key/value pair.
        value:          Declaration value.  ``None`` when absent; assigning
                        any falsy value stores ``""``.
        comment:        Comment text including the leading ``#``, or ``""``.
        padding_before: Whitespace between the ``:`` and the value.
        padding_after:  Whitespace between the value and the comment / end.

    ``comment`` and the paddings are only ever set by :meth:`parse`.
    """

    __slots__ = ("_raw_text", "_index", "_key", "_value", "_comment",
                 "_padding_before", "_padding_after", "_comment_only")

    def __init__(
        self,
        raw_text: str,
        index: int,
        key: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        self._raw_text = raw_text
        self._index = index
        self._key: Optional[str] = key
        self._value: Optional[str] = None
        if value is not None:
            self.value = value
        self._comment = ""
        self._padding_before = ""
        self._padding_after = ""
        self._comment_only = False

    @classmethod
    def directive(
        cls,
        index: int,
        key: str,
        value: str,
        raw_text: Optional[str] = None,
    ) -> RobotsLine:
        """Build a new ``key: value`` line that was not read from a file."""
        if not raw_text:
            raw_text = f"{key}{KEY_SEPARATOR} {value}"
        line = cls(raw_text, index, key, value)
        line._padding_before = " "
        return line

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def index(self) -> int:
        return self._index

    @property
    def line_number(self) -> int:
        """1-based line number."""
        return self._index + 1

    @property
    def key(self) -> Optional[str]:
        return self._key

    @key.setter
    def key(self, val: Optional[str]) -> None:
        self._key = val

    @property
    def value(self) -> Optional[str]:
        return self._value

    @value.setter
    def value(self, val: Optional[str]) -> None:
        self._value = val or ""

    @property
    def comment(self) -> str:
        return self._comment

    @property
    def padding_before(self) -> str:
        return self._padding_before

    @property
    def padding_after(self) -> str:
        return self._padding_after

    @property
    def kind(self) -> LineKind:
        # mirrors serialize(): a key pair always wins
        if self.has_key_pair():
            return LineKind.DIRECTIVE
        if self._comment_only:
            return LineKind.COMMENT
        return LineKind.PASSTHROUGH

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_comment(self) -> bool:
        return bool(self._comment)

    def has_key_pair(self) -> bool:
        """``True`` when the line holds a non-empty key and a value (possibly ``""``)."""
        return bool(self._key) and self._value is not None

    # ------------------------------------------------------------------
    # Parse / serialize
    # ------------------------------------------------------------------

    def parse(self) -> RobotsLine:
        """Decompose ``raw_text`` into this instance.  Returns ``self``."""
        text = self._raw_text

        if text.lstrip(WHITESPACE).startswith(COMMENT_INDICATOR):
            self._comment = text[text.index(COMMENT_INDICATOR):]
            self._comment_only = True
            return self

        key, sep, region = text.partition(KEY_SEPARATOR)
        if not sep:
            return self

        region, hash_sep, comment = region.partition(COMMENT_INDICATOR)
        if hash_sep:
            self._comment = hash_sep + comment

        value = region.strip(WHITESPACE)
        if value:
            self._padding_before = region[:len(region) - len(region.lstrip(WHITESPACE))]
            self._padding_after = region[len(region.rstrip(WHITESPACE)):]
        else:
            # all-whitespace value: keep it once, not as both paddings
            self._padding_before = region
            self._padding_after = ""

        self.key = key
        self.value = value
        return self

    def serialize(self, terminator: TerminatorOption = DEFAULT_TERMINATOR) -> str:
        """Rebuild the line text from the current state, terminator included."""
        if self.has_key_pair():
            content = (f"{self._key}{KEY_SEPARATOR}{self._padding_before}"
                       f"{self._value}{self._padding_after}{self._comment}")
        else:
            content = self._raw_text
        return content + resolve_terminator(terminator)

    def __repr__(self) -> str:
        return (f"RobotsLine(line_number={self.line_number}, kind={self.kind.name}, "
                f"key={self._key!r}, value={self._value!r}, comment={self._comment!r})")
