"""
Serialization options.

Output terminators are explicit so that the same document serializes to
the same bytes on every platform.  ``LineTerminator.PLATFORM`` is the
opt-in for the host convention.
"""
from __future__ import annotations

import os
from enum import Enum
from typing import Union

from robotsedit.core.errors import InvalidLineTerminatorError


class LineTerminator(Enum):
    """Line terminator written after every serialized line."""
    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"
    PLATFORM = "platform"

    @property
    def sequence(self) -> str:
        """The actual characters to write (``PLATFORM`` is resolved lazily)."""
        if self is LineTerminator.PLATFORM:
            return os.linesep
        return self.value


DEFAULT_TERMINATOR = LineTerminator.LF

_LITERAL_SEQUENCES = frozenset({"\n", "\r\n", "\r"})

TerminatorOption = Union[LineTerminator, str]


def resolve_terminator(value: TerminatorOption = DEFAULT_TERMINATOR) -> str:
    """
    Turn a terminator option into the character sequence to emit.

    Accepts a :class:`LineTerminator` or one of the literal sequences
    ``"\\n"``, ``"\\r\\n"``, ``"\\r"``.  Raises
    :class:`InvalidLineTerminatorError` for anything else.
    """
    if isinstance(value, LineTerminator):
        return value.sequence
    if value in _LITERAL_SEQUENCES:
        return value
    raise InvalidLineTerminatorError(
        f"Unsupported line terminator {value!r}; "
        f"expected one of {[t.name for t in LineTerminator]} or '\\n', '\\r\\n', '\\r'"
    )
