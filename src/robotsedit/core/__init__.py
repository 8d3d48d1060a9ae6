from robotsedit.core.line_kind import LineKind
from robotsedit.core.options import LineTerminator, DEFAULT_TERMINATOR, resolve_terminator
from robotsedit.core.robots_line import RobotsLine
from robotsedit.core.document import RobotsDocument, append, find
from robotsedit.core.errors import RobotsError, InvalidLineTerminatorError, DocumentIOError

__all__ = [
    "LineKind",
    "LineTerminator",
    "DEFAULT_TERMINATOR",
    "resolve_terminator",
    "RobotsLine",
    "RobotsDocument",
    "append",
    "find",
    "RobotsError",
    "InvalidLineTerminatorError",
    "DocumentIOError",
]
