"""
Base error hierarchy for robotsedit.

Parsing and serializing never raise.  These errors only come from the
edges of the library (configuration and file I/O), and all of them
inherit from ``RobotsError`` so callers can catch a single base type.
"""
from __future__ import annotations



class RobotsError(Exception):
    """Base class for all robotsedit errors."""


class InvalidLineTerminatorError(RobotsError, ValueError):
    """Raised when a line terminator option is not a recognised sequence."""


class DocumentIOError(RobotsError):
    """Raised when a document cannot be loaded or saved as requested."""
