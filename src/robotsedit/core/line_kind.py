from enum import Enum


class LineKind(Enum):
    """
    Structural classification of a robots.txt line.
    """
    COMMENT = "comment"          # only a comment (optional leading whitespace, then #)
    DIRECTIVE = "directive"      # key: value, optionally followed by a comment
    PASSTHROUGH = "passthrough"  # blank, malformed, or missing the ':' separator
