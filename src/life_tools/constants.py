"""
Various constants for life_tools
"""
from enum import Enum

#: Maximum number of characters in an encoded content line.
MAX_LINE_WIDTH = 70

#: Character that terminates the pattern body.
TERMINATOR = "!"


class Tag(Enum):
    """
    Run tags of the content lines.

    Any other non-whitespace character found where a tag is expected is read
    as :py:attr:`ALIVE_CELL`, which collapses multi-state patterns into
    two states.
    """
    DEAD_CELL = "b"
    ALIVE_CELL = "o"
    END_OF_LINE = "$"


class CommentPrefix(Enum):
    """
    Prefixes of the comment lines written by :py:class:`~life_tools.rle.RleBuilder`.
    """
    NAME = "#N"
    CREATED = "#O"
    COMMENT = "#C"
