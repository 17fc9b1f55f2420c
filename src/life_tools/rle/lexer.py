"""
Tokenizer of the content lines.

A content line is a sequence of runs, each an optional decimal count followed
by a tag character::

    3o$bo!

reads as three alive cells, end of line, one dead cell, one alive cell and
the terminator. Whitespace may separate runs but not a count from its tag.
"""

import logging
from typing import List, Optional, Tuple

from attrs import define, field

from life_tools.constants import TERMINATOR, Tag
from life_tools.errors import TokenError
from life_tools.validators import in_, positive

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

_TAGS = {tag.value: tag for tag in Tag}

# Separators that str.isspace() accepts but White_Space does not include.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


@define(frozen=True)
class Run:
    """
    A single run token.

    .. py:attribute:: count

        Repetition count, at least 1.

    .. py:attribute:: tag

        See :py:class:`~life_tools.constants.Tag`.
    """

    count: int = field(validator=positive())
    tag: Tag = field(validator=in_(Tag))

    def __str__(self) -> str:
        if self.count > 1:
            return "%d%s" % (self.count, self.tag.value)
        return self.tag.value


def lex_line(line: str, lineno: Optional[int] = None) -> Tuple[List[Run], bool]:
    """
    Tokenize one content line.

    Runs with an explicit count of zero are dropped, so they move nothing:
    ``0$`` does not return to the first column and does not discard the dead
    cells counted so far on the row. Characters after the terminator are
    ignored.

    Whitespace is the Unicode ``White_Space`` set. The information separators
    ``\\x1c`` to ``\\x1f``, which :py:meth:`str.isspace` also accepts, are tags
    and therefore alive cells.

    :param line: content line without its line terminator.
    :param lineno: line number reported in errors.
    :return: tuple of (runs, terminated) where `terminated` tells whether
        the ``!`` terminator was reached.
    :raise TokenError: a count is not followed by a tag, or the terminator
        carries a count.
    """
    runs = []
    length = len(line)
    position = 0
    while True:
        while position < length and _is_space(line[position]):
            position += 1
        start = position
        while position < length and line[position] in DIGITS:
            position += 1
        digits = line[start:position]

        if position == length:
            if digits:
                raise TokenError(
                    "Count %r is not followed by a tag" % digits, start, lineno
                )
            return runs, False

        char = line[position]
        if char == TERMINATOR:
            if digits:
                raise TokenError(
                    "The terminator must not have a count", start, lineno
                )
            return runs, True
        if _is_space(char):
            raise TokenError(
                "Count %r is followed by whitespace" % digits, start, lineno
            )

        count = int(digits) if digits else 1
        if count > 0:
            runs.append(Run(count, _TAGS.get(char, Tag.ALIVE_CELL)))
        position += 1


def _is_space(char: str) -> bool:
    return char.isspace() and char not in _SEPARATORS
