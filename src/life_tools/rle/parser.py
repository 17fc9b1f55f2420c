"""
Line-by-line decoder of the RLE format.

The parser goes through three phases:

1. Comment lines (starting with ``#``) and blank lines before the header are
   kept verbatim.
2. The first other line is the header; see
   :py:class:`~life_tools.rle.header.RleHeader`.
3. Content lines are tokenized and the runs advance a cursor that must stay
   within the declared bounds, until the ``!`` terminator. Anything after
   the terminator is ignored.
"""

import logging
from typing import IO, Any, Iterable, List, Optional, Tuple

from life_tools.constants import Tag
from life_tools.errors import (
    HeightExceededError,
    MissingHeaderError,
    MissingTerminatorError,
    WidthExceededError,
)
from life_tools.rle.header import RleHeader
from life_tools.rle.lexer import Run, lex_line
from life_tools.rle.runs import LiveCellRun, compress
from life_tools.rle.text_utils import iter_lines

logger = logging.getLogger(__name__)


class BoundsTracker:
    """
    Cursor over the declared grid.

    Dead and alive runs move the cursor right; the cursor may end up exactly
    on the right edge but not past it. End-of-line runs move it down and back
    to the first column; the row must stay strictly below the declared
    height. A grid declared with zero height accepts no runs at all.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.x = 0
        self.y = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def advance(self, runs: Iterable[Run], lineno: Optional[int] = None) -> None:
        """
        Move the cursor over `runs`.

        The cursor is only updated when every run fits.

        :raise WidthExceededError: a run goes past the declared width.
        :raise HeightExceededError: a run goes past the declared height.
        """
        runs = list(runs)
        if runs and self.height == 0:
            raise HeightExceededError(
                "The pattern exceeds specified height", self.height, 1, lineno
            )
        x, y = self.x, self.y
        for run in runs:
            if run.tag == Tag.END_OF_LINE:
                x, y = 0, y + run.count
                if y >= self.height:
                    raise HeightExceededError(
                        "The pattern exceeds specified height",
                        self.height,
                        y,
                        lineno,
                    )
            else:
                x += run.count
                if x > self.width:
                    raise WidthExceededError(
                        "The pattern exceeds specified width",
                        self.width,
                        x,
                        lineno,
                    )
        self.x, self.y = x, y


class RleParser:
    """
    Incremental decoder state.

    Feed the lines one at a time with :py:meth:`push`, then call
    :py:meth:`finish` to validate the end of input and obtain the result.

    Example::

        parser = RleParser()
        for lineno, line in enumerate(text.splitlines(), 1):
            parser.push(line, lineno)
        header, comments, contents = parser.finish()
    """

    def __init__(self) -> None:
        self.comments: List[str] = []
        self.header: Optional[RleHeader] = None
        self.runs: List[Run] = []
        self.tracker: Optional[BoundsTracker] = None
        self.finished = False

    @staticmethod
    def is_comment_line(line: str) -> bool:
        return not line or line.startswith("#")

    def push(self, line: str, lineno: Optional[int] = None) -> None:
        """Consume one line without its line terminator."""
        if self.header is None:
            if self.is_comment_line(line):
                self.comments.append(line)
                return
            self.header = RleHeader.parse(line, lineno)
            self.tracker = BoundsTracker(self.header.width, self.header.height)
            logger.debug("read %s" % self.header)
            return
        if self.finished:
            return
        assert self.tracker is not None
        runs, terminated = lex_line(line, lineno)
        self.tracker.advance(runs, lineno)
        self.runs.extend(runs)
        if terminated:
            logger.debug("terminator found at line %s" % lineno)
            self.finished = True

    def finish(self) -> Tuple[RleHeader, List[str], List[LiveCellRun]]:
        """
        :return: tuple of (header, comments, live cell runs).
        :raise MissingHeaderError: no header line was found.
        :raise MissingTerminatorError: the input ended before ``!``.
        """
        if self.header is None:
            raise MissingHeaderError("Header line not found in the pattern")
        if not self.finished:
            raise MissingTerminatorError("The terminal symbol not found")
        contents = compress(self.runs)
        logger.debug("decoded %d live cell runs" % len(contents))
        return self.header, self.comments, contents

    @classmethod
    def parse(
        cls, fp: IO[Any], encoding: str = "utf-8"
    ) -> Tuple[RleHeader, List[str], List[LiveCellRun]]:
        """Decode a whole text or binary file-like object."""
        parser = cls()
        for lineno, line in iter_lines(fp, encoding):
            parser.push(line, lineno)
        return parser.finish()
