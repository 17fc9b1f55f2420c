"""
Line wrapping of the encoded content.
"""

import logging
from typing import Iterable, Iterator, List

from life_tools.constants import MAX_LINE_WIDTH, TERMINATOR
from life_tools.rle.runs import LiveCellRun

logger = logging.getLogger(__name__)


class LineEmitter:
    """
    Greedy fixed-width line wrapper for content tokens.

    A token is appended to the current line unless the line would grow past
    `max_width`; in that case the current line is flushed first. A token
    wider than `max_width` ends up alone on its own line.

    Example::

        emitter = LineEmitter(max_width=4)
        list(emitter.wrap(["3o", "$", "bo", "!"]))  # ['3o$', 'bo!']
    """

    def __init__(self, max_width: int = MAX_LINE_WIDTH) -> None:
        if max_width < 1:
            raise ValueError("max_width must be positive: %r" % max_width)
        self.max_width = max_width

    def wrap(self, tokens: Iterable[str]) -> Iterator[str]:
        """Yields output lines without line terminators."""
        buf = ""
        for token in tokens:
            if buf and len(buf) + len(token) > self.max_width:
                yield buf
                buf = ""
            buf += token
        if buf:
            yield buf

    def emit(self, triples: Iterable[LiveCellRun]) -> List[str]:
        """
        Render live cell runs as wrapped content lines, terminator included.
        """
        return list(self.wrap(tokenize(triples)))


def tokenize(triples: Iterable[LiveCellRun]) -> Iterator[str]:
    """Yields the token text of each run followed by the terminator."""
    for triple in triples:
        for run in triple.runs():
            yield str(run)
    yield TERMINATOR
