"""
Conversion between run tokens and live cell runs.

The pattern body is stored as a list of :py:class:`LiveCellRun` triples, each
describing one maximal horizontal run of live cells plus the padding that
positions it after the previous one. Both directions of the codec go through
:py:func:`compress`:

- decoding folds the tokens read from the content lines;
- encoding folds the tokens generated from a position set by
  :py:func:`runs_from_positions`.

so the grouping and flushing rules are shared by construction.

Example::

    from life_tools.rle.runs import compress, expand, runs_from_positions

    triples = compress(runs_from_positions([(0, 0), (1, 0), (2, 0), (1, 1)]))
    # [LiveCellRun(pad_lines=0, pad_dead_cells=0, live_cells=3),
    #  LiveCellRun(pad_lines=1, pad_dead_cells=1, live_cells=1)]
    assert list(expand(triples)) == [(0, 0), (1, 0), (2, 0), (1, 1)]
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from attrs import define, field

from life_tools.constants import Tag
from life_tools.rle.lexer import Run
from life_tools.validators import non_negative, positive

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@define(frozen=True)
class LiveCellRun:
    """
    One run of live cells and its padding.

    .. py:attribute:: pad_lines

        Number of row advances since the row of the previous run.

    .. py:attribute:: pad_dead_cells

        Dead cells before the run: counted from the start of the row when
        `pad_lines` is non-zero, otherwise from the end of the previous run.

    .. py:attribute:: live_cells

        Length of the run, at least 1.
    """

    pad_lines: int = field(default=0, validator=non_negative())
    pad_dead_cells: int = field(default=0, validator=non_negative())
    live_cells: int = field(default=1, validator=positive())

    def runs(self) -> Iterator[Run]:
        """Yields the run tokens that encode this triple."""
        if self.pad_lines > 0:
            yield Run(self.pad_lines, Tag.END_OF_LINE)
        if self.pad_dead_cells > 0:
            yield Run(self.pad_dead_cells, Tag.DEAD_CELL)
        yield Run(self.live_cells, Tag.ALIVE_CELL)


def compress(runs: Iterable[Run]) -> List[LiveCellRun]:
    """
    Fold run tokens into live cell runs.

    Consecutive alive runs merge; a dead or end-of-line run closes the
    pending live run. An end-of-line run discards the dead cells counted so
    far on the row, so trailing dead cells and empty lines leave no trace.
    """
    result = []
    pad_lines = pad_dead_cells = live_cells = 0
    for run in runs:
        if run.tag == Tag.ALIVE_CELL:
            live_cells += run.count
            continue
        if live_cells > 0:
            result.append(LiveCellRun(pad_lines, pad_dead_cells, live_cells))
            pad_lines = pad_dead_cells = live_cells = 0
        if run.tag == Tag.DEAD_CELL:
            pad_dead_cells += run.count
        else:
            pad_lines += run.count
            pad_dead_cells = 0
    if live_cells > 0:
        result.append(LiveCellRun(pad_lines, pad_dead_cells, live_cells))
    return result


def runs_from_positions(positions: Iterable[Position]) -> Iterator[Run]:
    """
    Yields the run tokens that draw the given live cells.

    Positions are deduplicated and visited in row-major order, so the input
    order does not matter. Adjacent cells on a row come out as a single
    alive run.
    """
    x = y = 0
    pending = 0
    for next_y, next_x in sorted(set((y, x) for x, y in positions)):
        if next_y == y and next_x == x + pending:
            pending += 1
            continue
        if pending:
            yield Run(pending, Tag.ALIVE_CELL)
            x += pending
            pending = 0
        if next_y > y:
            yield Run(next_y - y, Tag.END_OF_LINE)
            x, y = 0, next_y
        if next_x > x:
            yield Run(next_x - x, Tag.DEAD_CELL)
        x = next_x
        pending = 1
    if pending:
        yield Run(pending, Tag.ALIVE_CELL)


def expand(triples: Iterable[LiveCellRun]) -> Iterator[Position]:
    """
    Yields the ``(x, y)`` positions of the live cells in row-major order.
    """
    x = y = 0
    for triple in triples:
        if triple.pad_lines > 0:
            y += triple.pad_lines
            x = 0
        x += triple.pad_dead_cells
        for column in range(x, x + triple.live_cells):
            yield column, y
        x += triple.live_cells
