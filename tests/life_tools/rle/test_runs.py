import logging
import random

import pytest

from life_tools.constants import Tag
from life_tools.rle.lexer import Run, lex_line
from life_tools.rle.runs import LiveCellRun, compress, expand, runs_from_positions

logger = logging.getLogger(__name__)


def _triples(triples):
    return [(t.pad_lines, t.pad_dead_cells, t.live_cells) for t in triples]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", []),
        ("o", [(0, 0, 1)]),
        ("o$bo", [(0, 0, 1), (1, 1, 1)]),
        ("3o$bo", [(0, 0, 3), (1, 1, 1)]),
        ("bbbo", [(0, 3, 1)]),
        ("ooo", [(0, 0, 3)]),
        ("o2o", [(0, 0, 3)]),
        ("$$$o", [(3, 0, 1)]),
        ("b$o", [(1, 0, 1)]),
        ("2b$2o", [(1, 0, 2)]),
        ("2o$ob", [(0, 0, 2), (1, 0, 1)]),
        ("3o$o2b", [(0, 0, 3), (1, 0, 1)]),
        ("o$", [(0, 0, 1)]),
        ("o2$", [(0, 0, 1)]),
        ("obo", [(0, 0, 1), (0, 1, 1)]),
        ("ob$bo", [(0, 0, 1), (1, 1, 1)]),
        ("2b3o$bo2bo", [(0, 2, 3), (1, 1, 1), (0, 2, 1)]),
    ],
)
def test_compress(line, expected):
    runs, _ = lex_line(line)
    assert _triples(compress(runs)) == expected


@pytest.mark.parametrize(
    "positions, expected",
    [
        ([], []),
        ([(0, 0)], [(0, 0, 1)]),
        ([(0, 0), (1, 0), (2, 0), (1, 1)], [(0, 0, 3), (1, 1, 1)]),
        ([(1, 1), (2, 0), (0, 0), (1, 0)], [(0, 0, 3), (1, 1, 1)]),
        ([(0, 0), (0, 0), (1, 0)], [(0, 0, 2)]),
        ([(3, 0)], [(0, 3, 1)]),
        ([(0, 3)], [(3, 0, 1)]),
        ([(2, 2)], [(2, 2, 1)]),
        ([(0, 0), (2, 0), (3, 0), (5, 0)], [(0, 0, 1), (0, 1, 2), (0, 1, 1)]),
        ([(4, 0), (0, 1)], [(0, 4, 1), (1, 0, 1)]),
        ([(0, 0), (0, 5)], [(0, 0, 1), (5, 0, 1)]),
    ],
)
def test_compress_positions(positions, expected):
    assert _triples(compress(runs_from_positions(positions))) == expected


def test_runs_from_positions_merges_adjacent_cells():
    runs = list(runs_from_positions([(1, 0), (2, 0), (3, 0), (0, 2)]))
    assert runs == [
        Run(1, Tag.DEAD_CELL),
        Run(3, Tag.ALIVE_CELL),
        Run(2, Tag.END_OF_LINE),
        Run(1, Tag.ALIVE_CELL),
    ]


@pytest.mark.parametrize(
    "triples, expected",
    [
        ([], []),
        ([(0, 0, 1)], [(0, 0)]),
        ([(0, 0, 3), (1, 1, 1)], [(0, 0), (1, 0), (2, 0), (1, 1)]),
        ([(2, 1, 2)], [(1, 2), (2, 2)]),
        ([(0, 1, 1), (0, 1, 1)], [(1, 0), (3, 0)]),
    ],
)
def test_expand(triples, expected):
    assert list(expand(LiveCellRun(*t) for t in triples)) == expected


def test_expand_inverts_compress():
    rng = random.Random(0)
    for _ in range(20):
        positions = {(rng.randrange(12), rng.randrange(12)) for _ in range(40)}
        result = list(expand(compress(runs_from_positions(positions))))
        assert result == sorted(positions, key=lambda p: (p[1], p[0]))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"live_cells": 0},
        {"pad_lines": -1},
        {"pad_dead_cells": -1},
    ],
)
def test_live_cell_run_invalid(kwargs):
    with pytest.raises(ValueError):
        LiveCellRun(**kwargs)


@pytest.mark.parametrize(
    "triple, expected",
    [
        (LiveCellRun(0, 0, 1), ["o"]),
        (LiveCellRun(0, 2, 3), ["2b", "3o"]),
        (LiveCellRun(1, 0, 1), ["$", "o"]),
        (LiveCellRun(4, 5, 6), ["4$", "5b", "6o"]),
    ],
)
def test_live_cell_run_runs(triple, expected):
    assert [str(run) for run in triple.runs()] == expected
