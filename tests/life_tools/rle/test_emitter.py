import logging

import pytest

from life_tools.constants import MAX_LINE_WIDTH
from life_tools.rle.emitter import LineEmitter, tokenize
from life_tools.rle.runs import LiveCellRun

logger = logging.getLogger(__name__)


@pytest.mark.parametrize(
    "tokens, max_width, expected",
    [
        ([], 70, []),
        (["!"], 70, ["!"]),
        (["3o", "$", "bo", "!"], 70, ["3o$bo!"]),
        (["3o", "$", "bo", "!"], 4, ["3o$", "bo!"]),
        (["3o", "$", "bo", "!"], 3, ["3o$", "bo!"]),
        (["3o", "$", "bo", "!"], 2, ["3o", "$", "bo", "!"]),
        (["123o", "!"], 2, ["123o", "!"]),
        (["o", "123o", "!"], 2, ["o", "123o", "!"]),
    ],
)
def test_wrap(tokens, max_width, expected):
    assert list(LineEmitter(max_width).wrap(tokens)) == expected


def test_emit():
    triples = [LiveCellRun(0, 0, 3), LiveCellRun(1, 1, 1)]
    assert LineEmitter().emit(triples) == ["3o$bo!"]
    assert LineEmitter().emit([]) == ["!"]


def test_tokenize():
    triples = [LiveCellRun(0, 2, 1), LiveCellRun(3, 0, 12)]
    assert list(tokenize(triples)) == ["2b", "o", "3$", "12o", "!"]


def test_emit_max_width():
    triples = [LiveCellRun(0, 1, 1)] * 36
    lines = LineEmitter().emit(triples)
    assert lines == ["bo" * 35, "bo!"]


def test_emit_lines_within_width():
    triples = [LiveCellRun(i % 3, i % 7, 1 + i % 11) for i in range(500)]
    lines = LineEmitter().emit(triples)
    assert len(lines) > 1
    assert all(0 < len(line) <= MAX_LINE_WIDTH for line in lines)
    assert lines[-1].endswith("!")


def test_emit_wide_token_alone():
    huge = 10 ** 80
    lines = LineEmitter().emit([LiveCellRun(0, 0, 1), LiveCellRun(0, huge, 1)])
    assert lines == ["o", "%db" % huge, "o!"]


@pytest.mark.parametrize("max_width", [0, -1])
def test_invalid_max_width(max_width):
    with pytest.raises(ValueError):
        LineEmitter(max_width)
