import io
import logging
from pathlib import Path
from typing import Any, List, Tuple, Union

import numpy as np
import pytest
from PIL import Image

from life_tools import Pattern
from life_tools.rle import Rle
from life_tools.rule import Rule

from ..utils import full_name

logger = logging.getLogger(__name__)


@pytest.fixture
def fixture() -> Pattern:
    return Pattern.open(full_name("glider.rle"))


@pytest.mark.parametrize(
    "filename",
    [
        "glider.rle",
        Path("glider.rle"),
    ],
)
def test_open(filename: Union[str, Path]) -> None:
    input_path = full_name(str(filename))
    pattern = Pattern.open(Path(input_path))
    assert pattern.size == (3, 3)
    with open(input_path, "rb") as f:
        assert Pattern.open(f).size == (3, 3)
    with open(input_path, "r") as f:
        assert Pattern.open(f).size == (3, 3)


def test_properties(fixture: Pattern, glider: List[Tuple[int, int]]) -> None:
    assert fixture.width == 3
    assert fixture.height == 3
    assert fixture.rule == Rule.conways_life()
    assert fixture.name == "Glider"
    assert len(fixture.comments) == 3
    assert len(fixture) == 5
    assert list(fixture) == sorted(glider, key=lambda p: (p[1], p[0]))
    assert (1, 0) in fixture
    assert (0, 0) not in fixture
    assert isinstance(fixture._record, Rle)


def test_name_missing() -> None:
    assert Pattern.open(full_name("crlf.rle")).name is None


def test_repr(fixture: Pattern) -> None:
    assert repr(fixture) == "Pattern(size=3x3, rule=B3/S23, cells=5)"
    assert str(fixture) == fixture.render()


@pytest.mark.parametrize(
    "kwargs, comments",
    [
        ({}, ()),
        ({"name": "Glider"}, ("#N Glider",)),
        (
            {"name": "Glider", "created": "Richard K. Guy", "comment": "a\nb"},
            ("#N Glider", "#O Richard K. Guy", "#C a", "#C b"),
        ),
    ],
)
def test_new(
    glider: List[Tuple[int, int]], kwargs: Any, comments: Tuple[str, ...]
) -> None:
    pattern = Pattern.new(glider, **kwargs)
    assert pattern.comments == comments
    assert pattern.size == (3, 3)
    assert pattern.render().endswith("x = 3, y = 3, rule = B3/S23\nbo$2bo$3o!\n")


def test_new_rule() -> None:
    pattern = Pattern.new([(0, 0)], rule=Rule.highlife())
    assert pattern.rule == Rule.highlife()


def test_new_empty() -> None:
    pattern = Pattern.new()
    assert pattern.size == (0, 0)
    assert len(pattern) == 0
    assert pattern.topil() is None


def test_save(fixture: Pattern, tmpdir: Any) -> None:
    output = tmpdir.join("output.rle").strpath
    fixture.save(output)
    assert Pattern.open(output)._record == fixture._record
    fixture.save(output, mode="wb")
    assert Pattern.open(output)._record == fixture._record

    with open(full_name("glider.rle"), "r") as f:
        expected = f.read()
    with io.StringIO() as f:
        fixture.save(f)
        assert f.getvalue() == expected
    with io.BytesIO() as f:
        fixture.save(f)
        assert f.getvalue() == expected.encode("utf-8")


def test_save_max_width(fixture: Pattern) -> None:
    with io.StringIO() as f:
        fixture.save(f, max_width=4)
        assert f.getvalue().splitlines()[-3:] == ["bo$", "2bo$", "3o!"]


def test_normalize() -> None:
    loose = Pattern.open(full_name("glider-loose.rle"))
    pattern = loose.normalize()
    assert pattern.size == (3, 3)
    assert pattern.comments == loose.comments
    assert pattern.rule == loose.rule
    assert list(pattern) == list(loose)
    assert pattern.render().endswith("x = 3, y = 3, rule = B3/S23\nbo$2bo$3o!\n")


def test_normalize_rule() -> None:
    pattern = Pattern.open(full_name("replicator.rle"))
    assert pattern.normalize()._record == pattern._record


def test_fromarray(glider: List[Tuple[int, int]]) -> None:
    array = np.zeros((3, 4), dtype=np.uint8)
    for x, y in glider:
        array[y, x] = 1
    pattern = Pattern.fromarray(array, name="Glider")
    assert pattern.size == (3, 3)
    assert pattern.name == "Glider"
    assert set(pattern) == set(glider)


def test_fromarray_invalid() -> None:
    with pytest.raises(ValueError):
        Pattern.fromarray(np.zeros(3))


def test_frompil(glider: List[Tuple[int, int]]) -> None:
    image = Image.new("L", (5, 5), 0)
    for x, y in glider:
        image.putpixel((x, y), 255)
    pattern = Pattern.frompil(image)
    assert set(pattern) == set(glider)


def test_numpy(fixture: Pattern, glider: List[Tuple[int, int]]) -> None:
    array = fixture.numpy()
    assert isinstance(array, np.ndarray)
    assert array.shape == (3, 3)
    assert array.dtype == bool
    assert array.sum() == len(glider)
    assert Pattern.fromarray(array)._record == Pattern.new(glider)._record


def test_topil(fixture: Pattern, glider: List[Tuple[int, int]]) -> None:
    image = fixture.topil()
    assert isinstance(image, Image.Image)
    assert image.mode == "1"
    assert image.size == (3, 3)
    assert set(Pattern.frompil(image)) == set(glider)
