import fnmatch
import logging
import os
import tempfile
from typing import Any, Generator, List, TypeVar

from life_tools.rle.base import BaseElement

T = TypeVar("T", bound=BaseElement)

logging.basicConfig(level=logging.DEBUG)

# Files that must fail to decode.
MALFORMED_FILES = {
    "unterminated.rle",
}

# Files that decode but are not in canonical form.
LOOSE_FILES = {
    "glider-loose.rle",
    "crlf.rle",
}

TEST_ROOT = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def find_files(
    pattern: str = "*.rle", root: str = TEST_ROOT
) -> Generator[str, None, None]:
    for r, _, filenames in os.walk(root):
        for filename in fnmatch.filter(filenames, pattern):
            yield os.path.join(r, filename)


def full_name(filename: str) -> str:
    return os.path.join(TEST_ROOT, "patterns", filename)


def all_files() -> List[str]:
    return [
        f for f in find_files() if os.path.basename(f) not in MALFORMED_FILES
    ]


def canonical_files() -> List[str]:
    return [f for f in all_files() if os.path.basename(f) not in LOOSE_FILES]


def check_write_read(element: T, *args: Any, **kwargs: Any) -> None:
    with tempfile.TemporaryFile("w+") as f:
        element.write(f, *args, **kwargs)
        f.flush()
        f.seek(0)
        new_element = element.read(f, *args, **kwargs)
    assert element == new_element, "%s vs %s" % (element, new_element)
