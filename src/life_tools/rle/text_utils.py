"""
Text processing utilities for the line-oriented RLE format.
"""

import io
import logging
from typing import IO, Any, Iterable, Iterator, Tuple

from life_tools.errors import ReadError

logger = logging.getLogger(__name__)


def strip_newline(line: str) -> str:
    """
    Remove one trailing ``\\n`` or ``\\r\\n`` from ``line``.
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def iter_lines(fp: IO[Any], encoding: str = "utf-8") -> Iterator[Tuple[int, str]]:
    """
    Yields ``(lineno, line)`` pairs from a text or binary file-like object.

    Byte lines are decoded with ``encoding``. Line numbers are 1-based and
    line terminators are stripped.

    :param fp: file-like object, or any iterable of lines.
    :raise ReadError: the source fails to read or to decode.
    """
    lineno = 0
    try:
        for line in fp:
            lineno += 1
            if isinstance(line, (bytes, bytearray)):
                line = line.decode(encoding)
            yield lineno, strip_newline(line)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError("Failed to read input: %s" % e, lineno or None) from e


def write_lines(fp: IO[Any], lines: Iterable[str], encoding: str = "utf-8") -> int:
    """
    Writes each line followed by ``\\n`` to a text or binary file-like object.

    :return: number of characters written for text streams, or number of
        bytes for binary streams.
    """
    written = 0
    binary = _is_binary(fp)
    for line in lines:
        data: Any = line + "\n"
        if binary:
            data = data.encode(encoding)
        written += fp.write(data)
    return written


def _is_binary(fp: IO[Any]) -> bool:
    mode = getattr(fp, "mode", None)
    if isinstance(mode, str):
        return "b" in mode
    # In-memory streams carry no mode.
    return isinstance(fp, (io.RawIOBase, io.BufferedIOBase))
