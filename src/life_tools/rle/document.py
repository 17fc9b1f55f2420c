"""
RLE document structure module.

This module contains the :py:class:`Rle` class that represents one RLE file:
the comment lines, the header and the body as live cell runs.
"""

import logging
import os
from typing import IO, Any, Iterator, List, Tuple, TypeVar, Union

from attrs import define, field

from life_tools.constants import MAX_LINE_WIDTH
from life_tools.rle.base import BaseElement
from life_tools.rle.emitter import LineEmitter
from life_tools.rle.header import RleHeader
from life_tools.rle.parser import RleParser
from life_tools.rle.runs import LiveCellRun, expand
from life_tools.rle.text_utils import write_lines
from life_tools.rule import Rule

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Rle")


@define(frozen=True, repr=True)
class Rle(BaseElement):
    """
    Low-level RLE file structure.

    Decoded instances keep the header and comments exactly as read; instances
    made by :py:class:`~life_tools.rle.RleBuilder` carry a header computed
    from the live cells.

    Example::

        from life_tools.rle import Rle

        with open(input_file, 'rb') as f:
            rle = Rle.read(f)

        for x, y in rle:
            print(x, y)

        with open(output_file, 'w') as f:
            rle.write(f)

    .. py:attribute:: header

        See :py:class:`~life_tools.rle.header.RleHeader`.

    .. py:attribute:: comments

        Tuple of comment lines, without line terminators.

    .. py:attribute:: contents

        Tuple of :py:class:`~life_tools.rle.runs.LiveCellRun` in row-major
        order.
    """

    header: RleHeader = field(factory=RleHeader)
    comments: Tuple[str, ...] = field(factory=tuple, converter=tuple)
    contents: Tuple[LiveCellRun, ...] = field(factory=tuple, converter=tuple)

    @classmethod
    def read(cls: type[T], fp: IO[Any], encoding: str = "utf-8", **kwargs: Any) -> T:
        """
        Decode a pattern from a text or binary file-like object.

        :param fp: file-like object, or any iterable of lines.
        :param encoding: charset of byte input.
        :raise DecodeError: the input is malformed, see
            :py:mod:`life_tools.errors`.
        """
        header, comments, contents = RleParser.parse(fp, encoding)
        return cls(header=header, comments=comments, contents=contents)

    @classmethod
    def open(cls: type[T], path: Union[str, bytes, os.PathLike], **kwargs: Any) -> T:
        """Decode the pattern file at `path`."""
        with open(path, "rb") as f:
            return cls.read(f, **kwargs)

    def write(
        self,
        fp: IO[Any],
        max_width: int = MAX_LINE_WIDTH,
        encoding: str = "utf-8",
        **kwargs: Any,
    ) -> int:
        return write_lines(fp, self.lines(max_width), encoding)

    def lines(self, max_width: int = MAX_LINE_WIDTH) -> List[str]:
        """Output lines: comments, header, then wrapped content."""
        result = list(self.comments)
        result.append(str(self.header))
        result.extend(LineEmitter(max_width).emit(self.contents))
        return result

    def render(self, max_width: int = MAX_LINE_WIDTH) -> str:
        """Render the pattern as RLE text, one ``\\n`` after every line."""
        return "".join(line + "\n" for line in self.lines(max_width))

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def rule(self) -> Rule:
        return self.header.rule

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Iterate over the live cell positions in row-major order."""
        return expand(self.contents)

    def __str__(self) -> str:
        return self.render()
