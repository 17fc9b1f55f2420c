"""
Pattern module.

This module provides the :py:class:`Pattern` class, the primary entry point
for users of life_tools. It wraps the low-level
:py:class:`~life_tools.rle.Rle` record and adds file, NumPy and PIL
conversions.

Example usage::

    from life_tools import Pattern

    # Open an RLE file
    pattern = Pattern.open('glider.rle')
    print(f"Size: {pattern.width}x{pattern.height}, rule {pattern.rule}")

    # Iterate through live cells
    for x, y in pattern:
        print(x, y)

    # Convert
    array = pattern.numpy()
    pattern.topil().save('glider.png')

    # Create and save
    pattern = Pattern.new([(0, 0), (1, 0), (2, 0)], name='Blinker')
    pattern.save('blinker.rle')
"""

import logging
import os
from typing import IO, Any, Iterable, Iterator, Optional, Tuple, Union

try:
    from typing import Self  # type: ignore[attr-defined]
except ImportError:
    from typing_extensions import Self

import numpy as np
from PIL import Image

from life_tools.api import numpy_io, pil_io
from life_tools.constants import CommentPrefix, MAX_LINE_WIDTH
from life_tools.rle import Rle, RleBuilder
from life_tools.rule import Rule

logger = logging.getLogger(__name__)


class Pattern:
    """
    Cellular automaton pattern.

    Use :py:meth:`open`, :py:meth:`new`, :py:meth:`fromarray` or
    :py:meth:`frompil` to get an instance. The low-level record is available
    as the ``_record`` attribute.
    """

    def __init__(self, data: Rle) -> None:
        assert isinstance(data, Rle)
        self._record = data

    @classmethod
    def new(
        cls,
        positions: Iterable[Tuple[int, int]] = (),
        name: Optional[str] = None,
        created: Optional[str] = None,
        comment: Optional[str] = None,
        rule: Optional[Rule] = None,
    ) -> Self:
        """
        Create a new pattern.

        :param positions: ``(x, y)`` of the live cells.
        :param name: single-line name.
        :param created: who and when, may span lines.
        :param comment: free text, may span lines.
        :param rule: see :py:class:`~life_tools.rule.Rule`; Conway's Life
            by default.
        :return: A :py:class:`~life_tools.api.pattern.Pattern` object.
        """
        builder = RleBuilder(positions)
        if name is not None:
            builder.set_name(name)
        if created is not None:
            builder.set_created(created)
        if comment is not None:
            builder.set_comment(comment)
        if rule is not None:
            builder.set_rule(rule)
        return cls(builder.build())

    @classmethod
    def fromarray(cls, array: Any, **kwargs: Any) -> Self:
        """
        Create a pattern from a 2-D array indexed ``[y, x]``; non-zero entries
        are live cells. Keyword arguments are passed to :py:meth:`new`.
        """
        return cls.new(numpy_io.iter_positions(array), **kwargs)

    @classmethod
    def frompil(cls, image: Image.Image, threshold: int = 127, **kwargs: Any) -> Self:
        """
        Create a pattern from a PIL Image; pixels brighter than `threshold`
        are live cells. Keyword arguments are passed to :py:meth:`new`.
        """
        return cls.new(pil_io.get_positions(image, threshold), **kwargs)

    @classmethod
    def open(cls, fp: Union[IO[Any], str, bytes, os.PathLike], **kwargs: Any) -> Self:
        """
        Open an RLE pattern.

        :param fp: filename or file-like object.
        :param encoding: charset of the file, default 'utf-8'.
        :return: A :py:class:`~life_tools.api.pattern.Pattern` object.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, "rb") as f:
                self = cls(Rle.read(f, **kwargs))
        else:
            self = cls(Rle.read(fp, **kwargs))
        return self

    def save(
        self,
        fp: Union[IO[Any], str, bytes, os.PathLike],
        mode: str = "w",
        **kwargs: Any,
    ) -> None:
        """
        Save the pattern as RLE text.

        :param fp: filename or file-like object.
        :param mode: file open mode, default 'w'.
        :param max_width: content line width, default 70.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, mode) as f:
                self._record.write(f, **kwargs)
        else:
            self._record.write(fp, **kwargs)

    def normalize(self) -> Self:
        """
        Return the canonical encoding of this pattern.

        Comments and rule are kept; the bounds shrink to the live cells.
        """
        record = RleBuilder(self).set_rule(self.rule).build()
        return self.__class__(
            Rle(
                header=record.header,
                comments=self.comments,
                contents=record.contents,
            )
        )

    def numpy(self) -> np.ndarray:
        """
        Get a ``(height, width)`` boolean NumPy array of the pattern.

        :return: :py:class:`numpy.ndarray`
        """
        return numpy_io.get_array(self._record)

    def topil(self) -> Optional[Image.Image]:
        """
        Get PIL Image, live cells in white.

        :return: :py:class:`PIL.Image`, or `None` if the grid is empty.
        """
        return pil_io.convert_pattern_to_pil(self._record)

    def render(self, max_width: int = MAX_LINE_WIDTH) -> str:
        """RLE text of the pattern."""
        return self._record.render(max_width)

    @property
    def width(self) -> int:
        """Declared width of the grid."""
        return self._record.width

    @property
    def height(self) -> int:
        """Declared height of the grid."""
        return self._record.height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    @property
    def rule(self) -> Rule:
        return self._record.rule

    @property
    def comments(self) -> Tuple[str, ...]:
        return self._record.comments

    @property
    def name(self) -> Optional[str]:
        """Text of the first ``#N`` comment line, or `None`."""
        prefix = CommentPrefix.NAME.value
        for line in self.comments:
            if line.startswith(prefix):
                return line[len(prefix):].strip()
        return None

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self._record)

    def __len__(self) -> int:
        return sum(triple.live_cells for triple in self._record.contents)

    def __contains__(self, position: Any) -> bool:
        return position in set(self._record)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return "%s(size=%dx%d, rule=%s, cells=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
            self.rule,
            len(self),
        )
