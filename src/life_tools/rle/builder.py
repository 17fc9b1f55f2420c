"""
Builder of :py:class:`~life_tools.rle.Rle` patterns from live cell positions.
"""

import logging
import operator
from typing import Any, Iterable, List, Optional, Set, Tuple

from life_tools.constants import CommentPrefix
from life_tools.errors import DuplicateFieldError, MultilineNameError, PositionError
from life_tools.rle.document import Rle
from life_tools.rle.header import RleHeader
from life_tools.rle.runs import compress, runs_from_positions
from life_tools.rule import Rule

logger = logging.getLogger(__name__)


class RleBuilder:
    """
    Accumulates live cells and metadata, then builds an
    :py:class:`~life_tools.rle.Rle`.

    Duplicate positions collapse and their order does not matter. The name,
    created, comment and rule fields may each be set once; a second
    assignment raises :py:exc:`~life_tools.errors.DuplicateFieldError`.
    Setters return the builder, so calls chain.

    Example::

        from life_tools.rle import RleBuilder

        rle = (
            RleBuilder([(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])
            .set_name("Glider")
            .set_comment("The smallest spaceship.")
            .build()
        )
        print(rle.render())
    """

    def __init__(self, positions: Iterable[Tuple[int, int]] = ()) -> None:
        self._positions: Set[Tuple[int, int]] = set()
        self._name: Optional[str] = None
        self._created: Optional[str] = None
        self._comment: Optional[str] = None
        self._rule: Optional[Rule] = None
        self.add(positions)

    def add(self, positions: Iterable[Tuple[int, int]]) -> "RleBuilder":
        """
        Add live cells.

        :param positions: iterable of ``(x, y)`` pairs of non-negative
            integers.
        :raise PositionError: a position is not a pair of non-negative
            integers.
        """
        self._positions.update(_check_position(item) for item in positions)
        return self

    def set_name(self, value: str) -> "RleBuilder":
        """
        Set the pattern name, written as a ``#N`` line. The name must be a
        single line; this is checked by :py:meth:`build`.
        """
        self._name = self._assign("name", self._name, value)
        return self

    def set_created(self, value: str) -> "RleBuilder":
        """
        Set when and by whom the pattern was created, written as ``#O``
        lines, one per line of `value`.
        """
        self._created = self._assign("created", self._created, value)
        return self

    def set_comment(self, value: str) -> "RleBuilder":
        """Set the comment, written as ``#C`` lines, one per line of `value`."""
        self._comment = self._assign("comment", self._comment, value)
        return self

    def set_rule(self, value: Rule) -> "RleBuilder":
        """Set the rule; Conway's Life is used when unset."""
        if not isinstance(value, Rule):
            raise TypeError("Expected Rule, got %s" % type(value).__name__)
        self._rule = self._assign("rule", self._rule, value)
        return self

    def build(self) -> Rle:
        """
        Build the pattern.

        The header is computed from the live cells: the width is one past the
        largest x, the height one past the largest y, both 0 when there are
        no cells.

        :raise MultilineNameError: the name spans more than one line.
        """
        if self._name is not None and len(_split_lines(self._name)) > 1:
            raise MultilineNameError(
                "The name includes multiple lines: %r" % self._name
            )
        comments = []
        for value, prefix in (
            (self._name, CommentPrefix.NAME),
            (self._created, CommentPrefix.CREATED),
            (self._comment, CommentPrefix.COMMENT),
        ):
            if value is not None:
                comments.extend(_to_comments(value, prefix))

        header = RleHeader(
            width=max((x + 1 for x, _ in self._positions), default=0),
            height=max((y + 1 for _, y in self._positions), default=0),
            rule=self._rule if self._rule is not None else Rule.conways_life(),
        )
        contents = compress(runs_from_positions(self._positions))
        logger.debug(
            "built %d live cell runs from %d cells"
            % (len(contents), len(self._positions))
        )
        return Rle(header=header, comments=comments, contents=contents)

    @staticmethod
    def _assign(name: str, current: Any, value: Any) -> Any:
        if current is not None:
            raise DuplicateFieldError(name)
        return value


def _check_position(item: Any) -> Tuple[int, int]:
    try:
        raw_x, raw_y = item
        x, y = operator.index(raw_x), operator.index(raw_y)
    except (TypeError, ValueError) as e:
        raise PositionError("Invalid position: %r" % (item,)) from e
    if x < 0 or y < 0 or isinstance(raw_x, bool) or isinstance(raw_y, bool):
        raise PositionError("Invalid position: %r" % (item,))
    return x, y


def _split_lines(value: str) -> List[str]:
    lines = value.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _to_comments(value: str, prefix: CommentPrefix) -> List[str]:
    if not value:
        return [prefix.value]
    return [
        "%s %s" % (prefix.value, line) if line else prefix.value
        for line in _split_lines(value)
    ]
