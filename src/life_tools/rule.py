"""
Rules of Life-like cellular automata.

A rule is a pair of membership tables indexed by the number of live
neighbours (0 to 8): ``birth`` says whether a dead cell comes alive, and
``survival`` says whether a live cell stays alive. The textual notation is
``B<digits>/S<digits>``, e.g. ``B3/S23`` for Conway's Game of Life.

Example::

    from life_tools.rule import Rule

    rule = Rule.parse("B36/S23")
    assert rule == Rule.highlife()
    assert rule.is_born(6)
    assert str(rule) == "B36/S23"
"""

import logging
import re
from typing import Any, Iterable, Tuple, TypeVar

from attrs import define, field

from life_tools.errors import RuleError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Rule")

NEIGHBOR_COUNTS = range(9)

_NOTATION = re.compile(r"B(?P<birth>[0-9]*)/S(?P<survival>[0-9]*)")


def _to_table(value: Iterable[Any]) -> Tuple[bool, ...]:
    return tuple(bool(item) for item in value)


def _validate_table(instance: Any, attribute: Any, value: Tuple[bool, ...]) -> None:
    if len(value) != len(NEIGHBOR_COUNTS):
        raise ValueError(
            "'%s' must have %d entries, got %d"
            % (attribute.name, len(NEIGHBOR_COUNTS), len(value))
        )


@define(frozen=True)
class Rule:
    """
    Birth/survival rule.

    .. py:attribute:: birth

        Tuple of 9 booleans; ``birth[n]`` is true when a dead cell with ``n``
        live neighbours is born.

    .. py:attribute:: survival

        Tuple of 9 booleans; ``survival[n]`` is true when a live cell with
        ``n`` live neighbours survives.
    """

    birth: Tuple[bool, ...] = field(converter=_to_table, validator=_validate_table)
    survival: Tuple[bool, ...] = field(
        converter=_to_table, validator=_validate_table
    )

    @classmethod
    def from_counts(
        cls: type[T], birth: Iterable[int] = (), survival: Iterable[int] = ()
    ) -> T:
        """
        Create a rule from the neighbour counts listed in the notation.

        :param birth: counts that give birth.
        :param survival: counts that keep a cell alive.
        """
        birth, survival = set(birth), set(survival)
        for count in birth | survival:
            _check_count(count)
        return cls(
            birth=[n in birth for n in NEIGHBOR_COUNTS],
            survival=[n in survival for n in NEIGHBOR_COUNTS],
        )

    @classmethod
    def conways_life(cls: type[T]) -> T:
        """Conway's Game of Life, ``B3/S23``. This is the default rule."""
        return cls.from_counts(birth=(3,), survival=(2, 3))

    @classmethod
    def highlife(cls: type[T]) -> T:
        """HighLife, ``B36/S23``."""
        return cls.from_counts(birth=(3, 6), survival=(2, 3))

    @classmethod
    def parse(cls: type[T], text: str) -> T:
        """
        Parse the ``B<digits>/S<digits>`` notation.

        :param text: rule notation; surrounding whitespace is ignored.
        :raise RuleError: the notation is malformed, a digit is repeated or
            a digit is outside 0-8.
        """
        match = _NOTATION.fullmatch(text.strip())
        if match is None:
            raise RuleError("Invalid rule notation: %r" % text)
        counts = []
        for group in ("birth", "survival"):
            digits = match.group(group)
            values = [int(digit) for digit in digits]
            if len(set(values)) != len(values):
                raise RuleError("Duplicated %s count in rule %r" % (group, text))
            if any(value not in NEIGHBOR_COUNTS for value in values):
                raise RuleError("Invalid %s count in rule %r" % (group, text))
            counts.append(values)
        return cls.from_counts(birth=counts[0], survival=counts[1])

    def is_born(self, count: int) -> bool:
        """Whether a dead cell with `count` live neighbours is born."""
        return self.birth[_check_count(count)]

    def is_survive(self, count: int) -> bool:
        """Whether a live cell with `count` live neighbours survives."""
        return self.survival[_check_count(count)]

    def __str__(self) -> str:
        return "B{birth}/S{survival}".format(
            birth="".join(str(n) for n in NEIGHBOR_COUNTS if self.birth[n]),
            survival="".join(str(n) for n in NEIGHBOR_COUNTS if self.survival[n]),
        )


def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError("Neighbour count must be an integer: %r" % (count,))
    if count not in NEIGHBOR_COUNTS:
        raise ValueError("Neighbour count must be in [0, 8]: %r" % count)
    return count
