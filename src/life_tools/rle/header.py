"""
Header line structure.
"""

import logging
import re
from typing import IO, Any, Optional, TypeVar

from attrs import define, field

from life_tools.errors import HeaderError, RuleError
from life_tools.rle.base import BaseElement
from life_tools.rle.text_utils import iter_lines, write_lines
from life_tools.rule import Rule
from life_tools.validators import non_negative

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RleHeader")

_NUMBER = re.compile(r"\+?[0-9]+")

_FIELD_NAMES = ("x", "y", "rule")
_ORDINALS = ("1st", "2nd", "3rd")


@define(frozen=True, repr=True)
class RleHeader(BaseElement):
    """
    Header line of the RLE file.

    Example::

        from life_tools.rle.header import RleHeader

        header = RleHeader.parse("x = 3, y = 2, rule = B3/S23")
        assert (header.width, header.height) == (3, 2)

    .. py:attribute:: width

        Declared number of columns, the ``x`` field.

    .. py:attribute:: height

        Declared number of rows, the ``y`` field.

    .. py:attribute:: rule

        See :py:class:`~life_tools.rule.Rule`. Defaults to Conway's Life
        when the ``rule`` field is absent.
    """

    width: int = field(default=0, validator=non_negative())
    height: int = field(default=0, validator=non_negative())
    rule: Rule = field(factory=Rule.conways_life)

    @classmethod
    def parse(cls: type[T], line: str, lineno: Optional[int] = None) -> T:
        """
        Parse the header line.

        :param line: the header line without its line terminator.
        :param lineno: line number reported in errors.
        :raise HeaderError: too many or too few fields, a field without
            ``=``, a wrong field name or order, or an invalid value.
        """
        fields = []
        for index, item in enumerate(line.split(",")):
            if index >= len(_FIELD_NAMES):
                raise HeaderError(
                    "Too many fields in the header line", lineno=lineno
                )
            name, separator, value = item.partition("=")
            if not separator:
                raise HeaderError(
                    "Parse error in the header line: %r" % item.strip(),
                    lineno=lineno,
                )
            fields.append((name.strip(), value.strip()))
        if len(fields) < 2:
            raise HeaderError("Too few fields in the header line", lineno=lineno)

        _check_name(fields, 0, lineno)
        width = _parse_number(fields[0][1], "x", lineno)
        _check_name(fields, 1, lineno)
        height = _parse_number(fields[1][1], "y", lineno)
        if len(fields) > 2:
            _check_name(fields, 2, lineno)
            try:
                rule = Rule.parse(fields[2][1])
            except RuleError as e:
                raise HeaderError(
                    "Invalid rule value: %r" % fields[2][1],
                    field="rule",
                    lineno=lineno,
                ) from e
        else:
            rule = Rule.conways_life()
        return cls(width=width, height=height, rule=rule)

    @classmethod
    def read(cls: type[T], fp: IO[Any], **kwargs: Any) -> T:
        for lineno, line in iter_lines(fp):
            return cls.parse(line, lineno)
        raise HeaderError("Header line not found")

    def write(self, fp: IO[Any], **kwargs: Any) -> int:
        return write_lines(fp, [str(self)])

    def __str__(self) -> str:
        return "x = {width}, y = {height}, rule = {rule}".format(
            width=self.width, height=self.height, rule=self.rule
        )


def _check_name(fields: list, index: int, lineno: Optional[int]) -> None:
    expected = _FIELD_NAMES[index]
    if fields[index][0] != expected:
        raise HeaderError(
            '%s variable in the header line is not "%s"'
            % (_ORDINALS[index], expected),
            field=expected,
            lineno=lineno,
        )


def _parse_number(value: str, name: str, lineno: Optional[int]) -> int:
    if _NUMBER.fullmatch(value) is None:
        raise HeaderError(
            "Invalid %s value: %r" % (name, value), field=name, lineno=lineno
        )
    return int(value)
