"""
Exceptions raised while decoding and building RLE patterns.

Every exception derives from :py:exc:`ValueError`, so callers that only care
about "the input is malformed" can catch that. The first failure aborts the
operation; no partial pattern is returned.

Hierarchy::

    RleError
    ├── DecodeError
    │   ├── MissingHeaderError
    │   ├── HeaderError
    │   ├── MissingTerminatorError
    │   ├── BoundsError
    │   │   ├── WidthExceededError
    │   │   └── HeightExceededError
    │   ├── TokenError
    │   └── ReadError
    └── BuildError
        ├── DuplicateFieldError
        ├── MultilineNameError
        └── PositionError
    RuleError
"""
from typing import Optional


class RuleError(ValueError):
    """Rule notation could not be parsed."""


class RleError(ValueError):
    """Base class of the RLE codec errors."""


class DecodeError(RleError):
    """
    Decoding failed.

    .. py:attribute:: lineno

        1-based number of the input line that caused the failure, or `None`
        when the failure is not tied to a line.
    """

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return "line %d: %s" % (self.lineno, self.message)


class MissingHeaderError(DecodeError):
    """The input has no header line."""


class HeaderError(DecodeError):
    """
    The header line is malformed.

    .. py:attribute:: field

        Name of the offending field (``x``, ``y`` or ``rule``), or `None` when
        the header as a whole is malformed.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        lineno: Optional[int] = None,
    ) -> None:
        super().__init__(message, lineno)
        self.field = field


class MissingTerminatorError(DecodeError):
    """The input ended before the ``!`` terminator."""


class BoundsError(DecodeError):
    """
    A run moved the cursor outside the declared bounds.

    .. py:attribute:: bound

        The declared width or height.

    .. py:attribute:: value

        The cursor coordinate the run would have reached.
    """

    def __init__(
        self, message: str, bound: int, value: int, lineno: Optional[int] = None
    ) -> None:
        super().__init__(message, lineno)
        self.bound = bound
        self.value = value


class WidthExceededError(BoundsError):
    """A dead or alive run went past the declared width."""


class HeightExceededError(BoundsError):
    """An end-of-line run went past the declared height."""


class TokenError(DecodeError):
    """
    A content line contains a malformed token.

    .. py:attribute:: column

        0-based offset of the offending token within the line.
    """

    def __init__(
        self, message: str, column: int, lineno: Optional[int] = None
    ) -> None:
        super().__init__(message, lineno)
        self.column = column


class ReadError(DecodeError):
    """The underlying input could not be read; see ``__cause__``."""


class BuildError(RleError):
    """Building a pattern failed."""


class DuplicateFieldError(BuildError):
    """
    An optional builder field was assigned twice.

    .. py:attribute:: field
    """

    def __init__(self, field: str) -> None:
        super().__init__("%s is already set" % field)
        self.field = field


class MultilineNameError(BuildError):
    """The name spans more than one line."""


class PositionError(BuildError):
    """A live cell position is not a pair of non-negative integers."""
