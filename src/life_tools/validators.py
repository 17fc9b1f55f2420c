"""
Validation functions for attr.
"""
import attr
from attr.validators import in_

__all__ = ['in_', 'range_', 'non_negative', 'positive']


@attr.s(repr=False, slots=True, hash=True)
class _RangeValidator(object):
    minimum = attr.ib()
    maximum = attr.ib()

    def __call__(self, inst, attr, value):
        try:
            in_range = (
                (self.minimum is None or self.minimum <= value) and
                (self.maximum is None or value <= self.maximum)
            )
        except TypeError:
            in_range = False

        if not in_range:
            raise ValueError(
                "'{name}' must be in range [{minimum!r}, {maximum!r}]: "
                "{value!r}".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self):
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def range_(minimum, maximum=None):
    """
    A validator that raises a :exc:`ValueError` if the initializer is called
    with a value that does not belong in the [minimum, maximum] range. The
    check is performed using ``minimum <= value and value <= maximum``; a
    bound of `None` is open.
    """
    return _RangeValidator(minimum, maximum)


def non_negative():
    """A validator for counts that may be zero."""
    return range_(0)


def positive():
    """A validator for counts that must be at least one."""
    return range_(1)
