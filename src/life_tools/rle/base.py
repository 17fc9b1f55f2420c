"""
Base data structures intended for inheritance.

All the data objects in this subpackage inherit from the base class here.
That means, all the data structures in the :py:mod:`life_tools.rle`
subpackage implement the methods of :py:class:`~life_tools.rle.BaseElement`
for serialization and decoding.

Objects that inherit from the :py:class:`~life_tools.rle.BaseElement`
typically get attrs_ decoration to have data fields.

.. _attrs: https://www.attrs.org/en/stable/index.html
"""

import io
import logging
from typing import IO, Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseElement")


class BaseElement:
    """
    Base element of the RLE structures.

    .. py:classmethod:: read(cls, fp)

        Read the element from a file-like object.

    .. py:method:: write(self, fp)

        Write the element to a file-like object.

    .. py:classmethod:: fromstring(cls, text, *args, **kwargs)

        Read the element from a string.

    .. py:method:: tostring(self, *args, **kwargs)

        Write the element to a string.

    .. py:classmethod:: frombytes(cls, data, *args, **kwargs)

        Read the element from UTF-8 bytes.

    .. py:method:: tobytes(self, *args, **kwargs)

        Write the element to UTF-8 bytes.
    """

    @classmethod
    def read(cls: type[T], fp: IO[Any], **kwargs: Any) -> T:
        raise NotImplementedError()

    def write(self, fp: IO[Any], **kwargs: Any) -> int:
        raise NotImplementedError()

    @classmethod
    def fromstring(cls: type[T], text: str, *args: Any, **kwargs: Any) -> T:
        with io.StringIO(text) as f:
            return cls.read(f, *args, **kwargs)

    def tostring(self, *args: Any, **kwargs: Any) -> str:
        with io.StringIO() as f:
            self.write(f, *args, **kwargs)
            return f.getvalue()

    @classmethod
    def frombytes(cls: type[T], data: bytes, *args: Any, **kwargs: Any) -> T:
        with io.BytesIO(data) as f:
            return cls.read(f, *args, **kwargs)

    def tobytes(self, *args: Any, **kwargs: Any) -> bytes:
        with io.BytesIO() as f:
            self.write(f, *args, **kwargs)
            return f.getvalue()
