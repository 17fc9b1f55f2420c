"""
Low-level API that translates RLE text to Python structure.

All the data structure in this subpackage inherits from
:py:class:`~life_tools.rle.base.BaseElement`.
"""

# Main document class and its builder
from .builder import RleBuilder as RleBuilder
from .document import Rle as Rle

# Building blocks of the codec
from .emitter import LineEmitter as LineEmitter
from .header import RleHeader as RleHeader
from .lexer import Run as Run
from .parser import BoundsTracker as BoundsTracker, RleParser as RleParser
from .runs import LiveCellRun as LiveCellRun

__all__ = [
    "Rle",
    "RleBuilder",
    "RleHeader",
    "RleParser",
    "BoundsTracker",
    "LineEmitter",
    "LiveCellRun",
    "Run",
]
