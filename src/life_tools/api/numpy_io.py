"""
NumPy IO module.

Patterns map to 2-D boolean arrays indexed ``[y, x]``, with `True` for live
cells.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterator, Tuple

import numpy as np

if TYPE_CHECKING:
    from life_tools.rle import Rle

logger = logging.getLogger(__name__)


def get_array(rle: "Rle") -> np.ndarray:
    """
    Get a ``(height, width)`` boolean array of the pattern.
    """
    array = np.zeros((rle.height, rle.width), dtype=bool)
    positions = list(rle)
    if positions:
        xs, ys = np.array(positions, dtype=np.intp).T
        array[ys, xs] = True
    return array


def iter_positions(array: Any) -> Iterator[Tuple[int, int]]:
    """
    Yields ``(x, y)`` of the non-zero entries of a 2-D array in row-major
    order.
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise ValueError("Expected a 2-D array, got shape %s" % (array.shape,))
    ys, xs = np.nonzero(array)
    for x, y in zip(xs.tolist(), ys.tolist()):
        yield x, y
