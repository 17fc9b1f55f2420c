"""
PIL IO module.
"""
import logging
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import numpy as np
from PIL import Image

from .numpy_io import get_array, iter_positions

if TYPE_CHECKING:
    from life_tools.rle import Rle

logger = logging.getLogger(__name__)


def convert_pattern_to_pil(rle: "Rle") -> Optional[Image.Image]:
    """
    Convert the pattern to a mode ``"1"`` image where live cells are white.

    :return: :py:class:`PIL.Image`, or `None` when the grid is empty.
    """
    if rle.width == 0 or rle.height == 0:
        logger.debug("Empty grid %dx%d, no image" % (rle.width, rle.height))
        return None
    array = get_array(rle).astype(np.uint8) * 255
    return Image.fromarray(array).convert("1", dither=Image.Dither.NONE)


def get_positions(image: Image.Image, threshold: int = 127) -> Iterator[Tuple[int, int]]:
    """
    Yields ``(x, y)`` of the pixels whose luminance is above `threshold`.
    """
    array = np.asarray(image.convert("L"))
    return iter_positions(array > threshold)
