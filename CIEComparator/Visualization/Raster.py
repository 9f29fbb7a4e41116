import logging
import time
from typing import Dict

import numpy as np
import numpy.typing as npt
from PIL import Image

from ..ColorMath.Conversion import ChromaticityToXYZ, XYZArrayTosRGB, ClampTo8Bit
from ..ColorMath.Geometry import ChromaticityTransform
from ..Utils.CustomTypes import ZoomWindow
from ..Utils.Hash import raster_key

logger = logging.getLogger(__name__)


def RasterizeBackground(window: ZoomWindow, width: int, height: int) -> npt.NDArray:
    """Color every pixel with the sRGB color of its chromaticity at unit luminance.

    Args:
        window (ZoomWindow): chromaticity area covered by the raster
        width (int): raster width in pixels
        height (int): raster height in pixels

    Returns:
        npt.NDArray: (height, width, 4) uint8 RGBA buffer, fully opaque, row 0 at y_max
    """
    start_time = time.time()
    xs, ys = ChromaticityTransform(window, width, height).pixel_grid()
    srgb = XYZArrayTosRGB(ChromaticityToXYZ(xs, ys, 1.0))

    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[..., :3] = ClampTo8Bit(srgb)
    rgba[..., 3] = 255
    logger.debug(f"Rasterized {width}x{height} background in {time.time() - start_time:.3f} seconds")
    return rgba


def RasterizeBackgroundImage(window: ZoomWindow, width: int, height: int) -> Image.Image:
    return Image.fromarray(RasterizeBackground(window, width, height))


class BackgroundFactory:
    """
    In-memory cache of background rasters keyed by (zoom window, width, height).

    Every call hands out a fresh copy, so callers can draw over the result without
    corrupting the cached raster.
    """

    def __init__(self, max_entries: int = 8):
        self.max_entries = max_entries
        self._cache: Dict[int, npt.NDArray] = {}

    def get_object(self, window: ZoomWindow, width: int, height: int) -> Image.Image:
        key = raster_key(window, width, height)
        if key not in self._cache:
            if len(self._cache) >= self.max_entries:
                # drop the oldest entry, dicts keep insertion order
                self._cache.pop(next(iter(self._cache)))
            self._cache[key] = RasterizeBackground(window, width, height)
        else:
            logger.debug(f"Background cache hit for window {window.as_tuple()}")
        return Image.fromarray(self._cache[key].copy())

    def clear(self):
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
