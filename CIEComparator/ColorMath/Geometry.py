import logging
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from ..Utils.CustomTypes import ChromaticityPoint, PointSet, ZoomWindow, DIAGRAM_BOUNDS, ValidateZoomSettings

logger = logging.getLogger(__name__)


DEFAULT_WINDOW = ZoomWindow(*DIAGRAM_BOUNDS)


def FlattenPoints(point_sets: Iterable[PointSet]) -> List[ChromaticityPoint]:
    return [p for s in point_sets for p in s.points]


def Centroid(points: Sequence[ChromaticityPoint]) -> ChromaticityPoint:
    """Arithmetic mean of the coordinates. Requires at least one point."""
    if len(points) == 0:
        raise ValueError("Centroid is undefined for an empty point set")
    n = len(points)
    return ChromaticityPoint(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def _FitAxis(lo: float, hi: float, bound_lo: float, bound_hi: float,
             padding: float, fallback_margin: float, epsilon: float) -> Tuple[float, float]:
    lo = min(max(lo - padding, bound_lo), bound_hi)
    hi = min(max(hi + padding, bound_lo), bound_hi)
    if hi - lo < epsilon:
        # every point coincides on this axis (or lies past one edge of the domain):
        # widen around the middle, which at an edge means inward from that edge
        mid = (lo + hi) / 2
        lo = max(bound_lo, mid - fallback_margin)
        hi = min(bound_hi, mid + fallback_margin)
    return lo, hi


def ComputeZoomWindow(points: Sequence[ChromaticityPoint], padding: float = 0.02,
                      fallback_margin: float = 0.01, epsilon: float = 1e-6) -> ZoomWindow:
    """Padded bounding box of the points, clamped to the diagram domain.

    Args:
        points (Sequence[ChromaticityPoint]): every visible point across all sets, any order
        padding (float): margin added on each side of the bounding box
        fallback_margin (float): widening applied to an axis whose span collapsed below epsilon
        epsilon (float): smallest span accepted without widening

    Returns:
        ZoomWindow: the full diagram when points is empty, otherwise a window with
        strictly positive width and height
    """
    ValidateZoomSettings(padding, fallback_margin, epsilon)
    if len(points) == 0:
        return DEFAULT_WINDOW

    bx_min, bx_max, by_min, by_max = DIAGRAM_BOUNDS
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    x_min, x_max = _FitAxis(min(xs), max(xs), bx_min, bx_max, padding, fallback_margin, epsilon)
    y_min, y_max = _FitAxis(min(ys), max(ys), by_min, by_max, padding, fallback_margin, epsilon)

    window = ZoomWindow(x_min, x_max, y_min, y_max)
    logger.debug(f"Zoom window for {len(points)} points: {window.as_tuple()}")
    return window


class ChromaticityTransform:
    """Maps between chromaticity coordinates and raster pixels for one zoom window.

    Pixel column 0 is x_min and column W-1 is x_max. Rows are flipped: row 0 is
    y_max (top of the image) and row H-1 is y_min.
    """

    def __init__(self, window: ZoomWindow, width: int, height: int):
        self.window = window
        self.width = width
        self.height = height

    def to_chromaticity(self, i: float, j: float) -> Tuple[float, float]:
        w = self.window
        x = w.x_min + (i / (self.width - 1)) * w.width
        y = w.y_min + (1 - j / (self.height - 1)) * w.height
        return x, y

    def to_pixel(self, x: float, y: float) -> Tuple[int, int]:
        w = self.window
        px = (x - w.x_min) / w.width * (self.width - 1)
        py = (1 - (y - w.y_min) / w.height) * (self.height - 1)
        return int(np.floor(px + 0.5)), int(np.floor(py + 0.5))

    def point_to_pixel(self, point: ChromaticityPoint) -> Tuple[int, int]:
        return self.to_pixel(point.x, point.y)

    def pixel_grid(self) -> Tuple[npt.NDArray, npt.NDArray]:
        """
        Chromaticity of every pixel as two (H, W) arrays (xs, ys).
        """
        w = self.window
        xs = w.x_min + (np.arange(self.width) / (self.width - 1)) * w.width
        ys = w.y_min + (1 - np.arange(self.height) / (self.height - 1)) * w.height
        return np.meshgrid(xs, ys)
