"""Tests for the vector overlay drawn over the background."""
import numpy as np
import pytest
from PIL import Image, ImageColor

from CIEComparator.ColorMath.Classification import Classifier
from CIEComparator.ColorMath.Geometry import Centroid, ChromaticityTransform, ComputeZoomWindow, FlattenPoints
from CIEComparator.Utils.CustomTypes import DisplayToggles, PointSet
from CIEComparator.Visualization.Overlay import (
    BORDER_PALETTE,
    FILL_PALETTE,
    DrawOverlay,
    SetBorderColor,
    SetColor,
)
from CIEComparator.Visualization.Raster import RasterizeBackgroundImage

WIDTH, HEIGHT = 240, 200
NOTHING = DisplayToggles(fill_polygons=False, show_points=False, show_borders=False,
                         show_centroids=False, show_wavelengths=False)


def _render(point_sets, toggles):
    window = ComputeZoomWindow(FlattenPoints(point_sets))
    transform = ChromaticityTransform(window, WIDTH, HEIGHT)
    background = RasterizeBackgroundImage(window, WIDTH, HEIGHT)
    image = DrawOverlay(background.copy(), point_sets, transform, toggles, Classifier())
    return background, image, transform


def _near(a, b, tol=2):
    return all(abs(int(p) - int(q)) <= tol for p, q in zip(a, b))


class TestPalette:
    """Test the per set colors."""

    def test_six_entries(self):
        """Both palettes have six entries."""
        assert len(FILL_PALETTE) == 6
        assert len(BORDER_PALETTE) == 6

    def test_cycles(self):
        """The seventh set reuses the first color."""
        assert SetColor(6) == SetColor(0)
        assert SetBorderColor(7) == SetBorderColor(1)
        assert SetColor(0) == (0, 0, 255)


class TestDrawOverlay:
    """Test the drawn layers."""

    def setup_method(self):
        self.triangle = PointSet.from_pairs("T", [(0.30, 0.30), (0.40, 0.30), (0.35, 0.40)])

    def test_nothing_enabled_keeps_background(self):
        """With every layer off only the frame changes the background."""
        background, image, transform = _render([self.triangle], NOTHING)
        cx, cy = transform.to_pixel(0.35, 0.33)
        assert image.getpixel((cx, cy)) == background.getpixel((cx, cy))
        assert image.getpixel((0, 0))[:3] == (0, 0, 0)
        assert image.getpixel((WIDTH - 1, HEIGHT - 1))[:3] == (0, 0, 0)

    def test_point_markers(self):
        """Point centers are painted in the set color."""
        toggles = DisplayToggles(False, True, False, False, False)
        _, image, transform = _render([self.triangle], toggles)
        for p in self.triangle.points:
            assert image.getpixel(transform.point_to_pixel(p))[:3] == SetColor(0)

    def test_second_set_uses_second_color(self):
        """Sets are colored by their position."""
        other = PointSet.from_pairs("U", [(0.50, 0.35)])
        toggles = DisplayToggles(False, True, False, False, False)
        _, image, transform = _render([self.triangle, other], toggles)
        assert image.getpixel(transform.to_pixel(0.50, 0.35))[:3] == SetColor(1)

    def test_fill_blends_at_thirty_percent(self):
        """Polygon fill is composited at 30% alpha."""
        toggles = DisplayToggles(True, False, False, False, False)
        background, image, transform = _render([self.triangle], toggles)
        px = transform.to_pixel(0.35, 0.33)
        bg = np.array(background.getpixel(px)[:3], dtype=float)
        expected = 0.7 * bg + 0.3 * np.array(SetColor(0), dtype=float)
        assert _near(image.getpixel(px)[:3], expected)

    def test_fill_needs_three_points(self):
        """Two point sets are never filled."""
        pair = PointSet.from_pairs("P", [(0.30, 0.30), (0.40, 0.40)])
        toggles = DisplayToggles(True, False, False, False, False)
        background, image, transform = _render([pair], toggles)
        px = transform.to_pixel(0.37, 0.32)
        assert image.getpixel(px) == background.getpixel(px)

    def test_border_between_two_points(self):
        """Two points get an open border in the border color."""
        pair = PointSet.from_pairs("P", [(0.30, 0.35), (0.40, 0.35)])
        toggles = DisplayToggles(False, False, True, False, False)
        _, image, transform = _render([pair], toggles)
        mx, my = transform.to_pixel(0.35, 0.35)
        column = [image.getpixel((mx, my + d))[:3] for d in (-1, 0, 1)]
        assert ImageColor.getrgb("darkblue") in column

    def test_centroid_marker(self):
        """The centroid cross is centered on the mean coordinate."""
        toggles = DisplayToggles(False, False, False, True, False)
        _, image, transform = _render([self.triangle], toggles)
        cx, cy = transform.point_to_pixel(Centroid(self.triangle.points))
        assert image.getpixel((cx, cy))[:3] == SetColor(0)

    def test_labels_draw_text(self):
        """Wavelength labels add dark text pixels next to the point."""
        single = PointSet.from_pairs("S", [(0.40, 0.40)])
        without = DisplayToggles(False, True, False, False, False)
        with_labels = DisplayToggles(False, True, False, False, True)
        _, plain, transform = _render([single], without)
        _, labeled, _ = _render([single], with_labels)
        cx, cy = transform.to_pixel(0.40, 0.40)
        box = (cx + 8, cy - 16, min(cx + 60, WIDTH - 2), min(cy + 14, HEIGHT - 2))
        assert np.asarray(plain.crop(box)).tolist() != np.asarray(labeled.crop(box)).tolist()

    def test_empty_set_is_skipped(self):
        """Sets without points draw nothing and raise nothing."""
        _, image, _ = _render([PointSet("empty"), self.triangle], DisplayToggles())
        assert image.size == (WIDTH, HEIGHT)

    def test_requires_rgba(self):
        """Drawing on a non RGBA raster is rejected."""
        window = ComputeZoomWindow([])
        with pytest.raises(ValueError):
            DrawOverlay(Image.new("RGB", (10, 10)), [], ChromaticityTransform(window, 10, 10),
                        DisplayToggles(), Classifier())
