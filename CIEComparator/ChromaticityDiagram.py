import logging
import time
import warnings
from typing import List, Optional, Sequence, Tuple

import pandas as pd
from PIL import Image

from .ColorMath.Classification import Classifier
from .ColorMath.Geometry import ChromaticityTransform, ComputeZoomWindow, FlattenPoints
from .Observer.SpectralLocus import SpectralLocus, DEFAULT_LOCUS
from .Utils.CustomTypes import (
    ChromaticityPoint, Classification, ClassifierConfig, DisplayToggles, PointReport, PointSet,
    RenderConfig, WavelengthRangeSummary, ZoomWindow
)
from .Utils.ImageUtils import ExportPNG
from .Utils.IO import ExportClassificationsCSV, BuildClassificationTable
from .Visualization.Overlay import DrawOverlay
from .Visualization.Raster import BackgroundFactory, RasterizeBackgroundImage

logger = logging.getLogger(__name__)


def DefaultPolygon(index: int, n_points: int) -> Tuple[ChromaticityPoint, ...]:
    """Seed points for a new set: a short diagonal run near the red corner, offset per set."""
    return tuple(ChromaticityPoint(0.68 + index * 0.01 + i * 0.005, 0.30 - index * 0.01 - i * 0.005)
                 for i in range(n_points))


def DefaultPointSets(count: int = 2, points_per_set: int = 4) -> List[PointSet]:
    return [PointSet(f"LED Set {i + 1}", DefaultPolygon(i, points_per_set)) for i in range(count)]


class ChromaticityDiagram:
    """
    Renders point sets over a zoomed CIE 1931 chromaticity background and classifies them.

    Each render runs the full pipeline synchronously: zoom window from every point,
    background raster for that window, then the vector overlay. Nothing is kept between
    renders except the optional background cache.
    """

    def __init__(self, render_config: RenderConfig = RenderConfig(),
                 classifier_config: ClassifierConfig = ClassifierConfig(),
                 locus: SpectralLocus = DEFAULT_LOCUS, cache_backgrounds: bool = False):
        self.render_config: RenderConfig = render_config
        self.classifier: Classifier = Classifier(classifier_config, locus)
        self.background_factory: Optional[BackgroundFactory] = BackgroundFactory() if cache_backgrounds else None

    def zoom_window(self, point_sets: Sequence[PointSet]) -> ZoomWindow:
        cfg = self.render_config
        return ComputeZoomWindow(FlattenPoints(point_sets), cfg.padding, cfg.fallback_margin, cfg.epsilon)

    def transform(self, point_sets: Sequence[PointSet]) -> ChromaticityTransform:
        return ChromaticityTransform(self.zoom_window(point_sets), self.render_config.width, self.render_config.height)

    def background(self, window: ZoomWindow) -> Image.Image:
        width, height = self.render_config.width, self.render_config.height
        if self.background_factory is not None:
            return self.background_factory.get_object(window, width, height)
        return RasterizeBackgroundImage(window, width, height)

    def render(self, point_sets: Sequence[PointSet], toggles: DisplayToggles = DisplayToggles()) -> Image.Image:
        """Render the diagram for the given sets.

        Args:
            point_sets (Sequence[PointSet]): sets in display order, not modified
            toggles (DisplayToggles): overlay layers to draw

        Returns:
            Image.Image: RGBA image of render_config.width x render_config.height
        """
        start_time = time.time()
        outside = [p for p in FlattenPoints(point_sets) if not p.in_diagram()]
        if outside:
            warnings.warn(f"{len(outside)} points lie outside the diagram domain; the view is clamped to it.",
                          stacklevel=2)

        transform = self.transform(point_sets)
        image = self.background(transform.window)
        DrawOverlay(image, point_sets, transform, toggles, self.classifier)
        logger.debug(f"Rendered {len(point_sets)} sets in {time.time() - start_time:.3f} seconds")
        return image

    def classify(self, point_sets: Sequence[PointSet]) -> List[PointReport]:
        return self.classifier.report_all(point_sets)

    def centroids(self, point_sets: Sequence[PointSet]) -> List[Tuple[PointSet, ChromaticityPoint, Classification, float]]:
        """Centroid classification of every non-empty set, in set order."""
        results = []
        for point_set in point_sets:
            if len(point_set.points) == 0:
                continue
            centroid, classification, purity = self.classifier.centroid_report(point_set)
            results.append((point_set, centroid, classification, purity))
        return results

    def wavelength_ranges(self, point_sets: Sequence[PointSet]) -> List[WavelengthRangeSummary]:
        return [self.classifier.wavelength_range(s) for s in point_sets]

    def classification_table(self, point_sets: Sequence[PointSet]) -> pd.DataFrame:
        return BuildClassificationTable(self.classify(point_sets))

    def export_csv(self, point_sets: Sequence[PointSet], filename: str) -> pd.DataFrame:
        return ExportClassificationsCSV(self.classify(point_sets), filename)

    def export_png(self, image: Image.Image, filename: str) -> None:
        ExportPNG(image, filename)
