"""
Dominant wavelength and spectral purity of chromaticity coordinates.

Classification uses the nearest sample of the spectral locus table: a point within
`threshold` of the locus takes that sample's wavelength, anything farther away is
treated as non-spectral (the purple region). This approximates the proper dominant
wavelength, which would intersect the ray from the reference white through the point
with the locus, and can misclassify points far from the locus in ambiguous directions.
"""
import math
from typing import List, Optional, Sequence, Tuple, Union

from ..Observer.SpectralLocus import SpectralLocus, DEFAULT_LOCUS
from ..Utils.CustomTypes import (
    ChromaticityPoint, Classification, ClassifierConfig, PointReport, PointSet, WavelengthRangeSummary,
    NON_SPECTRAL, DEFAULT_THRESHOLD, DEFAULT_REFERENCE_WHITE
)
from .Geometry import Centroid

PURPLE_LABEL = "Purple"


def ClassifyWavelength(x: float, y: float,
                       reference_white: Tuple[float, float] = DEFAULT_REFERENCE_WHITE,
                       threshold: float = DEFAULT_THRESHOLD,
                       locus: SpectralLocus = DEFAULT_LOCUS) -> Classification:
    """Classify (x, y) as spectral (with a wavelength) or non-spectral.

    Args:
        x, y: chromaticity coordinate
        reference_white: white point, does not affect the nearest sample decision
        threshold: maximum distance to the locus for a spectral classification
        locus: table to match against

    Returns:
        Classification
    """
    match = locus.nearest(x, y)
    if match.distance <= threshold:
        return Classification(match.wavelength, False, match.sample, match.distance)
    return Classification(NON_SPECTRAL, True, match.sample, match.distance)


def PurityFromClassification(x: float, y: float, classification: Classification,
                             reference_white: Tuple[float, float] = DEFAULT_REFERENCE_WHITE) -> float:
    if classification.is_complementary:
        return 1.0
    wx, wy = reference_white
    dist_total = math.hypot(classification.nearest_sample.x - wx, classification.nearest_sample.y - wy)
    dist_sample = math.hypot(x - wx, y - wy)
    if dist_total == 0:
        return 0.0
    return min(1.0, dist_sample / dist_total)


def ClassifyPurity(x: float, y: float,
                   reference_white: Tuple[float, float] = DEFAULT_REFERENCE_WHITE,
                   threshold: float = DEFAULT_THRESHOLD,
                   locus: SpectralLocus = DEFAULT_LOCUS) -> float:
    """
    Spectral purity in [0, 1].

    Non-spectral points report 1.0. Spectral points report the distance from the
    reference white to the point over the distance from the white to the matched
    locus sample, capped at 1, and 0 when the white sits on the locus sample.
    """
    classification = ClassifyWavelength(x, y, reference_white, threshold, locus)
    return PurityFromClassification(x, y, classification, reference_white)


def FormatWavelengthLabel(classification: Classification, decimals: int = 0) -> str:
    if not classification.is_spectral:
        return PURPLE_LABEL
    return f"{classification.wavelength:.{decimals}f}nm"


def ExportWavelengthValue(classification: Classification) -> Union[int, str]:
    if not classification.is_spectral:
        return PURPLE_LABEL
    return classification.wavelength


class Classifier:
    """Classifies points and sets with a fixed configuration and locus table."""

    def __init__(self, config: ClassifierConfig = ClassifierConfig(), locus: SpectralLocus = DEFAULT_LOCUS):
        self.config = config
        self.locus = locus

    def classify(self, x: float, y: float) -> Classification:
        return ClassifyWavelength(x, y, self.config.reference_white, self.config.threshold, self.locus)

    def purity(self, x: float, y: float) -> float:
        return ClassifyPurity(x, y, self.config.reference_white, self.config.threshold, self.locus)

    def classify_with_purity(self, x: float, y: float) -> Tuple[Classification, float]:
        classification = self.classify(x, y)
        return classification, PurityFromClassification(x, y, classification, self.config.reference_white)

    def report(self, point_set: PointSet) -> List[PointReport]:
        reports: List[PointReport] = []
        for i, p in enumerate(point_set.points):
            classification, purity = self.classify_with_purity(p.x, p.y)
            reports += [PointReport(point_set.name, PointSet.point_label(i), p.x, p.y, classification, purity)]
        return reports

    def report_all(self, point_sets: Sequence[PointSet]) -> List[PointReport]:
        return [r for s in point_sets for r in self.report(s)]

    def centroid_report(self, point_set: PointSet) -> Tuple[ChromaticityPoint, Classification, float]:
        """Classify the centroid coordinate itself, not an average of the per point results.

        Args:
            point_set (PointSet): a set with at least one point

        Returns:
            Tuple[ChromaticityPoint, Classification, float]: centroid, its classification and purity
        """
        centroid = Centroid(point_set.points)
        classification, purity = self.classify_with_purity(centroid.x, centroid.y)
        return centroid, classification, purity

    def wavelength_range(self, point_set: PointSet) -> WavelengthRangeSummary:
        return WavelengthRange(point_set, self)


def WavelengthRange(point_set: PointSet, classifier: Optional[Classifier] = None) -> WavelengthRangeSummary:
    """
    Smallest and largest dominant wavelength among the spectral points of a set.
    """
    classifier = classifier or Classifier()
    wavelengths = [c.wavelength for c in (classifier.classify(p.x, p.y) for p in point_set.points)
                   if c.is_spectral]
    if len(wavelengths) == 0:
        return WavelengthRangeSummary(point_set.name)
    return WavelengthRangeSummary(point_set.name, min(wavelengths), max(wavelengths), len(wavelengths))
