from typing import Tuple, Union, Optional

from dataclasses import dataclass, field


# Non-spectral ("purple line") marker for Classification.wavelength
NON_SPECTRAL = "non-spectral"

# Bounds of the drawable diagram, not physical color limits
DIAGRAM_BOUNDS: Tuple[float, float, float, float] = (0.0, 0.8, 0.0, 0.9)

DEFAULT_THRESHOLD: float = 0.06
DEFAULT_REFERENCE_WHITE: Tuple[float, float] = (0.3333, 0.3333)


@dataclass(frozen=True)
class ChromaticityPoint:
    """
    A CIE 1931 (x, y) chromaticity coordinate.
        x (float): x chromaticity, diagram domain [0, 0.8]
        y (float): y chromaticity, diagram domain [0, 0.9]
    """
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def in_diagram(self) -> bool:
        x_min, x_max, y_min, y_max = DIAGRAM_BOUNDS
        return x_min <= self.x <= x_max and y_min <= self.y <= y_max


@dataclass(frozen=True)
class PointSet:
    """
    A named, ordered set of chromaticity points. Index 0 is displayed as "P1".
        name (str): The display name of the set.
        points (Tuple[ChromaticityPoint, ...]): The points in display order.
    """
    name: str
    points: Tuple[ChromaticityPoint, ...] = ()

    @staticmethod
    def from_pairs(name: str, pairs) -> 'PointSet':
        return PointSet(name, tuple(ChromaticityPoint(float(x), float(y)) for x, y in pairs))

    @staticmethod
    def point_label(index: int) -> str:
        return f"P{index + 1}"

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class SpectralLocusSample:
    wavelength: int
    x: float
    y: float

    @property
    def coordinate(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class LocusMatch:
    """
    Nearest spectral locus sample to a query coordinate.
        sample (SpectralLocusSample): the closest table sample
        distance (float): Euclidean distance in xy from the query to the sample
    """
    sample: SpectralLocusSample
    distance: float

    @property
    def wavelength(self) -> int:
        return self.sample.wavelength

    @property
    def coordinate(self) -> Tuple[float, float]:
        return self.sample.coordinate


@dataclass(frozen=True)
class Classification:
    """
    Dominant wavelength classification of one chromaticity coordinate.
        wavelength (int | str): matched wavelength in nm, or NON_SPECTRAL
        is_complementary (bool): True when the coordinate is in the purple region
        nearest_sample (SpectralLocusSample): closest locus sample
        distance_to_locus (float): distance to nearest_sample
    """
    wavelength: Union[int, str]
    is_complementary: bool
    nearest_sample: SpectralLocusSample
    distance_to_locus: float

    @property
    def is_spectral(self) -> bool:
        return self.wavelength != NON_SPECTRAL


@dataclass(frozen=True)
class PointReport:
    """
    Classification of one point within a set, as exported row by row.
    """
    set_name: str
    point_label: str
    x: float
    y: float
    classification: Classification
    purity: float


@dataclass(frozen=True)
class ZoomWindow:
    """
    Rectangle in chromaticity space. Always x_min < x_max and y_min < y_max.
    """
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.x_max, self.y_min, self.y_max)


@dataclass(frozen=True)
class DisplayToggles:
    """
    Which overlay layers are drawn on top of the background.
        fill_polygons (bool): 30% alpha polygon fill for sets with >= 3 points
        show_points (bool): point markers
        show_borders (bool): polygon outline for sets with >= 2 points
        show_centroids (bool): centroid marker per set
        show_wavelengths (bool): wavelength / purity text labels
    """
    fill_polygons: bool = False
    show_points: bool = True
    show_borders: bool = True
    show_centroids: bool = True
    show_wavelengths: bool = True


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Tunable parameters of the wavelength / purity classifier.
        threshold (float): max distance to the locus for a point to count as spectral
        reference_white (Tuple[float, float]): white point used for purity
    """
    threshold: float = DEFAULT_THRESHOLD
    reference_white: Tuple[float, float] = DEFAULT_REFERENCE_WHITE

    def __post_init__(self):
        if self.threshold < 0:
            raise ValueError(f"Classification threshold must be non-negative, got {self.threshold}")


def ValidateZoomSettings(padding: float, fallback_margin: float, epsilon: float) -> None:
    """Reject auto-zoom constants that could give an empty or inverted window."""
    if padding < 0:
        raise ValueError(f"Zoom padding must be non-negative, got {padding}")
    if epsilon <= 0:
        raise ValueError(f"Zoom epsilon must be positive, got {epsilon}")
    if fallback_margin <= epsilon:
        raise ValueError(f"Fallback margin ({fallback_margin}) must exceed epsilon ({epsilon})")


@dataclass(frozen=True)
class RenderConfig:
    """
    Raster dimensions and auto-zoom constants.
    """
    width: int = 900
    height: int = 720
    padding: float = 0.02
    fallback_margin: float = 0.01
    epsilon: float = 1e-6

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(f"Raster must be at least 2x2 pixels, got {self.width}x{self.height}")
        ValidateZoomSettings(self.padding, self.fallback_margin, self.epsilon)


@dataclass(frozen=True)
class WavelengthRangeSummary:
    """
    Min / max dominant wavelength over the spectral points of a set.
    minimum and maximum are None when the set has no spectral points.
    """
    set_name: str
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    spectral_count: int = field(default=0)

    @property
    def span(self) -> Optional[int]:
        if self.minimum is None or self.maximum is None:
            return None
        return self.maximum - self.minimum

    def describe(self) -> str:
        if self.minimum is None:
            return "Purple / no spectral points"
        return f"Min {self.minimum} nm, Max {self.maximum} nm, Range {self.span:.1f} nm"
