from .Conversion import xyY_to_XYZ, XYZ_to_sRGB, ToDisplayColor, ClampTo8Bit
from .Geometry import ComputeZoomWindow, Centroid, ChromaticityTransform
