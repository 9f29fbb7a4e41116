from typing import Tuple
import numpy as np
import numpy.typing as npt


# Linear XYZ -> sRGB (D65) primaries, 4 significant digits
M_XYZ_TO_SRGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570]
])

SRGB_LINEAR_CUTOFF = 0.0031308


def xyY_to_XYZ(x: float, y: float, Y: float) -> Tuple[float, float, float]:
    """Convert an xyY triple to CIE XYZ.

    Args:
        x, y: chromaticity coordinates
        Y: luminance

    Returns:
        (X, Y, Z). A zero y chromaticity yields black (0, 0, 0).
    """
    if y == 0:
        return (0.0, 0.0, 0.0)
    X = (x * Y) / y
    Z = ((1 - x - y) * Y) / y
    return (X, Y, Z)


def _compand(c: float) -> float:
    c = max(0.0, c)
    if c <= SRGB_LINEAR_CUTOFF:
        return 12.92 * c
    return 1.055 * c ** (1 / 2.4) - 0.055


def XYZ_to_sRGB(X: float, Y: float, Z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to gamma companded sRGB.

    Negative linear channels are clamped to 0 before companding so out of gamut
    colors map to their nearest displayable approximation. The result is not
    clamped to [0, 1]; use ClampTo8Bit before writing pixels.
    """
    r, g, b = M_XYZ_TO_SRGB @ np.array([X, Y, Z], dtype=float)
    return (_compand(float(r)), _compand(float(g)), _compand(float(b)))


def ToDisplayColor(x: float, y: float, Y: float = 1.0) -> Tuple[float, float, float]:
    return XYZ_to_sRGB(*xyY_to_XYZ(x, y, Y))


def ChromaticityToXYZ(xs: npt.ArrayLike, ys: npt.ArrayLike, Y: float = 1.0) -> npt.NDArray:
    """
    Vectorized xyY -> XYZ for arrays of chromaticities at a fixed luminance.

    :param xs: x chromaticities, any shape
    :param ys: y chromaticities, same shape as xs
    :param Y: luminance shared by every coordinate
    :return: (..., 3) array of XYZ, rows with y == 0 are black
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    xyz = np.zeros(xs.shape + (3,))
    valid = ys != 0
    with np.errstate(divide='ignore', invalid='ignore'):
        xyz[..., 0] = np.where(valid, xs * Y / ys, 0.0)
        xyz[..., 1] = np.where(valid, Y, 0.0)
        xyz[..., 2] = np.where(valid, (1 - xs - ys) * Y / ys, 0.0)
    return xyz


def XYZArrayTosRGB(xyz: npt.NDArray) -> npt.NDArray:
    """
    Vectorized XYZ_to_sRGB over the last axis of xyz.
    """
    linear = np.clip(xyz @ M_XYZ_TO_SRGB.T, 0, None)
    srgb = np.empty_like(linear)
    low = linear <= SRGB_LINEAR_CUTOFF
    srgb[low] = 12.92 * linear[low]
    srgb[~low] = 1.055 * np.power(linear[~low], 1 / 2.4) - 0.055
    return srgb


def ClampTo8Bit(rgb: npt.ArrayLike) -> npt.NDArray:
    """
    Clamp float channels to [0, 1] and scale to uint8, rounding halves up.
    """
    rgb = np.clip(np.asarray(rgb, dtype=float), 0, 1)
    return np.floor(rgb * 255 + 0.5).astype(np.uint8)
