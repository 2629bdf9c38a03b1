"""
CIE colorimetry under the D65 white point.

Chain: sRGB -> linear RGB -> XYZ -> xyY / u'v' / Lab -> LCH.
Chromaticity coordinates are NaN where their denominator vanishes (black).
"""
import math

from ..types.color_types import XYZ, XyY, UVPrime, Lab, LCH
from ..utils.num_utils import deg_norm
from .linear import srgb_to_linear

DEGENERATE_EPSILON = 1e-12

SRGB_TO_XYZ_D65 = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

D65_WHITE = XYZ(0.95047, 1.0, 1.08883)

LAB_DELTA = 6 / 29

def rgb_to_xyz_d65(r: float, g: float, b: float) -> XYZ:
    """Convert 8-bit sRGB to CIE XYZ (D65); white maps to Y = 1."""
    linear = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return XYZ(*(sum(m * c for m, c in zip(row, linear)) for row in SRGB_TO_XYZ_D65))

def xyz_to_xyy(xyz: XYZ) -> XyY:
    X, Y, Z = xyz
    d = X + Y + Z
    if d <= DEGENERATE_EPSILON:
        return XyY(math.nan, math.nan, Y)
    return XyY(X / d, Y / d, Y)

def xyz_to_uv_prime(xyz: XYZ) -> UVPrime:
    """CIE 1976 UCS chromaticity."""
    X, Y, Z = xyz
    d = X + 15 * Y + 3 * Z
    if d <= DEGENERATE_EPSILON:
        return UVPrime(math.nan, math.nan)
    return UVPrime(4 * X / d, 9 * Y / d)

def _f_lab(t: float) -> float:
    # linear segment below delta^3 keeps the slope finite near zero
    if t > LAB_DELTA ** 3:
        return math.cbrt(t)
    return t / (3 * LAB_DELTA ** 2) + 4 / 29

def xyz_to_lab_d65(xyz: XYZ) -> Lab:
    fx = _f_lab(xyz.X / D65_WHITE.X)
    fy = _f_lab(xyz.Y / D65_WHITE.Y)
    fz = _f_lab(xyz.Z / D65_WHITE.Z)
    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))

def ab_to_chroma_hue(a: float, b: float) -> tuple[float, float]:
    """Polar form of an opponent pair: (hypot, angle in degrees [0, 360))."""
    return math.hypot(a, b), deg_norm(math.degrees(math.atan2(b, a)))

def lab_to_lch(lab: Lab) -> LCH:
    C, h = ab_to_chroma_hue(lab.a, lab.b)
    return LCH(lab.L, C, h)

def delta_e76(lab1: Lab, lab2: Lab) -> float:
    """CIE76 color difference: Euclidean distance in Lab."""
    return math.dist(lab1, lab2)
