"""OKLab / OKLCH (Björn Ottosson, 2020) from 8-bit sRGB."""
import math

from ..types.color_types import OKLab, OKLCH
from .cie import ab_to_chroma_hue
from .linear import srgb_to_linear

LINEAR_SRGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

def _apply(matrix, vector) -> tuple[float, ...]:
    return tuple(sum(m * v for m, v in zip(row, vector)) for row in matrix)

def rgb_to_oklab(r: float, g: float, b: float) -> OKLab:
    linear = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    lms = _apply(LINEAR_SRGB_TO_LMS, linear)
    lms_ = tuple(math.cbrt(c) for c in lms)
    return OKLab(*_apply(LMS_TO_OKLAB, lms_))

def oklab_to_oklch(oklab: OKLab) -> OKLCH:
    C, h = ab_to_chroma_hue(oklab.a, oklab.b)
    return OKLCH(oklab.L, C, h)
