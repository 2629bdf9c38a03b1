from ..types.color_types import CMYK
from ..utils.num_utils import clamp01

BLACK_EPSILON = 1e-12

def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """
    Convert 8-bit RGB to CMYK, every component in [0, 1].

    Pure black short-circuits to (0, 0, 0, 1) so that ``1 - k`` is never divided by.
    """
    rr, gg, bb = r / 255, g / 255, b / 255
    k = 1 - max(rr, gg, bb)

    if k >= 1 - BLACK_EPSILON:
        return CMYK(0.0, 0.0, 0.0, 1.0)

    c = (1 - rr - k) / (1 - k)
    m = (1 - gg - k) / (1 - k)
    y = (1 - bb - k) / (1 - k)
    return CMYK(clamp01(c), clamp01(m), clamp01(y), clamp01(k))
