import math

from ..utils.num_utils import clamp01

def relative_luminance(Y: float) -> float:
    """WCAG relative luminance: the XYZ Y of sRGB is already linear, only clamp it."""
    return clamp01(Y)

def contrast_ratio(l1: float, l2: float) -> float:
    """WCAG 2 contrast ratio, symmetric in its arguments, from 1 up to 21."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)

def cct_mccamy(x: float, y: float) -> float:
    """
    Correlated color temperature in kelvin (McCamy, 1992).

    Returns NaN when the chromaticity itself is undefined.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return math.nan
    if y == 0.1858:
        return math.nan
    n = (x - 0.332) / (0.1858 - y)
    return 449 * n ** 3 + 3525 * n ** 2 + 6823.3 * n + 5520.33
