from .color_types import (
    RGB, LinearRGB, HSL, HSV, HWB, CMYK,
    XYZ, XyY, UVPrime, Lab, LCH, OKLab, OKLCH,
    ColorSpace, WHITE, BLACK,
)

__all__ = [
    "RGB", "LinearRGB", "HSL", "HSV", "HWB", "CMYK",
    "XYZ", "XyY", "UVPrime", "Lab", "LCH", "OKLab", "OKLCH",
    "ColorSpace", "WHITE", "BLACK",
]
