import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSL
from .to_hsv import unit_rgb_hue, np_unit_rgb_hue, _np_unit_channels

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert 8-bit RGB to HSL.

    Saturation is 0 for achromatic colors (max == min), and so is the hue.

    Args:
        r, g, b: Channels in [0, 255], fractional values allowed

    Returns:
        HSL: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2
    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * lightness - 1))
    return HSL(unit_rgb_hue(r, g, b), saturation, lightness)

def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert 8-bit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = _np_unit_channels(r, g, b)
    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask_delta = delta > 0
    saturation[mask_delta] = delta[mask_delta] / (1 - np.abs(2 * lightness[mask_delta] - 1))

    return np.stack([np_unit_rgb_hue(r, g, b), saturation, lightness], axis=-1)
