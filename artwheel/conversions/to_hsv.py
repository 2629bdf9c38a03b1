import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSV, HWB

def unit_rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees [0, 360) of an RGB triple in [0, 1].

    Achromatic input (max == min) has no hue; 0 is returned by convention.
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    if delta == 0:
        return 0.0
    if max_c == r:
        h = ((g - b) / delta) % 6
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h * 60

def np_unit_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_hue` with the same red > green > blue precedence."""
    max_c = np.maximum.reduce([r, g, b])
    delta = max_c - np.minimum.reduce([r, g, b])

    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = ((g[mask_r] - b[mask_r]) / delta[mask_r]) % 6
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    return hue * 60

def _np_unit_channels(r: NDArray, g: NDArray, b: NDArray) -> list[NDArray]:
    arrays = [np.asarray(c, dtype=float) / 255 for c in (r, g, b)]
    shape = np.broadcast(*arrays).shape
    return [np.broadcast_to(a, shape) for a in arrays]

## RGB to HSV conversions

def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """
    Convert 8-bit RGB to HSV.

    Args:
        r, g, b: Channels in [0, 255], fractional values allowed

    Returns:
        HSV: (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = r / 255, g / 255, b / 255
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    s = 0.0 if max_c == 0 else delta / max_c
    return HSV(unit_rgb_hue(r, g, b), s, max_c)

def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert 8-bit RGB to HSV, shape (..., 3)."""
    r, g, b = _np_unit_channels(r, g, b)
    max_c = np.maximum.reduce([r, g, b])
    delta = max_c - np.minimum.reduce([r, g, b])

    saturation = np.zeros_like(max_c)
    nonzero = max_c > 0
    saturation[nonzero] = delta[nonzero] / max_c[nonzero]

    return np.stack([np_unit_rgb_hue(r, g, b), saturation, max_c], axis=-1)

## RGB to HWB

def rgb_to_hwb(r: float, g: float, b: float) -> HWB:
    """Whiteness is the smallest channel fraction, blackness one minus the largest; hue comes from HSV."""
    hsv = rgb_to_hsv(r, g, b)
    return HWB(hsv.h, min(r, g, b) / 255, 1 - max(r, g, b) / 255)
