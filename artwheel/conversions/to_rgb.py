import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB
from ..utils.num_utils import deg_norm, np_deg_norm, round_half_up, np_round_half_up

## Shared sector construction

def _sector_channels(hue: float, chroma: float, m: float) -> tuple[float, float, float]:
    """Place chroma and the secondary component in the RGB slots of a 60° hue sector."""
    hh = deg_norm(hue) / 60
    x = chroma * (1 - abs((hh % 2) - 1))

    if hh < 1:
        r1, g1, b1 = chroma, x, 0.0
    elif hh < 2:
        r1, g1, b1 = x, chroma, 0.0
    elif hh < 3:
        r1, g1, b1 = 0.0, chroma, x
    elif hh < 4:
        r1, g1, b1 = 0.0, x, chroma
    elif hh < 5:
        r1, g1, b1 = x, 0.0, chroma
    else:
        r1, g1, b1 = chroma, 0.0, x

    return r1 + m, g1 + m, b1 + m

def _np_sector_channels(hue: NDArray, chroma: NDArray, m: NDArray) -> NDArray:
    hh = np_deg_norm(hue) / 60
    x = chroma * (1 - np.abs((hh % 2) - 1))
    zeros = np.zeros_like(chroma)

    sector = np.floor(hh).astype(int)
    masks = [sector == 0, sector == 1, sector == 2, sector == 3, sector == 4]

    # sector 5 is the default branch
    r1 = np.select(masks, [chroma, x, zeros, zeros, x], default=chroma)
    g1 = np.select(masks, [x, chroma, chroma, x, zeros], default=zeros)
    b1 = np.select(masks, [zeros, zeros, x, chroma, chroma], default=x)

    return np.stack([r1 + m, g1 + m, b1 + m], axis=-1)

def _to_bytes(unit: tuple[float, float, float]) -> RGB:
    return RGB(*(min(255, max(0, round_half_up(c * 255))) for c in unit))

def _np_to_bytes(unit: NDArray) -> NDArray:
    return np.clip(np_round_half_up(unit * 255), 0, 255).astype(np.uint8)

def _broadcast(*arrays) -> list[NDArray]:
    arrays = [np.asarray(a, dtype=float) for a in arrays]
    shape = np.broadcast(*arrays).shape
    return [np.broadcast_to(a, shape) for a in arrays]

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unrounded RGB.

    Args:
        h: Hue in degrees, any real (normalized internally)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    return _sector_channels(h, chroma, l - chroma / 2)

def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL to 8-bit RGB, rounded half-up and clamped to [0, 255]."""
    return _to_bytes(hsl_to_unit_rgb(h, s, l))

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to 8-bit RGB.

    Produces the same bytes as :func:`hsl_to_rgb` element by element.

    Returns:
        rgb: uint8 array of shape (..., 3)
    """
    h, s, l = _broadcast(h, s, l)
    chroma = (1 - np.abs(2 * l - 1)) * s
    return _np_to_bytes(_np_sector_channels(h, chroma, l - chroma / 2))

## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV (hue in degrees, s and v in [0, 1]) to RGB in [0, 1]."""
    chroma = v * s
    return _sector_channels(h, chroma, v - chroma)

def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    return _to_bytes(hsv_to_unit_rgb(h, s, v))

def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to 8-bit RGB, shape (..., 3)."""
    h, s, v = _broadcast(h, s, v)
    chroma = v * s
    return _np_to_bytes(_np_sector_channels(h, chroma, v - chroma))
