import math

import numpy as np
from numpy import ndarray as NDArray

NON_FINITE_SENTINEL = "—"


def clamp01(x: float) -> float:
    """Clamp a value to the inclusive range ``[0, 1]``."""
    return min(1.0, max(0.0, x))


def deg_norm(d: float) -> float:
    """Normalize degrees to ``[0, 360)``, negatives included."""
    return ((d % 360.0) + 360.0) % 360.0


def np_deg_norm(d: NDArray) -> NDArray:
    """Vectorized: normalize degrees to ``[0, 360)``."""
    return ((np.asarray(d, dtype=float) % 360.0) + 360.0) % 360.0


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation, unclamped in ``t``."""
    return a + (b - a) * t


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def np_round_half_up(x: NDArray) -> NDArray:
    return np.floor(np.asarray(x, dtype=float) + 0.5)


def fmt(n: float, decimals: int = 2) -> str:
    """Fixed-point string, or a dash when ``n`` is NaN or infinite."""
    if not math.isfinite(n):
        return NON_FINITE_SENTINEL
    return f"{n:.{decimals}f}"


def _channel_byte(n: float) -> int:
    return min(255, max(0, round_half_up(n)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Lowercase ``#rrggbb`` from 0-255 channels (rounded, clamped)."""
    return "#" + "".join(f"{_channel_byte(c):02x}" for c in (r, g, b))


def css_rgb(r: float, g: float, b: float) -> str:
    """CSS Color 4 space-separated form, e.g. ``rgb(255 128 0)``."""
    return f"rgb({_channel_byte(r)} {_channel_byte(g)} {_channel_byte(b)})"
