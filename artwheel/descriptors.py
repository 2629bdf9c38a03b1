"""Artist-friendly descriptors derived from wheel angle, Lab L* and LCH chroma."""
import math
from enum import Enum
from typing import Tuple

from .utils.num_utils import deg_norm

# 16 families of 22.5°, starting at red
HUE_NAMES: Tuple[str, ...] = (
    'Red',
    'Red-Orange',
    'Orange',
    'Yellow-Orange',
    'Yellow',
    'Yellow-Green',
    'Green',
    'Blue-Green',
    'Cyan',
    'Blue-Cyan',
    'Blue',
    'Blue-Violet',
    'Violet',
    'Red-Violet',
    'Magenta',
    'Rose',
)

HUE_BIN_WIDTH = 360 / len(HUE_NAMES)


class Temperature(str, Enum):
    WARM = "Warm"
    COOL = "Cool"
    NEUTRAL = "Neutral"


def hue_name(theta: float) -> str:
    """Hue family of an angle; each bin is centered on its family's canonical angle."""
    t = deg_norm(theta)
    idx = math.floor((t + HUE_BIN_WIDTH / 2) / HUE_BIN_WIDTH) % len(HUE_NAMES)
    return HUE_NAMES[idx]


def temperature_label(theta: float) -> Temperature:
    """
    Warm for reds through yellows, cool for greens through blues.

    The two ranges are not complementary: 75°-105° is carved out of warm, and
    it falls through to neutral together with 120°-150° and 285°-315°.
    """
    t = deg_norm(theta)
    warm = (t >= 315 or t < 120) and not (75 <= t < 105)
    cool = 150 <= t < 285

    if warm:
        return Temperature.WARM
    if cool:
        return Temperature.COOL
    return Temperature.NEUTRAL


def value_proxy(lab_l: float) -> float:
    """Munsell-like value on a 0-10 scale from L*."""
    return min(10.0, max(0.0, lab_l / 10))


def chroma_proxy(lch_c: float) -> float:
    return min(20.0, lch_c / 8)
