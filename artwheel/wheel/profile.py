"""
Radial color profile of the wheel.

Inner rings are light tints, outer rings saturated and slightly darker, with
an extra saturation boost on the outermost 16 % of the band. The same
formulas drive the raster and point lookups.
"""
from typing import Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..conversions.to_rgb import hsl_to_rgb
from ..types.color_types import HSL, RGB, WHITE
from .geometry import DEFAULT_MODEL, WheelModel

SATURATION_EXPONENT = 1.25
LIGHTNESS_TOP = 0.92
LIGHTNESS_DROP = 0.42
LIGHTNESS_EXPONENT = 0.85

RIM_START = 0.84
RIM_SATURATION_BOOST = 0.22
RIM_LIGHTNESS_DROP = 0.06

Fraction = Union[float, NDArray]


def radial_profile(f: Fraction) -> Tuple[Fraction, Fraction]:
    """
    Saturation and lightness at band fraction ``f`` in [0, 1].

    Accepts scalars or arrays.
    """
    scalar_input = np.ndim(f) == 0
    f = np.asarray(f, dtype=float)

    s = np.clip(np.power(f, SATURATION_EXPONENT), 0.0, 1.0)
    l = np.clip(LIGHTNESS_TOP - LIGHTNESS_DROP * np.power(f, LIGHTNESS_EXPONENT), 0.0, 1.0)

    boost = np.where(f > RIM_START, (f - RIM_START) / (1 - RIM_START), 0.0)
    s2 = np.clip(s + RIM_SATURATION_BOOST * boost, 0.0, 1.0)
    l2 = np.clip(l - RIM_LIGHTNESS_DROP * boost, 0.0, 1.0)

    if scalar_input:
        return s2.item(), l2.item()
    return s2, l2


def wheel_hsl(angle: float, radius: float, model: WheelModel = DEFAULT_MODEL) -> HSL:
    """HSL of the wheel at a polar position; radii outside the band are clamped onto it."""
    s, l = radial_profile(model.band_fraction(radius))
    return HSL(angle, s, l)


def color_at(angle: float, radius: float, model: WheelModel = DEFAULT_MODEL) -> Optional[RGB]:
    """
    Analytic wheel color at (angle, radius), or None outside the color band.

    Needs no raster; a rendered bitmap holds the same bytes at the pixel center.
    """
    if not model.in_band(radius):
        return None
    return hsl_to_rgb(*wheel_hsl(angle, radius, model))


def wheel_color_at(angle: float, radius: float, model: WheelModel = DEFAULT_MODEL) -> RGB:
    """Like :func:`color_at` but white outside the band, as the raster is."""
    rgb = color_at(angle, radius, model)
    return WHITE if rgb is None else rgb


def color_at_xy(x: float, y: float, model: WheelModel = DEFAULT_MODEL) -> Optional[RGB]:
    return color_at(model.theta(x, y), model.radius(x, y), model)
