"""
Immutable value objects for every color space the library produces.

All of them are ``NamedTuple`` subclasses: they unpack like the plain tuples
returned by the conversion functions and expose named channels.
"""
from __future__ import annotations
from typing import Literal, NamedTuple


class RGB(NamedTuple):
    """8-bit range channels, possibly fractional before rounding."""
    r: float
    g: float
    b: float


class LinearRGB(NamedTuple):
    """Gamma-decoded channels in [0, 1]."""
    r: float
    g: float
    b: float


class HSL(NamedTuple):
    h: float  # degrees [0, 360)
    s: float
    l: float


class HSV(NamedTuple):
    h: float
    s: float
    v: float


class HWB(NamedTuple):
    h: float
    w: float  # whiteness
    b: float  # blackness


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float


class XYZ(NamedTuple):
    """CIE XYZ under D65, Y = 1 for reference white."""
    X: float
    Y: float
    Z: float


class XyY(NamedTuple):
    """Chromaticity; x and y are NaN for black."""
    x: float
    y: float
    Y: float


class UVPrime(NamedTuple):
    """CIE 1976 u'v'; NaN for black."""
    u: float
    v: float


class Lab(NamedTuple):
    L: float
    a: float
    b: float


class LCH(NamedTuple):
    L: float
    C: float
    h: float


class OKLab(NamedTuple):
    L: float
    a: float
    b: float


class OKLCH(NamedTuple):
    L: float
    C: float
    h: float


ColorSpace = Literal[
    "hsl", "hsv", "hwb", "cmyk",
    "linear", "xyz", "xyy", "uv",
    "lab", "lch", "oklab", "oklch",
]

WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)
