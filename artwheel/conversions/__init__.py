"""
Artwheel Color Space Conversions
================================

Pure, stateless conversions from 8-bit sRGB to every space a wheel probe
reports, with scalar functions for single colors and vectorized numpy
functions for rasters.

Conversion Functions
--------------------

HSL / HSV → RGB:
    hsl_to_rgb(h, s, l), hsl_to_unit_rgb(h, s, l), np_hsl_to_rgb(h, s, l)
    hsv_to_rgb(h, s, v), hsv_to_unit_rgb(h, s, v), np_hsv_to_rgb(h, s, v)

RGB → cylindrical / print:
    rgb_to_hsl, np_rgb_to_hsl, rgb_to_hsv, np_rgb_to_hsv, rgb_to_hwb, rgb_to_cmyk

Linear light:
    srgb_to_linear(u8), linear_to_srgb(value), rgb_to_linear_rgb(r, g, b)
    mix_linear_rgb(a, b, t)

CIE (D65):
    rgb_to_xyz_d65 → xyz_to_xyy / xyz_to_uv_prime / xyz_to_lab_d65 → lab_to_lch
    delta_e76(lab1, lab2)

OKLab:
    rgb_to_oklab → oklab_to_oklch

Accessibility:
    relative_luminance(Y), contrast_ratio(l1, l2), cct_mccamy(x, y)

High-Level API
--------------
    convert(color, to_space)
        Dispatch an 8-bit RGB triple to any supported space by name

Degenerate Values
-----------------
Chromaticities (xyY x/y, u'v') and CCT are NaN for black instead of raising.
Hue is 0 for achromatic colors.

Examples
--------
>>> from artwheel.conversions import rgb_to_hsl, hsl_to_rgb, convert
>>> hsl_to_rgb(120, 1, 0.5)
RGB(r=0, g=255, b=0)
>>> rgb_to_hsl(255, 0, 0)
HSL(h=0.0, s=1.0, l=0.5)
>>> convert((255, 255, 255), "lab").L  # doctest: +ELLIPSIS
100.0...
"""

# HSL / HSV → RGB
from .to_rgb import (
    hsl_to_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_rgb,
    hsv_to_rgb,
    hsv_to_unit_rgb,
    np_hsv_to_rgb,
)

# RGB → HSL / HSV / HWB / CMYK
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_rgb_to_hsv, rgb_to_hwb
from .to_cmyk import rgb_to_cmyk

# Linear light
from .linear import srgb_to_linear, linear_to_srgb, rgb_to_linear_rgb, mix_linear_rgb

# CIE
from .cie import (
    rgb_to_xyz_d65,
    xyz_to_xyy,
    xyz_to_uv_prime,
    xyz_to_lab_d65,
    lab_to_lch,
    delta_e76,
    D65_WHITE,
)

# OKLab
from .oklab import rgb_to_oklab, oklab_to_oklch

# Accessibility
from .accessibility import relative_luminance, contrast_ratio, cct_mccamy

# High-level API
from .wrapper import convert

__all__ = [
    'hsl_to_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_rgb',
    'hsv_to_rgb',
    'hsv_to_unit_rgb',
    'np_hsv_to_rgb',

    'rgb_to_hsl',
    'np_rgb_to_hsl',
    'rgb_to_hsv',
    'np_rgb_to_hsv',
    'rgb_to_hwb',
    'rgb_to_cmyk',

    'srgb_to_linear',
    'linear_to_srgb',
    'rgb_to_linear_rgb',
    'mix_linear_rgb',

    'rgb_to_xyz_d65',
    'xyz_to_xyy',
    'xyz_to_uv_prime',
    'xyz_to_lab_d65',
    'lab_to_lch',
    'delta_e76',
    'D65_WHITE',

    'rgb_to_oklab',
    'oklab_to_oklch',

    'relative_luminance',
    'contrast_ratio',
    'cct_mccamy',

    'convert',
]
