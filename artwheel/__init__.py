"""
Artwheel - Artist Color Wheel Engine
====================================

Color-science and geometry core of a procedural artist's color wheel: probe
any point and get a full description of its color, harmony sets, tints and
shades, and a CSS-exportable palette.

Key Features
------------
- Deterministic wheel geometry (angle clockwise from the top, radial profile)
- RGB, HSL, HSV, HWB, CMYK, linear RGB, CIE XYZ/xyY/u'v'/Lab/LCH, OKLab/OKLCH
- ΔE76, WCAG contrast and McCamy CCT
- Harmony angle sets and linear-light tint/shade ladders
- Vectorized numpy raster synthesis, parallel across row bands

Quick Start
-----------
>>> from artwheel import DEFAULT_MODEL, probe_at, harmony_angles, tint_shade_ladder
>>>
>>> x, y = DEFAULT_MODEL.point_at(120, 600)
>>> sample = probe_at(x, y)
>>> sample.hue_label
'Yellow-Green'
>>> [a.angle for a in harmony_angles(sample.theta, "Triadic")]  # doctest: +SKIP
[120.0, 240.0, 0.0]
>>> ladder = tint_shade_ladder(sample.rgb, steps=5)

Modules
-------
- conversions: Color space conversion functions
- wheel: Wheel geometry, radial profile and bitmap synthesis
- harmonies: Harmony angle calculator
- descriptors: Hue names, temperature, value/chroma proxies
- tints: Tint/shade ladder
- palette: Swatch palette and CSS export
- probe: Sample aggregate for a probed point
"""

from .types.color_types import (
    RGB, LinearRGB, HSL, HSV, HWB, CMYK,
    XYZ, XyY, UVPrime, Lab, LCH, OKLab, OKLCH,
    ColorSpace,
)
from .utils.num_utils import clamp01, deg_norm, lerp, fmt, rgb_to_hex, css_rgb
from .conversions import (
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_cmyk,
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_linear_rgb,
    mix_linear_rgb,
    rgb_to_xyz_d65,
    xyz_to_xyy,
    xyz_to_uv_prime,
    xyz_to_lab_d65,
    lab_to_lch,
    delta_e76,
    rgb_to_oklab,
    oklab_to_oklch,
    relative_luminance,
    contrast_ratio,
    cct_mccamy,
    convert,
)
from .wheel import (
    WheelModel,
    DEFAULT_MODEL,
    WheelBitmap,
    render_wheel_bitmap,
    color_at,
    wheel_color_at,
)
from .harmonies import HarmonyType, HarmonyAngle, HARMONY_TYPES, harmony_angles
from .descriptors import Temperature, hue_name, temperature_label, value_proxy, chroma_proxy
from .tints import TintShadeStep, tint_shade_ladder
from .probe import Sample, Complement, probe, probe_at, state_label
from .palette import Palette, PaletteSwatch, PALETTE_CAPACITY, export_css

__version__ = "1.0.0"

__all__ = [
    # value objects
    "RGB",
    "LinearRGB",
    "HSL",
    "HSV",
    "HWB",
    "CMYK",
    "XYZ",
    "XyY",
    "UVPrime",
    "Lab",
    "LCH",
    "OKLab",
    "OKLCH",
    "ColorSpace",
    # math primitives
    "clamp01",
    "deg_norm",
    "lerp",
    "fmt",
    "rgb_to_hex",
    "css_rgb",
    # conversions
    "hsl_to_rgb",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_hwb",
    "rgb_to_cmyk",
    "srgb_to_linear",
    "linear_to_srgb",
    "rgb_to_linear_rgb",
    "mix_linear_rgb",
    "rgb_to_xyz_d65",
    "xyz_to_xyy",
    "xyz_to_uv_prime",
    "xyz_to_lab_d65",
    "lab_to_lch",
    "delta_e76",
    "rgb_to_oklab",
    "oklab_to_oklch",
    "relative_luminance",
    "contrast_ratio",
    "cct_mccamy",
    "convert",
    # wheel
    "WheelModel",
    "DEFAULT_MODEL",
    "WheelBitmap",
    "render_wheel_bitmap",
    "color_at",
    "wheel_color_at",
    # harmonies, descriptors, tints
    "HarmonyType",
    "HarmonyAngle",
    "HARMONY_TYPES",
    "harmony_angles",
    "Temperature",
    "hue_name",
    "temperature_label",
    "value_proxy",
    "chroma_proxy",
    "TintShadeStep",
    "tint_shade_ladder",
    # probing and palette
    "Sample",
    "Complement",
    "probe",
    "probe_at",
    "state_label",
    "Palette",
    "PaletteSwatch",
    "PALETTE_CAPACITY",
    "export_css",
]
