"""
Wheel probing: one synchronous call turns a pixel color and its wheel
coordinates into every derived value a color inspector shows.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Optional

from .conversions import (
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_cmyk,
    rgb_to_linear_rgb,
    rgb_to_xyz_d65,
    xyz_to_xyy,
    xyz_to_uv_prime,
    xyz_to_lab_d65,
    lab_to_lch,
    rgb_to_oklab,
    oklab_to_oklch,
    delta_e76,
    relative_luminance,
    contrast_ratio,
    cct_mccamy,
)
from .descriptors import Temperature, hue_name, temperature_label, value_proxy, chroma_proxy
from .types.color_types import (
    RGB, LinearRGB, HSL, HSV, HWB, CMYK, XYZ, XyY, UVPrime, Lab, LCH, OKLab, OKLCH,
)
from .utils.num_utils import css_rgb, deg_norm, rgb_to_hex
from .wheel.geometry import DEFAULT_MODEL, WheelModel
from .wheel.profile import wheel_color_at

# (angle, radius) -> RGB
ColorLookup = Callable[[float, float], RGB]


@dataclass(frozen=True)
class Complement:
    """The point mirrored through the center at the same radius."""
    theta: float
    rgb: RGB
    hex: str
    lab: Lab
    lch: LCH
    delta_e76: float


@dataclass(frozen=True)
class Sample:
    # Wheel position
    x: float
    y: float
    theta: float
    radius: float
    f: float
    inside: bool

    # Basic color values
    rgb: RGB
    hex: str
    css_rgb: str

    # Artist descriptors
    hue_label: str
    temperature: Temperature
    value_proxy: float
    chroma_proxy: float

    # Color spaces
    hsl: HSL
    hsv: HSV
    hwb: HWB
    cmyk: CMYK
    linear_rgb: LinearRGB
    xyz: XYZ
    xyy: XyY
    uv_prime: UVPrime
    lab: Lab
    lch: LCH
    oklab: OKLab
    oklch: OKLCH

    # Accessibility and analysis
    relative_luminance: float
    contrast_white: float
    contrast_black: float
    cct: float

    complement: Optional[Complement] = None
    model: WheelModel = field(default=DEFAULT_MODEL, repr=False, compare=False)


def default_lookup(model: WheelModel = DEFAULT_MODEL) -> ColorLookup:
    """Analytic wheel colors for ``model``, white outside the band."""
    return partial(wheel_color_at, model=model)


def complement_of(theta: float, radius: float, lab: Lab, lookup: ColorLookup) -> Complement:
    comp_theta = deg_norm(theta + 180)
    rgb = RGB(*lookup(comp_theta, radius))
    comp_lab = xyz_to_lab_d65(rgb_to_xyz_d65(*rgb))
    return Complement(
        theta=comp_theta,
        rgb=rgb,
        hex=rgb_to_hex(*rgb),
        lab=comp_lab,
        lch=lab_to_lch(comp_lab),
        delta_e76=delta_e76(lab, comp_lab),
    )


def probe(
    rgb: RGB,
    x: float,
    y: float,
    model: WheelModel = DEFAULT_MODEL,
    lookup: Optional[ColorLookup] = None,
) -> Sample:
    """
    Describe a sampled wheel color.

    Args:
        rgb: The pixel color, 8-bit channels
        x, y: Wheel coordinates of the sample (continuous, not rounded)
        model: Wheel geometry the coordinates refer to
        lookup: Color source for the complement; analytic wheel colors by default

    Returns:
        Sample with every color space, descriptors and accessibility metrics.
        The complement is only computed for points inside the color band.
    """
    rgb = RGB(*rgb)
    r, g, b = rgb

    radius = model.radius(x, y)
    theta = model.theta(x, y)
    inside = model.in_band(radius)

    xyz = rgb_to_xyz_d65(r, g, b)
    xyy = xyz_to_xyy(xyz)
    lab = xyz_to_lab_d65(xyz)
    lch = lab_to_lch(lab)
    oklab = rgb_to_oklab(r, g, b)
    rel_lum = relative_luminance(xyz.Y)

    complement = None
    if inside:
        if lookup is None:
            lookup = default_lookup(model)
        complement = complement_of(theta, radius, lab, lookup)

    return Sample(
        x=x,
        y=y,
        theta=theta,
        radius=radius,
        f=model.band_fraction(radius),
        inside=inside,
        rgb=rgb,
        hex=rgb_to_hex(r, g, b),
        css_rgb=css_rgb(r, g, b),
        hue_label=hue_name(theta),
        temperature=temperature_label(theta),
        value_proxy=value_proxy(lab.L),
        chroma_proxy=chroma_proxy(lch.C),
        hsl=rgb_to_hsl(r, g, b),
        hsv=rgb_to_hsv(r, g, b),
        hwb=rgb_to_hwb(r, g, b),
        cmyk=rgb_to_cmyk(r, g, b),
        linear_rgb=rgb_to_linear_rgb(r, g, b),
        xyz=xyz,
        xyy=xyy,
        uv_prime=xyz_to_uv_prime(xyz),
        lab=lab,
        lch=lch,
        oklab=oklab,
        oklch=oklab_to_oklch(oklab),
        relative_luminance=rel_lum,
        contrast_white=contrast_ratio(1, rel_lum),
        contrast_black=contrast_ratio(rel_lum, 0),
        cct=cct_mccamy(xyy.x, xyy.y),
        complement=complement,
        model=model,
    )


def probe_at(x: float, y: float, model: WheelModel = DEFAULT_MODEL) -> Sample:
    """Probe the analytic wheel without any raster."""
    rgb = wheel_color_at(model.theta(x, y), model.radius(x, y), model)
    return probe(rgb, x, y, model=model)


def state_label(locked: bool, sample: Optional[Sample]) -> str:
    if locked:
        return 'Locked'
    if sample is not None and sample.inside:
        return 'Hover (inside wheel)'
    return 'Hover'
