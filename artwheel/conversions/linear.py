"""sRGB transfer functions and mixing in linear light."""

from ..types.color_types import RGB, LinearRGB
from ..utils.num_utils import clamp01, lerp, round_half_up

DECODE_BREAKPOINT = 0.04045
ENCODE_BREAKPOINT = 0.0031308
GAMMA = 2.4

def srgb_to_linear(u8: float) -> float:
    """Decode an sRGB channel (0-255) to linear light in [0, 1]."""
    u = u8 / 255
    if u <= DECODE_BREAKPOINT:
        return u / 12.92
    return ((u + 0.055) / 1.055) ** GAMMA

def linear_to_srgb(value: float) -> int:
    """Encode linear light to an sRGB channel, rounded to the nearest integer in [0, 255]."""
    if value <= ENCODE_BREAKPOINT:
        u = 12.92 * value
    else:
        u = 1.055 * value ** (1 / GAMMA) - 0.055
    return round_half_up(clamp01(u) * 255)

def rgb_to_linear_rgb(r: float, g: float, b: float) -> LinearRGB:
    return LinearRGB(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))

def mix_linear_rgb(a: RGB, b: RGB, t: float) -> RGB:
    """
    Mix two colors as light adds, not as bytes average.

    Both colors are decoded to linear RGB, interpolated per channel by ``t``
    and re-encoded. Black and white at ``t=0.5`` give 188, not 128.

    Args:
        a: Color at t = 0
        b: Color at t = 1
        t: Mix fraction, not clamped

    Returns:
        RGB: 8-bit channels
    """
    la = rgb_to_linear_rgb(*a)
    lb = rgb_to_linear_rgb(*b)
    return RGB(*(linear_to_srgb(lerp(x, y, t)) for x, y in zip(la, lb)))
