from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace
from .to_hsl import rgb_to_hsl
from .to_hsv import rgb_to_hsv, rgb_to_hwb
from .to_cmyk import rgb_to_cmyk
from .linear import rgb_to_linear_rgb
from .cie import rgb_to_xyz_d65, xyz_to_xyy, xyz_to_uv_prime, xyz_to_lab_d65, lab_to_lch
from .oklab import rgb_to_oklab, oklab_to_oklch

# Every target is reached from 8-bit sRGB channels
CONVERT_FROM_RGB: Dict[str, Callable[[float, float, float], Tuple[float, ...]]] = {
    "hsl": rgb_to_hsl,
    "hsv": rgb_to_hsv,
    "hwb": rgb_to_hwb,
    "cmyk": rgb_to_cmyk,
    "linear": rgb_to_linear_rgb,
    "xyz": rgb_to_xyz_d65,
    "xyy": lambda r, g, b: xyz_to_xyy(rgb_to_xyz_d65(r, g, b)),
    "uv": lambda r, g, b: xyz_to_uv_prime(rgb_to_xyz_d65(r, g, b)),
    "lab": lambda r, g, b: xyz_to_lab_d65(rgb_to_xyz_d65(r, g, b)),
    "lch": lambda r, g, b: lab_to_lch(xyz_to_lab_d65(rgb_to_xyz_d65(r, g, b))),
    "oklab": rgb_to_oklab,
    "oklch": lambda r, g, b: oklab_to_oklch(rgb_to_oklab(r, g, b)),
}

def convert(color: Tuple[float, float, float], to_space: ColorSpace) -> Tuple[float, ...]:
    """
    Convert an 8-bit RGB triple to ``to_space``.

    Args:
        color: (r, g, b) in [0, 255]
        to_space: One of the ``ColorSpace`` names, case-insensitive

    Returns:
        The named tuple of the target space

    Raises:
        ValueError: Unknown target space
    """
    key = to_space.lower()
    if key not in CONVERT_FROM_RGB:
        raise ValueError(f"Unknown space: {to_space}")
    r, g, b = color
    return CONVERT_FROM_RGB[key](r, g, b)
