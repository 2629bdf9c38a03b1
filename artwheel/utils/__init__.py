from .num_utils import (
    clamp01,
    deg_norm,
    np_deg_norm,
    lerp,
    round_half_up,
    np_round_half_up,
    fmt,
    rgb_to_hex,
    css_rgb,
)

__all__ = [
    "clamp01",
    "deg_norm",
    "np_deg_norm",
    "lerp",
    "round_half_up",
    "np_round_half_up",
    "fmt",
    "rgb_to_hex",
    "css_rgb",
]
