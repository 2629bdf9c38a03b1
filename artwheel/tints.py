from typing import List, NamedTuple

from .conversions.linear import mix_linear_rgb
from .types.color_types import RGB, WHITE, BLACK
from .utils.num_utils import rgb_to_hex

MIN_TINT_STEPS = 3
MAX_TINT_STEPS = 11
DEFAULT_TINT_STEPS = 7


class TintShadeStep(NamedTuple):
    label: str
    rgb: RGB
    hex: str


def tint_shade_ladder(base: RGB, steps: int = DEFAULT_TINT_STEPS) -> List[TintShadeStep]:
    """
    Tints from lightest to base, then shades toward black.

    ``steps`` is clamped to [3, 11] and ``steps // 2`` tints and shades are
    produced, mixed in linear light at fractions ``i / (half + 1)``.

    Args:
        base: Base color
        steps: Requested ladder length

    Returns:
        [Tint half, ..., Tint 1, Base, Shade 1, ..., Shade half]
    """
    steps = max(MIN_TINT_STEPS, min(MAX_TINT_STEPS, steps))
    half = steps // 2
    base = RGB(*base)

    ladder: List[TintShadeStep] = []
    for i in range(half, 0, -1):
        rgb = mix_linear_rgb(base, WHITE, i / (half + 1))
        ladder.append(TintShadeStep(f"Tint {i}", rgb, rgb_to_hex(*rgb)))

    ladder.append(TintShadeStep("Base", base, rgb_to_hex(*base)))

    for i in range(1, half + 1):
        rgb = mix_linear_rgb(base, BLACK, i / (half + 1))
        ladder.append(TintShadeStep(f"Shade {i}", rgb, rgb_to_hex(*rgb)))

    return ladder
