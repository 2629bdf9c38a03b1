"""Color harmony relationships as hue offsets around the wheel."""
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple, Union

from .utils.num_utils import deg_norm


class HarmonyType(str, Enum):
    COMPLEMENTARY = "Complementary"
    SPLIT_COMPLEMENTARY = "Split Complementary"
    ANALOGOUS = "Analogous"
    TRIADIC = "Triadic"
    TETRADIC = "Tetradic"


class HarmonyAngle(NamedTuple):
    label: str
    angle: float  # degrees [0, 360)


# (label, offset from the base hue), in display order
HARMONY_OFFSETS: Dict[HarmonyType, Tuple[Tuple[str, float], ...]] = {
    HarmonyType.COMPLEMENTARY:       (("Base", 0), ("Comp", 180)),
    HarmonyType.SPLIT_COMPLEMENTARY: (("Base", 0), ("Split-1", 150), ("Split-2", 210)),
    HarmonyType.ANALOGOUS:           (("Ana-1", -30), ("Base", 0), ("Ana-2", 30)),
    HarmonyType.TRIADIC:             (("Tri-1", 0), ("Tri-2", 120), ("Tri-3", 240)),
    # Rectangle tetrad
    HarmonyType.TETRADIC:            (("Tet-1", 0), ("Tet-2", 60), ("Tet-3", 180), ("Tet-4", 240)),
}

HARMONY_TYPES: List[HarmonyType] = list(HarmonyType)


def harmony_angles(base_hue: float, kind: Union[HarmonyType, str]) -> List[HarmonyAngle]:
    """
    Angles of a harmony set around ``base_hue``.

    Args:
        base_hue: Base hue in degrees, any real
        kind: A HarmonyType or its string value, e.g. "Split Complementary"

    Returns:
        Ordered list of HarmonyAngle, every angle normalized to [0, 360)

    Raises:
        ValueError: Unknown harmony kind
    """
    t = deg_norm(base_hue)
    return [
        HarmonyAngle(label, deg_norm(t + offset))
        for label, offset in HARMONY_OFFSETS[HarmonyType(kind)]
    ]
