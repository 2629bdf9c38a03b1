"""
An in-memory palette of saved swatches, newest first.

A palette has a single owner; mutate it from one place at a time.
"""
from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .conversions.to_hsl import rgb_to_hsl
from .descriptors import hue_name
from .harmonies import HarmonyType, harmony_angles
from .probe import ColorLookup, Sample, default_lookup
from .tints import TintShadeStep
from .types.color_types import HSL, RGB
from .utils.num_utils import rgb_to_hex

logger = logging.getLogger(__name__)

PALETTE_CAPACITY = 24


@dataclass(frozen=True)
class PaletteSwatch:
    id: str
    hex: str
    rgb: RGB
    hsl: HSL
    name: str


def new_swatch_id() -> str:
    return f"{int(time.time() * 1000)}_{uuid.uuid4().hex[:12]}"


def make_swatch(rgb: RGB, name: str, hex_value: Optional[str] = None) -> PaletteSwatch:
    rgb = RGB(*rgb)
    return PaletteSwatch(
        id=new_swatch_id(),
        hex=hex_value if hex_value is not None else rgb_to_hex(*rgb),
        rgb=rgb,
        hsl=rgb_to_hsl(*rgb),
        name=name,
    )


def export_css(swatches: Sequence[PaletteSwatch]) -> str:
    """
    Render swatches as CSS custom properties.

    ``swatches`` is newest first; numbering starts at the oldest. An empty
    palette yields an empty string.
    """
    if not swatches:
        return ''
    lines = [
        f"  --swatch-{i:02d}: {sw.hex}; /* {sw.name} */"
        for i, sw in enumerate(reversed(swatches), start=1)
    ]
    return ":root\n{\n" + "\n".join(lines) + "\n}"


def _dedupe(swatches: Iterable[PaletteSwatch]) -> List[PaletteSwatch]:
    """Keep the first occurrence of each hex, case-insensitively."""
    seen = set()
    unique = []
    for sw in swatches:
        key = sw.hex.lower()
        if key not in seen:
            seen.add(key)
            unique.append(sw)
    return unique


class Palette:
    """Ordered, capacity-bounded, hex-deduplicated list of swatches."""

    def __init__(self, capacity: int = PALETTE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Palette capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._swatches: List[PaletteSwatch] = []

    @property
    def swatches(self) -> Tuple[PaletteSwatch, ...]:
        return tuple(self._swatches)

    def __len__(self) -> int:
        return len(self._swatches)

    def __iter__(self) -> Iterator[PaletteSwatch]:
        return iter(self.swatches)

    def __contains__(self, hex_value: str) -> bool:
        return any(sw.hex.lower() == hex_value.lower() for sw in self._swatches)

    def _truncate(self) -> None:
        if len(self._swatches) > self.capacity:
            dropped = self._swatches[self.capacity:]
            del self._swatches[self.capacity:]
            logger.debug("Palette full, dropped %d oldest swatch(es)", len(dropped))

    def add_swatch(self, swatch: PaletteSwatch) -> Optional[PaletteSwatch]:
        """Insert at the front unless the hex is already present; returns the swatch inserted."""
        if swatch.hex in self:
            logger.debug("Swatch %s already in palette", swatch.hex)
            return None
        self._swatches.insert(0, swatch)
        self._truncate()
        logger.debug("Added swatch %s (%s)", swatch.hex, swatch.name)
        return swatch

    def add(self, sample: Sample) -> Optional[PaletteSwatch]:
        """Save a probed color, named after its hue family and angle."""
        name = f"{sample.hue_label} {sample.theta:.0f}°"
        return self.add_swatch(make_swatch(sample.rgb, name, sample.hex))

    def add_tint(self, step: TintShadeStep) -> Optional[PaletteSwatch]:
        return self.add_swatch(make_swatch(step.rgb, step.label, step.hex))

    def add_harmony(
        self,
        sample: Sample,
        kind: Union[HarmonyType, str],
        lookup: Optional[ColorLookup] = None,
    ) -> List[PaletteSwatch]:
        """
        Prepend one swatch per harmony angle at the sample's radius.

        New swatches keep harmony order and win over older duplicates.
        Samples outside the color band add nothing.

        Returns:
            The harmony swatches built, whether or not they survived deduplication.
        """
        if not sample.inside:
            return []
        if lookup is None:
            lookup = default_lookup(sample.model)

        new_swatches = []
        for item in harmony_angles(sample.theta, kind):
            rgb = lookup(item.angle, sample.radius)
            name = f"{item.label} {hue_name(item.angle)} {item.angle:.0f}°"
            new_swatches.append(make_swatch(rgb, name))

        self._swatches = _dedupe(new_swatches + self._swatches)
        self._truncate()
        logger.debug("Added %s harmony of %d swatch(es)", HarmonyType(kind).value, len(new_swatches))
        return new_swatches

    def remove(self, swatch_id: str) -> None:
        """Delete the swatch with ``swatch_id``; unknown ids are ignored."""
        before = len(self._swatches)
        self._swatches = [sw for sw in self._swatches if sw.id != swatch_id]
        if len(self._swatches) != before:
            logger.debug("Removed swatch %s", swatch_id)

    def clear(self) -> None:
        self._swatches.clear()

    def export_css(self) -> str:
        return export_css(self._swatches)
