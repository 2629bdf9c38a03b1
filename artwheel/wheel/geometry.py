"""
Wheel geometry: a square coordinate space with a fixed center, a hole of
radius ``r_inner`` and a color band out to ``r_color``.

Angles are measured clockwise from 12 o'clock. With offsets ``dx, dy`` from
the center (y growing downward) that is ``atan2(dx, -dy)``, not the usual
``atan2(dy, dx)``; overlays drawn by callers assume this orientation.

All coordinate functions accept scalars or numpy arrays and return the same kind.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..utils.num_utils import np_deg_norm

Coordinate = Union[float, NDArray]

OFF_SIZE = 1600

# Concentric guide rings, as fractions of the color band
RING_FRACS: Tuple[float, ...] = (0.18, 0.32, 0.46, 0.6, 0.74, 0.88, 1.0)


class HueLabel(NamedTuple):
    text: str
    angle: float
    radius: float  # fraction of the color band


HUE_LABELS: Tuple[HueLabel, ...] = (
    HueLabel('Red', 0, 0.92),
    HueLabel('Yellow', 60, 0.92),
    HueLabel('Cyan', 180, 0.92),
    HueLabel('Blue', 240, 0.92),
    HueLabel('Blue-Green', 200, 0.78),
    HueLabel('Yellow-Green', 120, 0.78),
    HueLabel('Red-Violet', 315, 0.78),
    HueLabel('Red-Orange', 345, 0.78),
)


def _output(value: NDArray, scalar_input: bool) -> Coordinate:
    return value.item() if scalar_input else value


@dataclass(frozen=True)
class WheelModel:
    """
    Immutable wheel geometry.

    Use :meth:`from_size` to get the reference proportions for a given
    raster side length.
    """
    size: int
    cx: float
    cy: float
    r_inner: float
    r_color: float
    r_tick_outer: float
    r_tick_inner: float
    r_tick_minor_inner: float

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Wheel size must be positive, got {self.size}")
        if not 0 <= self.r_inner < self.r_color:
            raise ValueError(
                f"Expected 0 <= r_inner < r_color, got r_inner={self.r_inner}, r_color={self.r_color}"
            )

    @classmethod
    def from_size(cls, size: int = OFF_SIZE) -> WheelModel:
        return cls(
            size=size,
            cx=size / 2,
            cy=size / 2,
            r_inner=size * 0.18,
            r_color=size * 0.44,
            r_tick_outer=size * 0.49,
            r_tick_inner=size * 0.465,
            r_tick_minor_inner=size * 0.475,
        )

    @property
    def band_width(self) -> float:
        return self.r_color - self.r_inner

    # ------------------ CARTESIAN → POLAR ------------------
    def theta(self, x: Coordinate, y: Coordinate) -> Coordinate:
        """Angle in degrees [0, 360), 0 at the top, increasing clockwise."""
        scalar_input = np.ndim(x) == 0 and np.ndim(y) == 0
        dx = np.asarray(x, dtype=float) - self.cx
        dy = np.asarray(y, dtype=float) - self.cy
        return _output(np_deg_norm(np.degrees(np.arctan2(dx, -dy))), scalar_input)

    def radius(self, x: Coordinate, y: Coordinate) -> Coordinate:
        scalar_input = np.ndim(x) == 0 and np.ndim(y) == 0
        dx = np.asarray(x, dtype=float) - self.cx
        dy = np.asarray(y, dtype=float) - self.cy
        return _output(np.hypot(dx, dy), scalar_input)

    def in_band(self, radius: Coordinate) -> Union[bool, NDArray]:
        """True where ``r_inner <= radius <= r_color``."""
        r = np.asarray(radius, dtype=float)
        inside = (r >= self.r_inner) & (r <= self.r_color)
        return bool(inside) if np.ndim(radius) == 0 else inside

    def is_inside(self, x: Coordinate, y: Coordinate) -> Union[bool, NDArray]:
        return self.in_band(self.radius(x, y))

    def band_fraction(self, radius: Coordinate) -> Coordinate:
        """Normalized radius: 0 at the hole boundary, 1 at the outer rim, clamped."""
        scalar_input = np.ndim(radius) == 0
        f = (np.asarray(radius, dtype=float) - self.r_inner) / self.band_width
        return _output(np.clip(f, 0.0, 1.0), scalar_input)

    # ------------------ POLAR → CARTESIAN ------------------
    def point_at(self, angle: Coordinate, radius: Coordinate) -> Tuple[Coordinate, Coordinate]:
        """Inverse of (:meth:`theta`, :meth:`radius`)."""
        scalar_input = np.ndim(angle) == 0 and np.ndim(radius) == 0
        rad = np.radians(np.asarray(angle, dtype=float))
        r = np.asarray(radius, dtype=float)
        x = self.cx + np.sin(rad) * r
        y = self.cy - np.cos(rad) * r
        return _output(x, scalar_input), _output(y, scalar_input)

    def ring_radius(self, frac: float) -> float:
        """Radius of a guide ring placed at ``frac`` of the color band."""
        return self.r_inner + frac * self.band_width

    def label_point(self, label: HueLabel) -> Tuple[float, float]:
        return self.point_at(label.angle, self.ring_radius(label.radius))


DEFAULT_MODEL = WheelModel.from_size(OFF_SIZE)
