"""
Wheel raster synthesis and pixel readback.

Every pixel is evaluated independently at its center ``(x + 0.5, y + 0.5)``,
so the raster can be produced in row bands on any number of workers.
"""
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..conversions.to_rgb import np_hsl_to_rgb
from ..types.color_types import RGB
from ..utils.num_utils import round_half_up
from .geometry import DEFAULT_MODEL, WheelModel
from .profile import radial_profile

if TYPE_CHECKING:
    from ..probe import Sample

logger = logging.getLogger(__name__)

BACKGROUND = (255, 255, 255, 255)


def render_rows(model: WheelModel, y_start: int, y_stop: int) -> NDArray:
    """
    Render rows ``[y_start, y_stop)`` of the wheel.

    Returns:
        uint8 array of shape (y_stop - y_start, model.size, 4)
    """
    ys = np.arange(y_start, y_stop, dtype=float) + 0.5
    xs = np.arange(model.size, dtype=float) + 0.5
    x_grid, y_grid = np.meshgrid(xs, ys)

    radius = model.radius(x_grid, y_grid)
    theta = model.theta(x_grid, y_grid)
    inside = model.in_band(radius)

    s, l = radial_profile(model.band_fraction(radius))

    band = np.empty(x_grid.shape + (4,), dtype=np.uint8)
    band[...] = BACKGROUND
    band[inside, :3] = np_hsl_to_rgb(theta[inside], s[inside], l[inside])
    return band


def _row_bands(size: int, workers: int) -> list[Tuple[int, int]]:
    step = -(-size // workers)
    return [(y, min(y + step, size)) for y in range(0, size, step)]


def render_wheel_bitmap(model: WheelModel = DEFAULT_MODEL, workers: int = 1) -> WheelBitmap:
    """
    Synthesize the full RGBA wheel raster.

    Args:
        model: Wheel geometry; the raster is ``model.size`` pixels square
        workers: Number of threads; rows are split into that many bands

    Returns:
        WheelBitmap owning the raster. Pixels outside the color band are opaque white.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    logger.debug("Rendering %dx%d wheel with %d worker(s)", model.size, model.size, workers)
    pixels = np.empty((model.size, model.size, 4), dtype=np.uint8)

    if workers == 1:
        pixels[...] = render_rows(model, 0, model.size)
    else:
        bands = _row_bands(model.size, workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {
                pool.submit(render_rows, model, y0, y1): (y0, y1) for y0, y1 in bands
            }
            for future, (y0, y1) in futures.items():
                pixels[y0:y1] = future.result()

    return WheelBitmap(pixels, model)


class WheelBitmap:
    """
    An owned RGBA raster of the wheel plus the geometry it was rendered with.

    The pixel buffer is read-only; render a new bitmap to change it.
    """
    __slots__ = ('_pixels', '_model')

    def __init__(self, pixels: NDArray, model: WheelModel = DEFAULT_MODEL) -> None:
        if pixels.shape != (model.size, model.size, 4):
            raise ValueError(
                f"Expected pixels of shape {(model.size, model.size, 4)}, got {pixels.shape}"
            )
        pixels = np.array(pixels, dtype=np.uint8)
        pixels.setflags(write=False)
        self._pixels = pixels
        self._model = model

    @property
    def pixels(self) -> NDArray:
        return self._pixels

    @property
    def model(self) -> WheelModel:
        return self._model

    @property
    def size(self) -> int:
        return self._model.size

    def pixel_index(self, x: float, y: float) -> Tuple[int, int]:
        """Nearest pixel index for a continuous coordinate, clamped to the raster."""
        last = self.size - 1
        ix = max(0, min(last, round_half_up(x)))
        iy = max(0, min(last, round_half_up(y)))
        return ix, iy

    def rgb_at(self, x: float, y: float) -> RGB:
        ix, iy = self.pixel_index(x, y)
        r, g, b = (int(c) for c in self._pixels[iy, ix, :3])
        return RGB(r, g, b)

    def lookup(self, angle: float, radius: float) -> RGB:
        """Raster color at a polar position, usable as a probe color lookup."""
        return self.rgb_at(*self._model.point_at(angle, radius))

    def sample(self, x: float, y: float) -> Sample:
        """Probe the raster at a continuous coordinate."""
        from ..probe import probe
        return probe(self.rgb_at(x, y), x, y, model=self._model, lookup=self.lookup)

    def to_image(self):
        """Return the raster as a ``PIL.Image.Image`` in RGBA mode."""
        from PIL import Image
        return Image.fromarray(np.ascontiguousarray(self._pixels))

    def save(self, path: str) -> None:
        self.to_image().save(path)
