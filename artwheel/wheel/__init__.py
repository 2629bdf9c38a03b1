from .geometry import WheelModel, DEFAULT_MODEL, OFF_SIZE, RING_FRACS, HUE_LABELS, HueLabel
from .profile import radial_profile, wheel_hsl, color_at, wheel_color_at, color_at_xy
from .bitmap import WheelBitmap, render_wheel_bitmap, render_rows

__all__ = [
    "WheelModel",
    "DEFAULT_MODEL",
    "OFF_SIZE",
    "RING_FRACS",
    "HUE_LABELS",
    "HueLabel",
    "radial_profile",
    "wheel_hsl",
    "color_at",
    "wheel_color_at",
    "color_at_xy",
    "WheelBitmap",
    "render_wheel_bitmap",
    "render_rows",
]
