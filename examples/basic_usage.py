"""Basic Artwheel usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from artwheel import (
    HARMONY_TYPES,
    Palette,
    WheelModel,
    fmt,
    harmony_angles,
    render_wheel_bitmap,
    tint_shade_ladder,
)


def demonstrate_probe(bitmap) -> None:
    # Sample the rendered raster at a point on the wheel.
    model = bitmap.model
    x, y = model.point_at(200, model.ring_radius(0.74))
    sample = bitmap.sample(x, y)

    print(f"{sample.hex} {sample.css_rgb} at {fmt(sample.theta, 1)}°")
    print("Hue family:", sample.hue_label, "/", sample.temperature.value)
    print("Lab:", ", ".join(fmt(v) for v in sample.lab))
    print("OKLCH:", ", ".join(fmt(v, 3) for v in sample.oklch))
    print("Contrast vs white / black:", fmt(sample.contrast_white), fmt(sample.contrast_black))
    print("CCT (K):", fmt(sample.cct, 0))
    if sample.complement is not None:
        print("Complement:", sample.complement.hex, "ΔE76", fmt(sample.complement.delta_e76))


def demonstrate_harmonies(bitmap) -> None:
    model = bitmap.model
    x, y = model.point_at(30, model.ring_radius(0.88))
    sample = bitmap.sample(x, y)

    for kind in HARMONY_TYPES:
        angles = ", ".join(f"{item.label}={item.angle:.0f}" for item in harmony_angles(sample.theta, kind))
        print(f"{kind.value:>20}: {angles}")


def demonstrate_palette(bitmap) -> None:
    # Collect a few swatches and export them as CSS custom properties.
    model = bitmap.model
    palette = Palette()

    sample = bitmap.sample(*model.point_at(300, model.ring_radius(0.6)))
    palette.add(sample)
    palette.add_harmony(sample, "Triadic", lookup=bitmap.lookup)
    for step in tint_shade_ladder(sample.rgb, steps=5):
        palette.add_tint(step)

    print(palette.export_css())


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    wheel = render_wheel_bitmap(WheelModel.from_size(400), workers=4)
    wheel.save("wheel.png")

    demonstrate_probe(wheel)
    demonstrate_harmonies(wheel)
    demonstrate_palette(wheel)
