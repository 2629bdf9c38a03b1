import logging

import pytest

from artwheel.harmonies import HarmonyType
from artwheel.palette import PALETTE_CAPACITY, Palette, export_css, make_swatch
from artwheel.probe import probe, probe_at
from artwheel.tints import tint_shade_ladder
from artwheel.types.color_types import RGB
from artwheel.wheel.geometry import DEFAULT_MODEL


def sample_at(angle, radius=600):
    return probe_at(*DEFAULT_MODEL.point_at(angle, radius))

def gray(i):
    return make_swatch(RGB(i, i, i), f"Gray {i}")


def test_add_sample():
    palette = Palette()
    sample = sample_at(200)
    swatch = palette.add(sample)

    assert len(palette) == 1
    assert swatch.hex == sample.hex
    assert swatch.rgb == sample.rgb
    assert swatch.name == "Blue-Cyan 200°"
    assert palette.swatches[0] is swatch

def test_add_duplicate_is_ignored():
    palette = Palette()
    sample = sample_at(200)
    palette.add(sample)
    assert palette.add(sample) is None
    assert len(palette) == 1

def test_duplicates_are_case_insensitive():
    palette = Palette()
    palette.add_swatch(make_swatch(RGB(255, 0, 0), "red"))
    assert "#FF0000" in palette
    assert palette.add_swatch(make_swatch(RGB(255, 0, 0), "RED", hex_value="#FF0000")) is None

def test_newest_first_and_truncation():
    palette = Palette(capacity=3)
    for i in range(5):
        palette.add_swatch(gray(i))
    assert [sw.name for sw in palette] == ["Gray 4", "Gray 3", "Gray 2"]

def test_default_capacity():
    palette = Palette()
    for i in range(30):
        palette.add_swatch(gray(i))
    assert len(palette) == PALETTE_CAPACITY == 24
    assert palette.swatches[0].name == "Gray 29"
    assert palette.swatches[-1].name == "Gray 6"

def test_truncation_is_logged(caplog):
    palette = Palette(capacity=1)
    with caplog.at_level(logging.DEBUG, logger="artwheel.palette"):
        palette.add_swatch(gray(1))
        palette.add_swatch(gray(2))
    assert "dropped 1 oldest" in caplog.text

def test_invalid_capacity():
    with pytest.raises(ValueError):
        Palette(capacity=0)

def test_add_harmony_complementary_replaces_older_base():
    palette = Palette()
    sample = sample_at(200)
    palette.add(sample)
    added = palette.add_harmony(sample, HarmonyType.COMPLEMENTARY)

    assert len(added) == 2
    assert len(palette) == 2
    assert palette.swatches[0] is added[0]
    assert palette.swatches[1] is added[1]
    assert added[0].hex == sample.hex
    assert added[0].name == "Base Blue-Cyan 200°"
    assert added[1].name.startswith("Comp ")

def test_add_harmony_keeps_order_and_prepends():
    palette = Palette()
    palette.add_swatch(gray(7))
    added = palette.add_harmony(sample_at(30), "Triadic")

    assert [sw.name.split()[0] for sw in added] == ["Tri-1", "Tri-2", "Tri-3"]
    assert list(palette.swatches[:3]) == added
    assert palette.swatches[3].name == "Gray 7"

def test_add_harmony_uses_custom_lookup():
    palette = Palette()
    colors = iter([RGB(1, 1, 1), RGB(2, 2, 2), RGB(1, 1, 1)])
    added = palette.add_harmony(sample_at(30), HarmonyType.SPLIT_COMPLEMENTARY, lookup=lambda a, r: next(colors))
    assert len(added) == 3
    assert [sw.hex for sw in palette] == ["#010101", "#020202"]

def test_add_harmony_outside_band_adds_nothing():
    palette = Palette()
    outside = probe(RGB(255, 255, 255), 0, 0)
    assert palette.add_harmony(outside, HarmonyType.TETRADIC) == []
    assert len(palette) == 0

def test_add_tint():
    palette = Palette()
    ladder = tint_shade_ladder(RGB(200, 40, 40), 3)
    for step in ladder:
        palette.add_tint(step)
    assert [sw.name for sw in palette] == ["Shade 1", "Base", "Tint 1"]
    assert [sw.hex for sw in palette] == [step.hex for step in reversed(ladder)]

def test_remove():
    palette = Palette()
    first = palette.add_swatch(gray(1))
    palette.add_swatch(gray(2))
    palette.remove(first.id)
    assert [sw.name for sw in palette] == ["Gray 2"]

    palette.remove("no-such-id")
    assert len(palette) == 1

def test_swatch_ids_are_unique():
    ids = {gray(1).id for _ in range(100)}
    assert len(ids) == 100

def test_clear():
    palette = Palette()
    palette.add_swatch(gray(1))
    palette.clear()
    assert len(palette) == 0
    assert palette.export_css() == ""

def test_export_css_numbers_from_oldest():
    palette = Palette()
    palette.add_swatch(make_swatch(RGB(255, 0, 0), "first"))
    palette.add_swatch(make_swatch(RGB(0, 0, 255), "second"))
    assert palette.export_css() == (
        ":root\n"
        "{\n"
        "  --swatch-01: #ff0000; /* first */\n"
        "  --swatch-02: #0000ff; /* second */\n"
        "}"
    )

def test_export_css_empty():
    assert export_css([]) == ""
