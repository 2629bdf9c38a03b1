import pytest

from artwheel.harmonies import HARMONY_TYPES, HarmonyType, harmony_angles


def angles(base, kind):
    return [item.angle for item in harmony_angles(base, kind)]

def test_complementary():
    assert angles(0, "Complementary") == [0, 180]
    assert [item.label for item in harmony_angles(0, "Complementary")] == ["Base", "Comp"]

def test_triadic_wraps_around():
    assert angles(300, "Triadic") == [300, 60, 180]

def test_split_complementary():
    assert angles(10, HarmonyType.SPLIT_COMPLEMENTARY) == [10, 160, 220]

def test_analogous_order():
    assert angles(15, HarmonyType.ANALOGOUS) == [345, 15, 45]
    assert [item.label for item in harmony_angles(15, HarmonyType.ANALOGOUS)] == ["Ana-1", "Base", "Ana-2"]

def test_tetradic():
    assert angles(90, HarmonyType.TETRADIC) == [90, 150, 270, 330]

def test_base_hue_is_normalized():
    assert angles(-60, "Complementary") == [300, 120]
    assert angles(720, "Complementary") == [0, 180]

@pytest.mark.parametrize("kind", HARMONY_TYPES)
def test_every_angle_in_range(kind):
    for base in (0, 0.5, 179.9, 359.99):
        assert all(0 <= a < 360 for a in angles(base, kind))

def test_harmony_type_values():
    assert [kind.value for kind in HARMONY_TYPES] == [
        "Complementary",
        "Split Complementary",
        "Analogous",
        "Triadic",
        "Tetradic",
    ]

def test_unknown_kind():
    with pytest.raises(ValueError):
        harmony_angles(0, "Pentadic")
