import pytest

from artwheel.descriptors import HUE_NAMES, Temperature, chroma_proxy, hue_name, temperature_label, value_proxy


@pytest.mark.parametrize("theta, name", [
    (0, "Red"),
    (11.24, "Red"),
    (11.25, "Red-Orange"),
    (350, "Red"),
    (348.74, "Rose"),
    (60, "Yellow-Orange"),
    (90, "Yellow"),
    (180, "Cyan"),
    (240, "Blue-Violet"),
    (-22.5, "Rose"),
    (720, "Red"),
])
def test_hue_name(theta, name):
    assert hue_name(theta) == name

def test_hue_names_cover_sixteen_bins():
    assert len(HUE_NAMES) == 16
    assert [hue_name(i * 22.5) for i in range(16)] == list(HUE_NAMES)

@pytest.mark.parametrize("theta, label", [
    (0, Temperature.WARM),
    (30, Temperature.WARM),
    (74.9, Temperature.WARM),
    (75, Temperature.NEUTRAL),
    (104.9, Temperature.NEUTRAL),
    (105, Temperature.WARM),
    (119.9, Temperature.WARM),
    (120, Temperature.NEUTRAL),
    (149.9, Temperature.NEUTRAL),
    (150, Temperature.COOL),
    (284.9, Temperature.COOL),
    (285, Temperature.NEUTRAL),
    (314.9, Temperature.NEUTRAL),
    (315, Temperature.WARM),
    (-10, Temperature.WARM),
])
def test_temperature_label(theta, label):
    assert temperature_label(theta) == label

def test_temperature_is_str_enum():
    assert temperature_label(200) == "Cool"

def test_value_proxy():
    assert value_proxy(53.2) == pytest.approx(5.32)
    assert value_proxy(100) == 10
    assert value_proxy(120) == 10
    assert value_proxy(-1) == 0

def test_chroma_proxy():
    assert chroma_proxy(40) == 5
    assert chroma_proxy(200) == 20
