import math

import pytest

from artwheel.conversions import rgb_to_hsl, rgb_to_xyz_d65, xyz_to_lab_d65
from artwheel.descriptors import Temperature
from artwheel.probe import probe, probe_at, state_label
from artwheel.types.color_types import RGB
from artwheel.utils.num_utils import NON_FINITE_SENTINEL, fmt
from artwheel.wheel.geometry import DEFAULT_MODEL, WheelModel
from artwheel.wheel.profile import wheel_color_at


@pytest.fixture
def blue_green_sample():
    x, y = DEFAULT_MODEL.point_at(200, 600)
    return probe_at(x, y)


def test_probe_position(blue_green_sample):
    s = blue_green_sample
    assert s.inside
    assert s.theta == pytest.approx(200)
    assert s.radius == pytest.approx(600)
    assert s.f == pytest.approx((600 - DEFAULT_MODEL.r_inner) / DEFAULT_MODEL.band_width)

def test_probe_color_matches_analytic_wheel(blue_green_sample):
    s = blue_green_sample
    assert s.rgb == wheel_color_at(s.theta, s.radius)
    assert s.hex == "#%02x%02x%02x" % s.rgb
    assert s.css_rgb == "rgb(%d %d %d)" % s.rgb

def test_probe_descriptors(blue_green_sample):
    s = blue_green_sample
    assert s.hue_label == "Blue-Cyan"
    assert s.temperature == Temperature.COOL
    assert s.value_proxy == pytest.approx(s.lab.L / 10)
    assert s.chroma_proxy == pytest.approx(min(20, s.lch.C / 8))

def test_probe_color_spaces(blue_green_sample):
    s = blue_green_sample
    assert s.hsl == rgb_to_hsl(*s.rgb)
    assert s.lab == xyz_to_lab_d65(rgb_to_xyz_d65(*s.rgb))
    assert s.lch.C == pytest.approx(math.hypot(s.lab.a, s.lab.b))
    assert 0 < s.oklab.L < 1

def test_probe_contrast(blue_green_sample):
    s = blue_green_sample
    y = s.relative_luminance
    assert s.contrast_white == pytest.approx(1.05 / (y + 0.05))
    assert s.contrast_black == pytest.approx((y + 0.05) / 0.05)
    assert 1 <= s.contrast_white <= 21
    assert 1 <= s.contrast_black <= 21

def test_probe_complement(blue_green_sample):
    s = blue_green_sample
    comp = s.complement
    assert comp is not None
    assert comp.theta == pytest.approx(20)
    assert comp.rgb == wheel_color_at(comp.theta, s.radius)
    assert comp.delta_e76 > 0
    assert comp.hex == "#%02x%02x%02x" % comp.rgb

def test_probe_outside_band_has_no_complement():
    s = probe(RGB(255, 255, 255), 0, 0)
    assert not s.inside
    assert s.complement is None
    assert s.hex == "#ffffff"
    assert s.contrast_white == pytest.approx(1)
    assert 6400 < s.cct < 6600

def test_probe_black_has_undefined_chromaticity():
    s = probe(RGB(0, 0, 0), DEFAULT_MODEL.cx, DEFAULT_MODEL.cy)
    assert math.isnan(s.xyy.x)
    assert math.isnan(s.uv_prime.u)
    assert math.isnan(s.cct)
    assert fmt(s.cct) == NON_FINITE_SENTINEL
    assert s.contrast_black == 1
    assert s.contrast_white == pytest.approx(21)

def test_probe_custom_lookup():
    x, y = DEFAULT_MODEL.point_at(45, 500)
    s = probe(RGB(10, 20, 30), x, y, lookup=lambda angle, radius: RGB(1, 2, 3))
    assert s.complement.rgb == (1, 2, 3)

def test_probe_uses_given_model():
    model = WheelModel.from_size(200)
    x, y = model.point_at(90, 70)
    s = probe_at(x, y, model)
    assert s.inside
    assert s.model is model
    assert s.rgb == wheel_color_at(s.theta, s.radius, model)

def test_probe_accepts_plain_tuples():
    s = probe((255, 0, 0), 0, 0)
    assert isinstance(s.rgb, RGB)

def test_state_label(blue_green_sample):
    outside = probe(RGB(255, 255, 255), 0, 0)
    assert state_label(True, blue_green_sample) == "Locked"
    assert state_label(True, None) == "Locked"
    assert state_label(False, blue_green_sample) == "Hover (inside wheel)"
    assert state_label(False, outside) == "Hover"
    assert state_label(False, None) == "Hover"
