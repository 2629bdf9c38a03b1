import math

import numpy as np
import pytest

from artwheel.utils.num_utils import (
    NON_FINITE_SENTINEL,
    clamp01,
    css_rgb,
    deg_norm,
    fmt,
    lerp,
    np_deg_norm,
    np_round_half_up,
    rgb_to_hex,
    round_half_up,
)


@pytest.mark.parametrize("d, expected", [(0, 0), (360, 0), (-30, 330), (725, 5), (-720, 0), (359.5, 359.5)])
def test_deg_norm(d, expected):
    assert deg_norm(d) == pytest.approx(expected)
    assert 0 <= deg_norm(d) < 360

def test_np_deg_norm():
    np.testing.assert_allclose(np_deg_norm([-30, 0, 390]), [330, 0, 30])

def test_clamp01():
    assert clamp01(-0.5) == 0
    assert clamp01(0.25) == 0.25
    assert clamp01(3) == 1

def test_lerp():
    assert lerp(10, 20, 0) == 10
    assert lerp(10, 20, 1) == 20
    assert lerp(10, 20, 0.5) == 15
    assert lerp(10, 20, 2) == 30

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0
    np.testing.assert_array_equal(np_round_half_up([0.5, 1.5, 2.5]), [1, 2, 3])

def test_fmt():
    assert fmt(1.23456) == "1.23"
    assert fmt(1.5, 0) == "2"
    assert fmt(math.nan) == NON_FINITE_SENTINEL
    assert fmt(math.inf, 4) == NON_FINITE_SENTINEL

def test_rgb_to_hex():
    assert rgb_to_hex(255, 128, 0) == "#ff8000"
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(254.6, -3, 300) == "#ff00ff"

def test_css_rgb():
    assert css_rgb(255, 128, 0) == "rgb(255 128 0)"
    assert css_rgb(12.5, 0, 256) == "rgb(13 0 255)"
