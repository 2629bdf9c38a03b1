import numpy as np

from artwheel.conversions.to_hsv import rgb_to_hsv, np_rgb_to_hsv, rgb_to_hwb
from ..samples import samples_rgb_hsv


def test_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-2
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9

def test_rgb_to_hsv_black():
    hsv = rgb_to_hsv(0, 0, 0)
    assert hsv.v == 0
    assert hsv.s == 0

def test_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(hsv, expected, atol=1e-2)

def test_rgb_to_hwb_black_and_white():
    black = rgb_to_hwb(0, 0, 0)
    assert black.w == 0
    assert black.b == 1

    white = rgb_to_hwb(255, 255, 255)
    assert white.w == 1
    assert white.b == 0

def test_rgb_to_hwb_borrows_hsv_hue():
    hwb = rgb_to_hwb(51, 102, 153)
    assert hwb.h == rgb_to_hsv(51, 102, 153).h
    assert abs(hwb.w - 0.2) < 1e-12
    assert abs(hwb.b - 0.4) < 1e-12
