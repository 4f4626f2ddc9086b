from polychrome.conversions import convert, convert_unit, np_convert
from polychrome.conversions.to_hsv import unit_rgb_to_hsv, hsl_to_hsv
from polychrome.conversions.to_hsl import unit_rgb_to_hsl, hsv_to_hsl
from polychrome.conversions.to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb
from polychrome.types.color_types import ColorSpace, HUE_SPACES
from ..samples import samples_hsl_hsv, samples_hsv_hsl, samples_rgb_hsl, samples_rgb_hsv
import itertools
import numpy as np


rgb_tolerance = 1e-9
unit_tolerance = 1e-4
hue_tolerance = 1e-2


def hue_diff(a, b):
    return abs((a - b + 180.0) % 360.0 - 180.0)


def random_unit_rgb(seed, n=200):
    rng = np.random.default_rng(seed)
    octets = rng.integers(0, 256, size=(n, 3))
    # exact white comes back from XYZ a hair below 1.0 on one channel
    octets = octets[~np.all(octets == 255, axis=-1)]
    return [tuple(float(v) / 255 for v in c) for c in octets]


def assert_same_color(a, b, space):
    if space in HUE_SPACES:
        if a[1] > 1e-3:
            assert hue_diff(a[0], b[0]) < hue_tolerance, (a, b)
        assert np.allclose(a[1:], b[1:], atol=unit_tolerance), (a, b)
    else:
        assert np.allclose(a, b, atol=unit_tolerance), (a, b)


def test_round_trip_rgb_hsv():
    for (r, g, b) in samples_rgb_hsv:
        h, s, v = unit_rgb_to_hsv(r, g, b)
        r_out, g_out, b_out = hsv_to_unit_rgb(h, s, v)

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_round_trip_rgb_hsl():
    for (r, g, b) in samples_rgb_hsl:
        h, s, l = unit_rgb_to_hsl(r, g, b)
        r_out, g_out, b_out = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_round_trip_hsl_hsv():
    for (h, s, l) in samples_hsl_hsv:
        h_final, s_final, l_final = hsv_to_hsl(*hsl_to_hsv(h, s, l))

        assert abs(h - h_final) < 1e-9
        assert abs(s - float(s_final)) < 1e-9
        assert abs(l - float(l_final)) < 1e-9

def test_round_trip_hsv_hsl():
    for (h, s, v) in samples_hsv_hsl:
        h_final, s_final, v_final = hsl_to_hsv(*hsv_to_hsl(h, s, v))

        assert abs(h - h_final) < 1e-9
        assert abs(s - float(s_final)) < 1e-9
        assert abs(v - float(v_final)) < 1e-9

def test_round_trip_every_pair():
    colors = random_unit_rgb(seed=3)
    for fs, ts in itertools.product(ColorSpace, ColorSpace):
        for rgb in colors:
            a = convert_unit(rgb, ColorSpace.RGB, fs)
            back = convert_unit(convert_unit(a, fs, ts), ts, fs)
            assert_same_color(a, back, fs)

def test_round_trip_native_rgb_is_exact():
    rng = np.random.default_rng(5)
    for octets in rng.integers(0, 256, size=(200, 3)).tolist():
        octets = tuple(octets)
        for space in (ColorSpace.HSL, ColorSpace.HSV, ColorSpace.CMYK, ColorSpace.XYZ):
            assert convert(convert(octets, "rgb", space), space, "rgb") == octets, (octets, space)

def test_round_trip_numpy_native_rgb_is_exact():
    rgb = np.array(list(itertools.product(range(0, 256, 15), repeat=3)))
    for space in ("hsl", "hsv", "cmyk", "xyz"):
        back = np_convert(np_convert(rgb, "rgb", space), space, "rgb")
        assert np.array_equal(back, rgb), space

def test_achromatic_rgb_has_zero_hue_and_saturation():
    for x in range(0, 256, 17):
        for space in ("hsl", "hsv"):
            h, s, _ = convert((x, x, x), "rgb", space)
            assert h == 0.0
            assert s == 0.0
