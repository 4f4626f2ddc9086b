from polychrome.conversions import convert, convert_unit, np_convert, conversion_path, CONVERT_DIRECT
from polychrome.errors import InvalidChannelValue, UnsupportedOperation
from polychrome.types.color_types import ColorSpace
import itertools
import logging
import numpy as np
import pytest
from ..samples import named_colors

SPACES = list(ColorSpace)

NATIVE = {
    ColorSpace.RGB: lambda entry: entry[0],
    ColorSpace.HSL: lambda entry: entry[1],
    ColorSpace.HSV: lambda entry: entry[2],
    ColorSpace.CMYK: lambda entry: entry[3],
}


def test_conversion_path_identity():
    for space in SPACES:
        assert conversion_path(space, space) == (space,)

def test_conversion_path_direct_edges():
    assert conversion_path("rgb", "hsl") == (ColorSpace.RGB, ColorSpace.HSL)
    assert conversion_path("hsv", "hsl") == (ColorSpace.HSV, ColorSpace.HSL)
    assert conversion_path("xyz", "rgb") == (ColorSpace.XYZ, ColorSpace.RGB)
    assert len(CONVERT_DIRECT) == 10

def test_conversion_path_through_hub():
    assert conversion_path("cmyk", "hsl") == (ColorSpace.CMYK, ColorSpace.RGB, ColorSpace.HSL)
    assert conversion_path("xyz", "cmyk") == (ColorSpace.XYZ, ColorSpace.RGB, ColorSpace.CMYK)

def test_every_pair_has_a_path():
    for fs, ts in itertools.product(SPACES, SPACES):
        path = conversion_path(fs, ts)
        assert path[0] == fs and path[-1] == ts
        for edge in zip(path, path[1:]):
            assert edge in CONVERT_DIRECT

def test_unknown_space():
    with pytest.raises(UnsupportedOperation):
        convert((0, 0, 0), "rgb", "lab")
    with pytest.raises(UnsupportedOperation):
        conversion_path("yuv", "rgb")

def test_convert_named_colors():
    for name, entry in named_colors.items():
        for fs, ts in itertools.product(NATIVE, NATIVE):
            result = convert(NATIVE[fs](entry), fs, ts)
            expected = NATIVE[ts](entry)
            if ts == ColorSpace.RGB:
                assert result == expected, (name, fs, ts)
            else:
                assert np.allclose(result, expected, atol=1e-4), (name, fs, ts, result)

def test_convert_rgb_output_is_int():
    r, g, b = convert((0.0, 1.0, 0.5), "hsl", "rgb")
    assert (r, g, b) == (255, 0, 0)
    assert all(isinstance(v, int) for v in (r, g, b))

def test_convert_identity_returns_equal_value():
    assert convert((12, 34, 56), "rgb", "rgb") == (12, 34, 56)
    assert convert((10.0, 20.0, 30.0, 40.0), "cmyk", "cmyk") == (10.0, 20.0, 30.0, 40.0)

    # RGB identity quantises like every other path into RGB
    assert convert((127.6, 0.4, 254.5), "rgb", "rgb") == (128, 0, 255)

def test_convert_reference_examples():
    assert convert((255, 0, 0), "rgb", "hsl") == (0.0, 1.0, 0.5)
    assert convert((0.0, 1.0, 0.5), "hsl", "rgb") == (255, 0, 0)
    assert convert((0, 0, 0), "rgb", "hsv") == (0.0, 0.0, 0.0)
    assert convert((0.0, 0.0, 0.0, 100.0), "cmyk", "rgb") == (0, 0, 0)

def test_convert_wrong_channel_count():
    with pytest.raises(InvalidChannelValue):
        convert((1, 2), "rgb", "hsl")
    with pytest.raises(InvalidChannelValue):
        np_convert(np.zeros((4, 3)), "cmyk", "rgb")

def test_convert_unit_keeps_precision_through_hub():
    # CMYK -> HSL goes through RGB without 8-bit rounding
    h, s, l = convert_unit((0.0, 0.5, 1.0, 0.0), "cmyk", "hsl")
    assert abs(h - 30.0) < 1e-9
    assert abs(s - 1.0) < 1e-9
    assert abs(l - 0.5) < 1e-9

def test_hub_routing_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="polychrome.conversions.wrapper"):
        convert((0.0, 0.0, 0.0, 100.0), "cmyk", "hsv")
    assert "routed through rgb" in caplog.text

def test_np_convert_matches_scalar():
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 256, size=(64, 3))
    for ts in SPACES:
        expected = np.array([convert(tuple(int(v) for v in c), "rgb", ts) for c in rgb])
        result = np_convert(rgb, "rgb", ts)
        assert result.shape == expected.shape
        assert np.allclose(result, expected, atol=1e-9), ts

def test_np_convert_every_pair_matches_scalar():
    rng = np.random.default_rng(11)
    rgb = rng.integers(0, 256, size=(16, 3))
    for fs, ts in itertools.product(SPACES, SPACES):
        source = np_convert(rgb, "rgb", fs)
        expected = np.array([convert(tuple(c), fs, ts) for c in source.tolist()])
        result = np_convert(source, fs, ts)
        assert np.allclose(result, expected, atol=1e-9), (fs, ts)

def test_np_convert_rgb_dtype_and_shape():
    hsl = np.array([[[0.0, 1.0, 0.5], [120.0, 1.0, 0.5]]])
    rgb = np_convert(hsl, "hsl", "rgb")
    assert rgb.shape == (1, 2, 3)
    assert np.issubdtype(rgb.dtype, np.integer)
    assert rgb.tolist() == [[[255, 0, 0], [0, 255, 0]]]

def test_np_convert_rgb_identity_rounds():
    rgb = np.array([[127.6, 0.0, 0.0], [127.4, 0.5, 254.5]])
    result = np_convert(rgb, "rgb", "rgb")
    assert np.issubdtype(result.dtype, np.integer)
    assert result.tolist() == [[128, 0, 0], [127, 1, 255]]
    off_grid = np.array([[127.6, 10.2, 200.9]])
    through_hsl = np_convert(np_convert(off_grid, "rgb", "hsl"), "hsl", "rgb")
    assert np.array_equal(np_convert(off_grid, "rgb", "rgb"), through_hsl)
    for row, expected in zip(rgb.tolist(), result.tolist()):
        assert list(convert(tuple(row), "rgb", "rgb")) == expected
