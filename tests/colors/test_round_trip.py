from polychrome.colors import Rgb, Hsl, Hsv, Cmyk, Xyz, Color
from ..samples import named_colors
import itertools
import numpy as np

MODELS = (Rgb, Hsl, Hsv, Cmyk, Xyz)


def test_class_round_trip_named_colors():
    for name, (rgb, _, _, _) in named_colors.items():
        color = Rgb(rgb)
        for cls in MODELS:
            assert color.convert(cls.mode).convert("rgb") == color, (name, cls)

def test_class_round_trip_random_rgb():
    rng = np.random.default_rng(1)
    for octets in rng.integers(0, 256, size=(300, 3)).tolist():
        color = Rgb(octets)
        for cls in MODELS:
            assert Rgb(cls(color)) == color, (octets, cls)

def test_class_round_trip_every_pair():
    rng = np.random.default_rng(2)
    for octets in rng.integers(0, 256, size=(50, 3)).tolist():
        rgb = Rgb(octets)
        for a, b in itertools.product(MODELS, MODELS):
            start = a(rgb)
            there_and_back = a(b(start))
            assert Rgb(there_and_back) == rgb, (octets, a, b)

def test_facade_round_trip():
    for name, (rgb, hsl, hsv, cmyk) in named_colors.items():
        assert Color(Hsl(hsl)).rgb_octets() == rgb, name
        assert Color(Hsv(hsv)).rgb_octets() == rgb, name
        assert Color(Cmyk(cmyk)).rgb_octets() == rgb, name
        assert Color(Color(rgb).xyz).rgb_octets() == rgb, name

def test_primary_round_trips():
    hsl = Rgb(255, 0, 0).convert("hsl")
    assert hsl == Hsl(0, 1.0, 0.5)
    assert hsl.convert("rgb") == Rgb(255, 0, 0)
    assert Rgb(0, 0, 0).convert("hsv") == Hsv(0, 0, 0)
    assert Cmyk(0, 0, 0, 100).convert("rgb") == Rgb(0, 0, 0)
