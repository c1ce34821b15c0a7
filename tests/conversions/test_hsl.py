from chromapick.conversions.hsl import hsl_to_rgb
from chromapick.types import RGB
from samples import samples_hsl_rgb


def test_hsl_to_rgb():
    for (h, s, l), expected in samples_hsl_rgb.items():
        assert hsl_to_rgb(h, s, l) == expected


def test_hsl_extremes():
    assert hsl_to_rgb(200, 0.7, 0.0) == RGB(0, 0, 0)
    assert hsl_to_rgb(200, 0.7, 1.0) == RGB(255, 255, 255)
