import pytest
from chromapick.gradients import (
    GradientStop,
    generate_lightness_gradient,
    generate_chroma_gradient,
    generate_hue_gradient,
    generate_alpha_gradient,
    to_css_linear_gradient,
)
from chromapick.conversions import hex_to_rgb
from chromapick.types import OKLCH, LCH


def test_lightness_gradient_oklch():
    stops = generate_lightness_gradient(0.0, 0.0)
    assert len(stops) == 11
    assert [s.offset for s in stops] == pytest.approx([i * 10 for i in range(11)])
    assert stops[0] == GradientStop("#000000", 0.0)
    assert stops[5].color == "#808080"
    assert stops[-1] == GradientStop("#ffffff", 100.0)


def assert_same_colors(stops_a, stops_b):
    # the LCH path rescales first, so channels may differ by one at rounding edges
    for a, b in zip(stops_a, stops_b):
        rgb_a, rgb_b = hex_to_rgb(a.color), hex_to_rgb(b.color)
        assert max(abs(x - y) for x, y in zip(rgb_a, rgb_b)) <= 1


def test_lightness_gradient_lch_matches_oklch():
    oklch = generate_lightness_gradient(0.2, 150.0, is_lch=False)
    lch = generate_lightness_gradient(75.0, 150.0, is_lch=True)
    assert len(lch) == 11
    assert_same_colors(lch, oklch)


def test_chroma_gradient():
    stops = generate_chroma_gradient(0.5, 0.0)
    assert len(stops) == 11
    assert stops[0].color == "#808080"
    assert stops[-1].color == "#ff0000"
    assert stops[-1].offset == 100.0

    lch = generate_chroma_gradient(50.0, 0.0, is_lch=True)
    assert_same_colors(lch, stops)


def test_hue_gradient_stop_count_and_offsets():
    stops = generate_hue_gradient(0.5, 0.4, False)
    assert len(stops) == 13
    assert stops[0].offset == 0.0
    assert stops[-1].offset == 100.0
    assert [s.offset for s in stops] == pytest.approx([i * 100 / 12 for i in range(13)])


@pytest.mark.parametrize("l, c, is_lch", [
    (0.5, 0.4, False),
    (0.7, 0.1, False),
    (0.3, 0.0, False),
    (60.0, 90.0, True),
])
def test_hue_gradient_endpoints_coincide(l, c, is_lch):
    stops = generate_hue_gradient(l, c, is_lch)
    assert stops[0].color == stops[-1].color


def test_hue_gradient_primaries():
    colors = [s.color for s in generate_hue_gradient(0.5, 0.4)]
    assert colors[0] == "#ff0000"
    assert colors[2] == "#ffff00"
    assert colors[4] == "#00ff00"
    assert colors[8] == "#0000ff"
    assert len(set(colors[:12])) == 12


def test_gradient_colors_are_hex():
    for stops in (
        generate_lightness_gradient(0.3, 45.0),
        generate_chroma_gradient(0.6, 200.0),
        generate_hue_gradient(40.0, 100.0, is_lch=True),
    ):
        for stop in stops:
            assert len(stop.color) == 7 and stop.color.startswith("#")


def test_alpha_gradient():
    stops = generate_alpha_gradient(OKLCH(0.5, 0.4, 0.0, 10.0))
    assert stops == [GradientStop("transparent", 0.0), GradientStop("#ff0000", 100.0)]
    stops = generate_alpha_gradient(LCH(50.0, 150.0, 240.0, 10.0), is_lch=True)
    assert stops[-1].color == "#0000ff"


def test_css_linear_gradient():
    css = to_css_linear_gradient(generate_lightness_gradient(0.0, 0.0))
    assert css.startswith("linear-gradient(to right, #000000 0%, #1a1a1a 10%")
    assert css.endswith("#ffffff 100%)")


def test_css_linear_gradient_fractional_offsets():
    css = to_css_linear_gradient(generate_hue_gradient(0.5, 0.4), direction="to left")
    assert css.startswith("linear-gradient(to left, #ff0000 0%, ")
    assert "8.3333%" in css
    assert css.count("%") == 13


def test_css_linear_gradient_requires_stops():
    with pytest.raises(ValueError):
        to_css_linear_gradient([])
