import numpy as np
import pytest
from chromapick.conversions.oklch import oklch_to_rgb, rgb_to_oklch, np_oklch_to_rgb, np_rgb_to_oklch
from chromapick.types import OKLCH, RGB
from samples import samples_oklch_rgb, samples_rgb_oklch


def test_oklch_to_rgb():
    for (l, c, h), expected in samples_oklch_rgb.items():
        assert oklch_to_rgb(OKLCH(l, c, h)) == expected


def test_oklch_to_rgb_returns_rgb():
    rgb = oklch_to_rgb(OKLCH(0.5, 0.4, 0.0, 100))
    assert isinstance(rgb, RGB)
    assert all(isinstance(v, int) for v in rgb)


@pytest.mark.parametrize("hue", [0.0, 45.0, 123.4, 270.0, 359.9, 720.0, -30.0])
def test_gray_shortcut_ignores_hue(hue):
    assert oklch_to_rgb(OKLCH(0.5, 0.0, hue, 100)) == RGB(128, 128, 128)
    assert oklch_to_rgb(OKLCH(0.5, 0.0009, hue, 100)) == RGB(128, 128, 128)


def test_alpha_does_not_affect_rgb():
    assert oklch_to_rgb(OKLCH(0.6, 0.2, 200.0, 0)) == oklch_to_rgb(OKLCH(0.6, 0.2, 200.0, 100))


@pytest.mark.parametrize("oklch", [
    OKLCH(2.0, 1.0, 400.0, 100),
    OKLCH(-1.0, 0.3, 10.0, 100),
    OKLCH(0.5, -0.2, 90.0, 100),
    OKLCH(0.5, 5.0, -725.0, 100),
    OKLCH(2.0, 0.0, 0.0, 100),
    OKLCH(-0.5, 0.0, 0.0, 100),
])
def test_out_of_range_input_is_clamped(oklch):
    rgb = oklch_to_rgb(oklch)
    assert all(0 <= v <= 255 for v in rgb)


def test_hue_wraps():
    assert oklch_to_rgb(OKLCH(0.5, 0.4, 360.0)) == oklch_to_rgb(OKLCH(0.5, 0.4, 0.0))
    assert oklch_to_rgb(OKLCH(0.5, 0.4, 400.0)) == oklch_to_rgb(OKLCH(0.5, 0.4, 40.0))
    assert oklch_to_rgb(OKLCH(0.5, 0.4, -60.0)) == oklch_to_rgb(OKLCH(0.5, 0.4, 300.0))


def test_rgb_to_oklch():
    for (r, g, b), (l_exp, c_exp, h_exp) in samples_rgb_oklch.items():
        l, c, h, a = rgb_to_oklch(RGB(r, g, b))

        assert abs(l - l_exp) < 1e-3
        assert abs(c - c_exp) < 1e-3
        assert abs(h - h_exp) < 1e-3
        assert a == 100


def test_rgb_to_oklch_ranges():
    for r in range(0, 256, 51):
        for g in range(0, 256, 51):
            for b in range(0, 256, 51):
                l, c, h, _ = rgb_to_oklch(RGB(r, g, b))
                assert 0.0 <= l <= 1.0
                assert 0.0 <= c <= 0.4
                assert 0.0 <= h < 360.0


def test_rgb_round_trip_within_rounding():
    # 8-bit RGB never needs the chroma cap, so the trip back is off by rounding only
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                back = oklch_to_rgb(rgb_to_oklch(RGB(r, g, b)))
                assert max(abs(x - y) for x, y in zip(back, (r, g, b))) <= 1


def test_chroma_cap_makes_round_trip_approximate():
    # chroma above 0.4 saturates on the way out and is capped on the way back
    oklch = OKLCH(0.5, 0.6, 0.0)
    back = rgb_to_oklch(oklch_to_rgb(oklch))
    assert back.c == pytest.approx(0.4)
    assert back.c != oklch.c


def test_np_oklch_to_rgb_matches_scalar():
    ls = np.linspace(0.0, 1.0, 9)
    cs = np.array([0.0, 0.0005, 0.05, 0.1, 0.2, 0.3, 0.4])
    hs = np.arange(0.0, 360.0, 15.0)
    L, C, H = np.meshgrid(ls, cs, hs, indexing="ij")

    result = np_oklch_to_rgb(L, C, H)
    assert result.shape == L.shape + (3,)
    assert result.dtype == np.uint8

    for idx in np.ndindex(L.shape):
        expected = oklch_to_rgb(OKLCH(float(L[idx]), float(C[idx]), float(H[idx])))
        assert tuple(int(v) for v in result[idx]) == expected


def test_np_oklch_to_rgb_samples():
    the_matrix = np.array(list(samples_oklch_rgb.keys()))
    expected = np.array(list(samples_oklch_rgb.values()))
    result = np_oklch_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_np_oklch_to_rgb_scalars():
    result = np_oklch_to_rgb(0.5, 0.4, 120.0)
    assert result.shape == (3,)
    assert tuple(result) == (0, 255, 0)


def test_np_rgb_to_oklch():
    the_matrix = np.array(list(samples_rgb_oklch.keys()))
    expected = np.array(list(samples_rgb_oklch.values()))
    result = np_rgb_to_oklch(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-3)


@pytest.mark.parametrize("oklch", [
    OKLCH(0.5, 1e308, 10.0),
    OKLCH(1e155, 1e155, 10.0),
    OKLCH(1e200, 1e200, 0.0),
    OKLCH(-1e200, 1e200, 200.0),
    OKLCH(0.5, 0.4, float("inf")),
])
def test_oklch_to_rgb_is_total_for_extreme_input(oklch):
    rgb = oklch_to_rgb(oklch)
    assert all(isinstance(v, int) and 0 <= v <= 255 for v in rgb)

    with np.errstate(invalid="ignore", over="ignore"):
        vectorized = np_oklch_to_rgb(oklch.l, oklch.c, oklch.h)
    assert tuple(int(v) for v in vectorized) == rgb


def test_infinite_hue_falls_back_to_zero():
    assert oklch_to_rgb(OKLCH(0.5, 0.4, float("inf"))) == RGB(255, 0, 0)
    assert oklch_to_rgb(OKLCH(0.5, 0.4, float("-inf"))) == RGB(255, 0, 0)
