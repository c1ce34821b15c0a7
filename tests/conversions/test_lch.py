import numpy as np
import pytest
from chromapick.conversions.lch import (
    oklch_to_lch, lch_to_oklch, lch_to_rgb, rgb_to_lch,
    np_oklch_to_lch, np_lch_to_oklch, np_lch_to_rgb, np_rgb_to_lch,
)
from chromapick.conversions.oklch import oklch_to_rgb, rgb_to_oklch
from chromapick.types import OKLCH, LCH, RGB


def test_oklch_to_lch_scaling():
    lch = oklch_to_lch(OKLCH(0.5, 0.2, 123.0, 40.0))
    assert isinstance(lch, LCH)
    assert lch.l == pytest.approx(50.0)
    assert lch.c == pytest.approx(75.0)
    assert lch.h == 123.0
    assert lch.a == 40.0


def test_lch_to_oklch_scaling():
    oklch = lch_to_oklch(LCH(100.0, 150.0, 359.0, 100.0))
    assert isinstance(oklch, OKLCH)
    assert oklch.l == pytest.approx(1.0)
    assert oklch.c == pytest.approx(0.4)
    assert oklch.h == 359.0
    assert oklch.a == 100.0


@pytest.mark.parametrize("oklch", [
    OKLCH(0.0, 0.0, 0.0, 0.0),
    OKLCH(0.5, 0.2, 180.0, 100.0),
    OKLCH(0.123456789, 0.3987654321, 271.5, 12.5),
    OKLCH(1.0, 0.4, 359.999, 100.0),
    OKLCH(-3.0, 7.0, 1000.0, 250.0),
])
def test_exact_round_trip(oklch):
    back = lch_to_oklch(oklch_to_lch(oklch))
    for got, expected in zip(back, oklch):
        assert got == pytest.approx(expected, rel=1e-12, abs=1e-15)
    assert back.h == oklch.h
    assert back.a == oklch.a


def test_lch_to_rgb_goes_through_oklch():
    for lch in [LCH(50.0, 150.0, 0.0), LCH(75.0, 75.0, 30.0), LCH(30.0, 20.0, 250.0)]:
        assert lch_to_rgb(lch) == oklch_to_rgb(lch_to_oklch(lch))


def test_rgb_to_lch_goes_through_oklch():
    for rgb in [RGB(255, 0, 0), RGB(12, 200, 99), RGB(128, 128, 128)]:
        expected = oklch_to_lch(rgb_to_oklch(rgb))
        assert rgb_to_lch(rgb) == expected


def test_rgb_to_lch_alpha_is_opaque():
    assert rgb_to_lch(RGB(1, 2, 3)).a == 100


def test_np_lch_round_trip():
    lch = np_oklch_to_lch(np.array([0.0, 0.5, 1.0]), np.array([0.0, 0.2, 0.4]), 90.0)
    assert np.allclose(lch, [[0.0, 0.0, 90.0], [50.0, 75.0, 90.0], [100.0, 150.0, 90.0]])
    back = np_lch_to_oklch(lch[..., 0], lch[..., 1], lch[..., 2])
    assert np.allclose(back, [[0.0, 0.0, 90.0], [0.5, 0.2, 90.0], [1.0, 0.4, 90.0]])


def test_np_lch_rgb_matches_scalar():
    rgb = np_lch_to_rgb(np.array([50.0, 75.0]), np.array([150.0, 75.0]), np.array([0.0, 30.0]))
    assert tuple(rgb[0]) == lch_to_rgb(LCH(50.0, 150.0, 0.0))
    assert tuple(rgb[1]) == lch_to_rgb(LCH(75.0, 75.0, 30.0))

    lch = np_rgb_to_lch(np.array([255, 64]), np.array([0, 128]), np.array([0, 0]))
    for row, rgb_in in zip(lch, [RGB(255, 0, 0), RGB(64, 128, 0)]):
        assert np.allclose(row, rgb_to_lch(rgb_in)[:3])
