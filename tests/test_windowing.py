import pytest

from sonalyze.windowing import HannWindow, IdentityWindow, RectangleWindow, WindowingFn


def test_windowing_fn_is_abstract():
    with pytest.raises(TypeError):
        WindowingFn()


def test_hann_ends_are_zero():
    window = HannWindow()
    assert window.ratio_at(0, 64) == pytest.approx(0.0)
    assert window.ratio_at(63, 64) == pytest.approx(0.0, abs=1e-12)


def test_hann_peak_in_the_middle():
    assert HannWindow().ratio_at(32, 65) == pytest.approx(1.0)


def test_hann_symmetric_and_bounded():
    window = HannWindow()
    n = 50
    for i in range(n):
        value = window.ratio_at(i, n)
        assert 0.0 <= value <= 1.0 + 1e-12
        assert value == pytest.approx(window.ratio_at(n - 1 - i, n), abs=1e-12)


def test_hann_needs_two_samples():
    with pytest.raises(ValueError):
        HannWindow().ratio_at(0, 1)


def test_rectangle_centred():
    window = RectangleWindow(4)
    values = [window.ratio_at(i, 8) for i in range(8)]
    assert values == [0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 0.0, 0.0]


def test_rectangle_wider_than_window():
    window = RectangleWindow(100)
    assert all(window.ratio_at(i, 10) == 1.0 for i in range(10))


def test_rectangle_sum_matches_width():
    for width in (0, 2, 6, 10):
        window = RectangleWindow(width)
        assert sum(window.ratio_at(i, 10) for i in range(10)) == width


def test_identity():
    window = IdentityWindow()
    assert all(window.ratio_at(i, 16) == 1.0 for i in range(16))