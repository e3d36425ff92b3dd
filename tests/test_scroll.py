import pytest

from rockblocks.scroll import Scroll


def test_starts_at_origin():
    scroll = Scroll()
    assert (scroll.x, scroll.y) == (0.0, 0.0)


def test_shift_accumulates():
    scroll = Scroll()
    scroll.shift_x(10.0)
    scroll.shift_x(-4.0)
    scroll.shift_y(-10.0)
    assert scroll.x == pytest.approx(6.0)
    assert scroll.y == pytest.approx(-10.0)


def test_axes_are_independent():
    scroll = Scroll()
    scroll.shift_y(5.0)
    assert scroll.x == 0.0