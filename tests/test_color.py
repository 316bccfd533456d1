"""Tests for Color and byte serialization."""

import pytest

from raymond.core.color import Color, to_byte


class TestShade:

    def test_zero_or_negative_gives_black(self):
        color = Color(0.2, 0.4, 0.6)
        assert color.shade(0) == Color.black()
        assert color.shade(-3.5) == Color.black()

    def test_one_or_more_leaves_color_unchanged(self):
        color = Color(0.2, 0.4, 0.6)
        assert color.shade(1) == color
        assert color.shade(12.0) == color

    def test_fraction_scales_every_channel(self):
        shaded = Color(0.2, 0.4, 1.6).shade(0.5)
        assert shaded == Color(0.1, 0.2, 0.8)

    def test_monotonic_in_intensity(self):
        color = Color(0.9, 0.3, 2.0)
        previous = color.shade(0.0)
        for step in range(1, 101):
            current = color.shade(step / 100)
            assert current.red >= previous.red
            assert current.green >= previous.green
            assert current.blue >= previous.blue
            previous = current

    def test_shade_returns_new_color(self):
        color = Color(0.2, 0.4, 0.6)
        assert color.shade(1) is not color


class TestAdd:

    def test_add_is_componentwise_and_unclamped(self):
        total = Color(0.8, 0.5, 0.0) + Color(0.8, 0.25, 0.1)
        assert total.red == pytest.approx(1.6)
        assert total.green == pytest.approx(0.75)
        assert total.blue == pytest.approx(0.1)
        assert Color(1, 1, 1).add(Color(1, 1, 1)) == Color(2, 2, 2)


class TestSerialization:

    @pytest.mark.parametrize("channel, expected", [
        (-0.5, 0),
        (0.0, 0),
        (0.5, 128),
        (0.1, 26),
        (1.0, 255),
        (1.7, 255),
    ])
    def test_to_byte(self, channel, expected):
        assert to_byte(channel) == expected

    def test_to_rgba8_is_opaque(self):
        assert Color(1.0, 0.0, 0.5).to_rgba8() == (255, 0, 128, 255)
        assert Color(-1.0, 2.0, 0.0).to_rgba8() == (0, 255, 0, 255)
