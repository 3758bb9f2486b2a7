import pytest

from duikit.color import (
    BLACK,
    GREEN,
    RED,
    WHITE,
    color_alpha,
    color_argb,
    color_blue,
    color_green,
    color_red,
    color_rgb,
    hex_to_rgb,
    hsl_to_rgb,
)


def test_rgb_green_matches_named_constant():
    assert color_rgb(0, 255, 0) == GREEN


def test_rgb_is_opaque():
    assert color_alpha(color_rgb(12, 34, 56)) == 0xFF


@pytest.mark.parametrize("a,r,g,b", [(0, 0, 0, 0), (255, 1, 2, 3), (128, 200, 100, 50)])
def test_argb_components_round_trip(a, r, g, b):
    color = color_argb(a, r, g, b)
    assert color_alpha(color) == a
    assert color_red(color) == r
    assert color_green(color) == g
    assert color_blue(color) == b


def test_hex_six_digits():
    assert hex_to_rgb("00ff00") == color_rgb(0, 255, 0)


def test_hex_three_digits_replicates_each_digit():
    assert hex_to_rgb("0f0") == hex_to_rgb("00ff00")
    assert hex_to_rgb("FFF") == WHITE


def test_hex_is_case_insensitive():
    assert hex_to_rgb("AbCdEf") == hex_to_rgb("abcdef")


@pytest.mark.parametrize("text", ["", "12345", "ggg", "#fff", "12 456", "0x0f0f"])
def test_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        hex_to_rgb(text)


def test_hsl_black_and_white():
    assert hsl_to_rgb(0.0, 0.0, 0.0) == BLACK
    assert hsl_to_rgb(0.0, 0.0, 1.0) == WHITE


def test_hsl_pure_red():
    assert hsl_to_rgb(0.0, 1.0, 0.5) == RED


def test_hsl_gray_has_equal_components():
    color = hsl_to_rgb(0.3, 0.0, 0.4)
    assert color_red(color) == color_green(color) == color_blue(color)
    assert color_alpha(color) == 0xFF