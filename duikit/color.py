"""32-bit ARGB colour values and conversions from hex and HSL notation."""

from __future__ import annotations

TRANSPARENT = 0x00000000
BLACK = 0xFF000000
DARKGRAY = 0xFF444444
GRAY = 0xFF888888
LIGHTGRAY = 0xFFCCCCCC
WHITE = 0xFFFFFFFF
GREEN = 0xFF00FF00
RED = 0xFFFF0000
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00
CYAN = 0xFF00FFFF
MAGENTA = 0xFFFF00FF

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def color_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit components into a 32-bit ARGB colour."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def color_rgb(r: int, g: int, b: int) -> int:
    """Pack an opaque colour from its red, green and blue components."""
    return color_argb(0xFF, r, g, b)


def color_alpha(color: int) -> int:
    """Return the alpha byte of a colour."""
    return (color >> 24) & 0xFF


def color_red(color: int) -> int:
    """Return the red byte of a colour."""
    return (color >> 16) & 0xFF


def color_green(color: int) -> int:
    """Return the green byte of a colour."""
    return (color >> 8) & 0xFF


def color_blue(color: int) -> int:
    """Return the blue byte of a colour."""
    return color & 0xFF


def hex_to_rgb(text: str) -> int:
    """Parse a 3- or 6-digit hex colour such as ``"0f0"`` or ``"00ff00"``.

    Raises ValueError if the text is not exactly three or six hex digits.
    """
    if len(text) not in (3, 6):
        raise ValueError(f"hex colour must have 3 or 6 digits: {text!r}")
    if not all(ch in _HEX_DIGITS for ch in text):
        raise ValueError(f"illegal character in hex colour: {text!r}")

    digits = len(text) // 3
    r, g, b = (int(text[i * digits:(i + 1) * digits], 16) for i in range(3))
    if digits == 1:
        r, g, b = ((c << 4) | c for c in (r, g, b))
    return color_rgb(r, g, b)


def _hue_to_rgb(m1: float, m2: float, h: float) -> float:
    if h < 0.0:
        h += 1.0
    if h > 1.0:
        h -= 1.0
    if h < 1.0 / 6.0:
        return m1 + (m2 - m1) * h * 6.0
    if h < 1.0 / 2.0:
        return m2
    if h < 2.0 / 3.0:
        return m1 + (m2 - m1) * (2.0 / 3.0 - h) * 6.0
    return m1


def hsl_to_rgb(h: float, s: float, l: float) -> int:
    """Convert hue, saturation and lightness (each 0..1) to an opaque colour."""
    if l <= 0.5:
        m2 = l * (s + 1)
    else:
        m2 = l + s - l * s
    m1 = l * 2 - m2
    r = int(255 * _hue_to_rgb(m1, m2, h + 1.0 / 3.0)) & 0xFF
    g = int(255 * _hue_to_rgb(m1, m2, h)) & 0xFF
    b = int(255 * _hue_to_rgb(m1, m2, h - 1.0 / 3.0)) & 0xFF
    return color_rgb(r, g, b)