"""RGBA colours with cached hue, saturation and lightness."""

from __future__ import annotations

import math

_BYTE_EPSILON = 1e-9


def _clamp(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


def _to_byte(value: float) -> int:
    return min(255, max(0, math.floor(255.0 * value + _BYTE_EPSILON)))


class Color:
    """A colour whose components all lie between 0 and 1.

    The red, green and blue channels are kept in step with hue, saturation
    and lightness: changing one representation updates the other.
    """

    __slots__ = ("_r", "_g", "_b", "_h", "_s", "_l", "_a")

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0, a: float = 1.0) -> None:
        self._r = _clamp(r)
        self._g = _clamp(g)
        self._b = _clamp(b)
        self._a = _clamp(a)
        self._h = 0.0
        self._s = 0.0
        self._l = 0.0
        self._update_hsl_from_rgb()

    @classmethod
    def from_int(cls, rgba: int) -> Color:
        """Build a colour from a packed 0xRRGGBBAA integer."""
        rgba = int(rgba) & 0xFFFFFFFF
        return cls(
            ((rgba >> 24) & 0xFF) / 255.0,
            ((rgba >> 16) & 0xFF) / 255.0,
            ((rgba >> 8) & 0xFF) / 255.0,
            (rgba & 0xFF) / 255.0,
        )

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Build a colour from 8-bit channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def rgb(cls, r: float, b: float, g: float, a: float = 1.0) -> Color:
        """Build a colour from channels given in red, blue, green order."""
        return cls(r, g, b, a)

    @classmethod
    def hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:  # noqa: E741
        """Build a colour from hue, saturation and lightness."""
        color = cls(0.0, 0.0, 0.0, a)
        color._h = h - math.floor(h)
        color._s = _clamp(s)
        color._l = _clamp(l)
        color._update_rgb_from_hsl()
        return color

    @property
    def red(self) -> float:
        return self._r

    @red.setter
    def red(self, value: float) -> None:
        self._r = _clamp(value)
        self._update_hsl_from_rgb()

    @property
    def green(self) -> float:
        return self._g

    @green.setter
    def green(self, value: float) -> None:
        self._g = _clamp(value)
        self._update_hsl_from_rgb()

    @property
    def blue(self) -> float:
        return self._b

    @blue.setter
    def blue(self, value: float) -> None:
        self._b = _clamp(value)
        self._update_hsl_from_rgb()

    @property
    def hue(self) -> float:
        return self._h

    @hue.setter
    def hue(self, value: float) -> None:
        self._h = value - math.floor(value)
        self._update_rgb_from_hsl()

    @property
    def saturation(self) -> float:
        return self._s

    @saturation.setter
    def saturation(self, value: float) -> None:
        self._s = _clamp(value)
        self._update_rgb_from_hsl()

    @property
    def lightness(self) -> float:
        return self._l

    @lightness.setter
    def lightness(self, value: float) -> None:
        self._l = _clamp(value)
        self._update_rgb_from_hsl()

    @property
    def alpha(self) -> float:
        return self._a

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._a = _clamp(value)

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Return the colour as four 8-bit channel values."""
        return (_to_byte(self._r), _to_byte(self._g), _to_byte(self._b), _to_byte(self._a))

    def to_int(self) -> int:
        """Return the colour packed as 0xRRGGBBAA."""
        r, g, b, a = self.to_bytes()
        return (r << 24) | (g << 16) | (b << 8) | a

    def _update_rgb_from_hsl(self) -> None:
        h1 = (self._h % 1.0) * 6.0
        c = (1.0 - abs(2.0 * self._l - 1.0)) * self._s
        x = c * (1.0 - abs(h1 % 2.0 - 1.0))
        sector = int(math.floor(h1)) % 6
        r, g, b = (
            (c, x, 0.0),
            (x, c, 0.0),
            (0.0, c, x),
            (0.0, x, c),
            (x, 0.0, c),
            (c, 0.0, x),
        )[sector]
        m = self._l - c * 0.5
        self._r = _clamp(r + m)
        self._g = _clamp(g + m)
        self._b = _clamp(b + m)

    def _update_hsl_from_rgb(self) -> None:
        r, g, b = self._r, self._g, self._b
        high = max(r, g, b)
        low = min(r, g, b)
        chroma = high - low
        self._l = (high + low) / 2.0
        if chroma == 0.0:
            self._h = 0.0
            self._s = 0.0
            return
        if r >= max(g, b):
            x = (g - b) / chroma / 6.0
            self._h = x - math.floor(x)
        elif g >= max(r, b):
            self._h = ((b - r) / chroma + 2.0) / 6.0
        else:
            self._h = ((r - g) / chroma + 4.0) / 6.0
        denominator = 1.0 - abs(2.0 * self._l - 1.0)
        self._s = _clamp(chroma / denominator) if denominator > 0.0 else 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self._r, self._g, self._b, self._a) == (other._r, other._g, other._b, other._a)

    def __repr__(self) -> str:
        return f"Color(r={self._r:.4g}, g={self._g:.4g}, b={self._b:.4g}, a={self._a:.4g})"


def interpolate(c0: Color, c1: Color, t: float) -> Color:
    """Blend linearly from c0 (t=0) to c1 (t=1), channel by channel."""
    return Color(
        (1.0 - t) * c0.red + t * c1.red,
        (1.0 - t) * c0.green + t * c1.green,
        (1.0 - t) * c0.blue + t * c1.blue,
        (1.0 - t) * c0.alpha + t * c1.alpha,
    )