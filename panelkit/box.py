"""Elements drawn as a filled, bordered, rounded rectangle."""

from __future__ import annotations

from typing import Union

from .color import Color
from .element import Element, Vec2

ColorLike = Union[Color, int]


def _as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return Color(value.red, value.green, value.blue, value.alpha)
    return Color.from_int(value)


class BoxElement(Element):
    """An element with a background, a border and rounded corners."""

    def __init__(self) -> None:
        super().__init__()
        self._border_color = Color(1.0, 1.0, 1.0, 1.0)
        self._background_color = Color(1.0, 1.0, 1.0, 1.0)
        self._border_radius = 0.0
        self._border_thickness = 0.0
        self._rect_size = self.size

    @property
    def border_color(self) -> Color:
        return _as_color(self._border_color)

    @border_color.setter
    def border_color(self, value: ColorLike) -> None:
        self._border_color = _as_color(value)

    @property
    def background_color(self) -> Color:
        return _as_color(self._background_color)

    @background_color.setter
    def background_color(self, value: ColorLike) -> None:
        self._background_color = _as_color(value)

    @property
    def border_radius(self) -> float:
        return self._border_radius

    @border_radius.setter
    def border_radius(self, value: float) -> None:
        self._border_radius = float(value)

    @property
    def border_thickness(self) -> float:
        return self._border_thickness

    @border_thickness.setter
    def border_thickness(self, value: float) -> None:
        self._border_thickness = float(value)

    @property
    def rect_size(self) -> Vec2:
        """The size of the drawn rectangle, refreshed on resize."""
        return self._rect_size

    def on_resize(self) -> None:
        super().on_resize()
        self._rect_size = self.size