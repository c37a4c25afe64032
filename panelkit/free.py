"""A container that positions children relative to its own edges."""

from __future__ import annotations

import enum
import math
from typing import Optional

from .container import Container
from .element import Element, Vec2


class PositionStyle(enum.IntEnum):
    """How a free element is positioned relative to its parent on one axis."""

    NONE = 0
    OUTSIDE_BEGIN = 1
    OUTSIDE_LEFT = 1
    OUTSIDE_TOP = 1
    INSIDE_BEGIN = 2
    INSIDE_LEFT = 2
    INSIDE_TOP = 2
    CENTER = 3
    INSIDE_END = 4
    INSIDE_RIGHT = 4
    INSIDE_BOTTOM = 4
    OUTSIDE_END = 5
    OUTSIDE_RIGHT = 5
    OUTSIDE_BOTTOM = 5


_CONSTRAINING = frozenset(
    {PositionStyle.INSIDE_BEGIN, PositionStyle.INSIDE_END, PositionStyle.CENTER}
)


def _compute_position(style: PositionStyle, size: float, epos: float, esize: float) -> float:
    if style is PositionStyle.OUTSIDE_BEGIN:
        return -esize
    if style is PositionStyle.INSIDE_BEGIN:
        return 0.0
    if style is PositionStyle.CENTER:
        return size * 0.5 - esize * 0.5
    if style is PositionStyle.INSIDE_END:
        return size - esize
    if style is PositionStyle.OUTSIDE_END:
        return size
    return epos


class FreeContainer(Container):
    """Children keep their own position or are anchored to the container's edges."""

    def __init__(self) -> None:
        super().__init__()
        self._styles: dict[Element, tuple[PositionStyle, PositionStyle]] = {}

    def adopt(
        self,
        element: Element,
        x_style: PositionStyle = PositionStyle.NONE,
        y_style: PositionStyle = PositionStyle.NONE,
    ) -> None:
        super().adopt(element)
        self._styles.setdefault(element, (PositionStyle(x_style), PositionStyle(y_style)))

    def add(
        self,
        element: Element,
        x_style: PositionStyle = PositionStyle.NONE,
        y_style: PositionStyle = PositionStyle.NONE,
    ) -> Element:
        """Adopt the element with the given styles and return it."""
        self.adopt(element, x_style, y_style)
        self.require_deep_update()
        return element

    def release(self, element: Element) -> Element:
        released = super().release(element)
        self._styles.pop(element, None)
        return released

    def set_element_style(
        self, element: Element, x_style: PositionStyle, y_style: PositionStyle
    ) -> None:
        if element not in self._styles:
            raise KeyError("No such element")
        new = (PositionStyle(x_style), PositionStyle(y_style))
        if self._styles[element] != new:
            self._styles[element] = new
            self.require_update()

    def element_style(self, element: Element) -> tuple[PositionStyle, PositionStyle]:
        """Return the (horizontal, vertical) style of a child."""
        try:
            return self._styles[element]
        except KeyError:
            raise KeyError("No such element") from None

    def update(self) -> Vec2:
        max_x = 0.0
        max_y = 0.0

        def place_all() -> bool:
            nonlocal max_x, max_y
            for elem in self.children():
                x_style, y_style = self._styles[elem]
                x = _compute_position(x_style, self.width, elem.left, elem.width)
                y = _compute_position(y_style, self.height, elem.top, elem.height)
                elem.pos = (math.floor(x), math.floor(y))
                required = self.get_required_size(elem)
                if x_style in _CONSTRAINING and y_style in _CONSTRAINING:
                    max_x = max(max_x, required.x)
                    max_y = max(max_y, required.y)

            changed = False
            if max_x > self.width:
                self.set_width(max_x)
                changed = True
            if max_y > self.height:
                self.set_height(max_y)
                changed = True
            return changed

        if place_all():
            place_all()
        return Vec2(max_x, max_y)

    def on_remove_child(self, element: Optional[Element]) -> None:
        self._styles.pop(element, None)