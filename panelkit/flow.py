"""A container that places its children left to right, wrapping into lines."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Union

from .container import Container
from .element import Element, Vec2


class LayoutStyle(enum.Enum):
    """How an element takes part in a flowing layout."""

    INLINE = "inline"
    BLOCK = "block"
    FLOAT_LEFT = "float_left"
    FLOAT_RIGHT = "float_right"
    FREE = "free"


class WhiteSpaceKind(enum.Enum):
    LINE_BREAK = "line_break"
    PAGE_BREAK = "page_break"
    TAB = "tab"


@dataclass(frozen=True)
class WhiteSpace:
    """A break or tab written into the flow."""

    kind: WhiteSpaceKind
    size: float = 0.0


@dataclass(frozen=True, eq=False)
class ElementLayout:
    """An element written into the flow, with its layout style."""

    element: Element
    style: LayoutStyle = LayoutStyle.INLINE


LayoutObject = Union[ElementLayout, WhiteSpace]


class FlowContainer(Container):
    """Lays children out in reading order, starting a new line when one is full."""

    def __init__(self) -> None:
        super().__init__()
        self._padding = 5.0
        self._layout: list[LayoutObject] = []

    @property
    def padding(self) -> float:
        return self._padding

    @padding.setter
    def padding(self, value: float) -> None:
        self._padding = max(0.0, float(value))

    @property
    def layout(self) -> list[LayoutObject]:
        """The written sequence of elements and white space."""
        return list(self._layout)

    def write_line_break(self) -> None:
        """Make inline elements continue on a new line."""
        self._layout.append(WhiteSpace(WhiteSpaceKind.LINE_BREAK))

    def write_page_break(self, height: float = 0.0) -> None:
        """Make all elements continue on a new line."""
        self._layout.append(WhiteSpace(WhiteSpaceKind.PAGE_BREAK, float(height)))

    def write_tab(self, width: float = 50.0) -> None:
        self._layout.append(WhiteSpace(WhiteSpaceKind.TAB, float(width)))

    def adopt(self, element: Element, style: LayoutStyle = LayoutStyle.INLINE) -> None:
        super().adopt(element)
        self._layout.append(ElementLayout(element, style))

    def add(self, element: Element, style: LayoutStyle = LayoutStyle.INLINE) -> Element:
        """Adopt the element with the given style and return it."""
        self.adopt(element, style)
        return element

    def update(self) -> Vec2:
        avail = self.size
        max_x = 0.0
        max_y = 0.0
        first_of_line = True
        x = self._padding
        y = self._padding
        next_y = 0.0
        for child in self.children():
            child.pos = (x, y)
            s = child.size
            x = float(math.ceil(x + s.x))
            if x >= avail.x and not first_of_line:
                child.pos = (0.0, next_y)
                x = float(math.ceil(s.x))
                y = next_y
                first_of_line = True
            else:
                first_of_line = False
                next_y = float(math.ceil(max(next_y, y + s.y)))
            max_x = max(max_x, s.x)
            max_y = max(max_y, s.y)
        return Vec2(max_x + 2.0 * self._padding, max_y + 2.0 * self._padding)

    def on_remove_child(self, element: Element) -> None:
        self._layout = [
            item
            for item in self._layout
            if not (isinstance(item, ElementLayout) and item.element is element)
        ]