"""A container that lines its children up in a single row."""

from __future__ import annotations

from .container import Container
from .element import Element, Vec2


class HorizontalList(Container):
    """Children side by side in list order, each surrounded by padding."""

    def __init__(self) -> None:
        super().__init__()
        self._padding = 0.0
        self._cells: list[Element] = []

    def __len__(self) -> int:
        return len(self._cells)

    def get_cell(self, index: int) -> Element:
        if not 0 <= index < len(self._cells):
            raise IndexError("Invalid index")
        return self._cells[index]

    def insert(self, index: int, element: Element) -> None:
        if not 0 <= index <= len(self._cells):
            raise IndexError("Invalid index")
        self.adopt(element)
        self._cells.insert(index, element)

    def erase(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexError("Invalid index")
        self.release(self._cells[index])

    def push_front(self, element: Element) -> None:
        self.insert(0, element)

    def pop_front(self) -> None:
        if not self._cells:
            raise IndexError("Attempted to erase from an empty list")
        self.release(self._cells[0])

    def push_back(self, element: Element) -> None:
        self.insert(len(self._cells), element)

    def pop_back(self) -> None:
        if not self._cells:
            raise IndexError("Attempted to erase from an empty list")
        self.release(self._cells[-1])

    def clear(self) -> None:
        super().clear()

    @property
    def padding(self) -> float:
        return self._padding

    @padding.setter
    def padding(self, value: float) -> None:
        self._padding = max(float(value), 0.0)
        self.require_update()

    def update(self) -> Vec2:
        p = self._padding
        x = 0.0
        h = 0.0
        for cell in self._cells:
            cell.pos = (x + p, p)
            x += cell.width + 2.0 * p
            h = max(h, cell.height)
        h += 2.0 * p
        self.set_size((x, h))
        return Vec2(x, h)

    def on_remove_child(self, element: Element) -> None:
        self._cells = [cell for cell in self._cells if cell is not element]