"""A container that arranges children in a weighted table of cells."""

from __future__ import annotations

from typing import Optional, Sequence

from .container import Container
from .element import Element, Vec2


def _positions(total: float, weights: Sequence[float]) -> list[float]:
    """Return the edges of consecutive slots sharing total by weight."""
    weight_sum = sum(weights)
    edges = [0.0]
    acc = 0.0
    for weight in weights:
        acc += total * weight / weight_sum if weight_sum else 0.0
        edges.append(acc)
    return edges


def _collapse_and_distribute(
    minimum_sizes: Sequence[float], avail_size: float, weights: Sequence[float]
) -> list[float]:
    """Share avail_size by weight, giving each slot at least its minimum.

    Slots whose weighted share falls below their minimum are fixed at that
    minimum and taken out of the sharing; the rest is shared again.
    """
    active = list(range(len(minimum_sizes)))
    assigned = [0.0] * len(minimum_sizes)

    def divide_remaining() -> None:
        total_weight = sum(weights[i] for i in active)
        for i in active:
            assigned[i] = avail_size * weights[i] / total_weight if total_weight else 0.0

    divide_remaining()
    while True:
        short = next((i for i in active if assigned[i] < minimum_sizes[i]), None)
        if short is None:
            return assigned
        avail_size -= minimum_sizes[short]
        assigned[short] = minimum_sizes[short]
        active.remove(short)
        divide_remaining()


class GridContainer(Container):
    """Children placed in cells of a grid whose rows and columns have weights."""

    def __init__(self, columns: int = 1, rows: int = 1) -> None:
        super().__init__()
        self._cells: list[list[Optional[Element]]] = [[None] * columns for _ in range(rows)]
        self._widths: list[float] = [1.0] * columns
        self._heights: list[float] = [1.0] * rows

    @property
    def rows(self) -> int:
        return len(self._heights)

    @property
    def columns(self) -> int:
        return len(self._widths)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise IndexError("Invalid row")

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.columns:
            raise IndexError("Invalid column")

    def set_rows(self, rows: int) -> None:
        """Grow or shrink to the given number of rows, releasing removed cells."""
        if rows < 0:
            raise ValueError("Row count must not be negative")
        while self.rows > rows:
            for child in self._cells[-1]:
                if child is not None:
                    self.release(child)
            self._cells.pop()
            self._heights.pop()
        while self.rows < rows:
            self._cells.append([None] * self.columns)
            self._heights.append(1.0)

    def set_columns(self, columns: int) -> None:
        """Grow or shrink to the given number of columns, releasing removed cells."""
        if columns < 0:
            raise ValueError("Column count must not be negative")
        while self.columns > columns:
            for row in self._cells:
                if row[-1] is not None:
                    self.release(row[-1])
                row.pop()
            self._widths.pop()
        while self.columns < columns:
            for row in self._cells:
                row.append(None)
            self._widths.append(1.0)

    def set_dimensions(self, columns: int, rows: int) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("A grid needs at least one row and one column")
        self.set_columns(columns)
        self.set_rows(rows)

    def append_row(self, weight: float = 1.0) -> None:
        self.set_rows(self.rows + 1)
        self.set_row_weight(self.rows - 1, weight)

    def append_column(self, weight: float = 1.0) -> None:
        self.set_columns(self.columns + 1)
        self.set_column_weight(self.columns - 1, weight)

    def set_row_weight(self, row: int, weight: float) -> None:
        self._check_row(row)
        self._heights[row] = float(weight)

    def set_column_weight(self, column: int, weight: float) -> None:
        self._check_column(column)
        self._widths[column] = float(weight)

    def row_weight(self, row: int) -> float:
        self._check_row(row)
        return self._heights[row]

    def column_weight(self, column: int) -> float:
        self._check_column(column)
        return self._widths[column]

    def put_cell(self, column: int, row: int, element: Optional[Element]) -> None:
        """Place an element in a cell, releasing whatever was there before."""
        self._check_row(row)
        self._check_column(column)
        previous = self._cells[row][column]
        if previous is not None:
            self.release(previous)
        if element is not None:
            self.adopt(element)
            self._cells[row][column] = element

    def clear_cell(self, column: int, row: int) -> None:
        self.put_cell(column, row, None)

    def get_cell(self, column: int, row: int) -> Optional[Element]:
        self._check_row(row)
        self._check_column(column)
        return self._cells[row][column]

    def _place_cells(
        self, widths: Sequence[float], heights: Sequence[float]
    ) -> tuple[list[float], list[float]]:
        row_positions = _positions(self.height, heights)
        col_positions = _positions(self.width, widths)
        min_widths = [0.0] * self.columns
        min_heights = [0.0] * self.rows
        for i, row in enumerate(self._cells):
            for j, child in enumerate(row):
                if child is None:
                    continue
                child.pos = (col_positions[j], row_positions[i])
                self.set_available_size(
                    child,
                    (
                        col_positions[j + 1] - col_positions[j],
                        row_positions[i + 1] - row_positions[i],
                    ),
                )
                required = self.get_required_size(child)
                min_widths[j] = max(min_widths[j], required.x)
                min_heights[i] = max(min_heights[i], required.y)
        return min_widths, min_heights

    def update(self) -> Vec2:
        if self.rows == 0 or self.columns == 0:
            return Vec2()

        required_widths, required_heights = self._place_cells(self._widths, self._heights)
        min_width = sum(required_widths)
        min_height = sum(required_heights)

        if self.width < min_width:
            self.set_width(min_width)
        if self.height < min_height:
            self.set_height(min_height)

        avail = self.size
        new_widths = _collapse_and_distribute(required_widths, avail.x, self._widths)
        new_heights = _collapse_and_distribute(required_heights, avail.y, self._heights)
        self._place_cells(new_widths, new_heights)

        return Vec2(min_width, min_height)

    def on_remove_child(self, element: Element) -> None:
        for row in self._cells:
            for j, child in enumerate(row):
                if child is element:
                    row[j] = None
                    return