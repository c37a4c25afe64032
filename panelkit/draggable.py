"""Elements that can be dragged with the mouse and dropped."""

from __future__ import annotations

from typing import Any

from .element import Element, Vec2, _vec


class Draggable(Element):
    """An element that its window can move along with the mouse."""

    def start_drag(self) -> None:
        window = self.parent_window
        if window is not None:
            window.start_drag(self, self.local_mouse_pos())

    def stop_drag(self) -> None:
        window = self.parent_window
        if window is not None and window.current_draggable is self:
            window.stop_drag()

    def on_drag(self) -> None:
        """Called whenever the element is moved by dragging."""
        self._emit("drag")

    def drop(self, local_point: Any = (0.0, 0.0)) -> bool:
        """Drop onto whatever lies under the given local point."""
        window = self.parent_window
        if window is None:
            return False
        return bool(window.drop_draggable(self, self.root_pos() + _vec(local_point)))

    @property
    def dragging(self) -> bool:
        window = self.parent_window
        if window is None:
            return False
        return window.current_draggable is self


__all__ = ["Draggable", "Vec2"]