"""Elements that receive mouse, keyboard and focus events."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from .element import Element


class Control(Element):
    """An element that reacts to input.

    Event handlers returning a bool report whether the event was consumed.
    By default an event is consumed only if a handler registered with
    ``connect`` under the event's name reports so.
    """

    _is_control: ClassVar[bool] = True

    def on_left_click(self, clicks: int) -> bool:
        return self._emit("left_click", clicks)

    def on_middle_click(self, clicks: int) -> bool:
        return self._emit("middle_click", clicks)

    def on_right_click(self, clicks: int) -> bool:
        return self._emit("right_click", clicks)

    def on_left_release(self) -> None:
        self._emit("left_release")

    def on_middle_release(self) -> None:
        self._emit("middle_release")

    def on_right_release(self) -> None:
        self._emit("right_release")

    @property
    def left_mouse_down(self) -> bool:
        return False

    @property
    def middle_mouse_down(self) -> bool:
        return False

    @property
    def right_mouse_down(self) -> bool:
        return False

    def on_mouse_over(self) -> None:
        self._emit("mouse_over")

    def on_mouse_out(self) -> None:
        self._emit("mouse_out")

    def on_hover(self, draggable: Any) -> bool:
        return self._emit("hover", draggable)

    def on_drop(self, draggable: Any) -> bool:
        return self._emit("drop", draggable)

    def on_key_down(self, key: Any) -> bool:
        return self._emit("key_down", key)

    def on_key_up(self, key: Any) -> None:
        self._emit("key_up", key)

    def on_scroll(self, delta: Any) -> bool:
        return self._emit("scroll", delta)

    def on_gain_focus(self) -> None:
        self._emit("gain_focus")

    def on_lose_focus(self) -> None:
        self._emit("lose_focus")

    @property
    def has_focus(self) -> bool:
        window = self.parent_window
        if window is None:
            return False
        return window.current_control is self

    def grab_focus(self) -> None:
        window = self.parent_window
        if window is not None:
            window.focus_to(self)

    def transfer_event_response_to(self, other: Optional[Control]) -> None:
        """Hand the current mouse interaction over to another control."""
        window = self.parent_window
        if window is not None:
            window.transfer_response_to(other)