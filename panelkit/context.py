"""The process-wide event loop driving every open window."""

from __future__ import annotations

import time
from typing import Any, ClassVar, Optional

_DOUBLE_CLICK_SECONDS = 0.25


class Context:
    """Holds the open windows and runs them until none is left.

    A window is any object with process_events(), tick() and redraw().
    """

    _instance: ClassVar[Optional[Context]] = None

    def __init__(self) -> None:
        self._windows: list[Any] = []
        self._start = time.monotonic()
        self._cached_time = 0.0

    @classmethod
    def get(cls) -> Context:
        """Return the shared context, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_window(self, window: Any) -> None:
        self._windows.append(window)

    def remove_window(self, window: Any) -> None:
        self._windows = [w for w in self._windows if w is not window]

    @property
    def windows(self) -> tuple:
        return tuple(self._windows)

    def run(self) -> None:
        """Process events, tick and redraw every window until all are removed."""
        while self._windows:
            self._cached_time = time.monotonic() - self._start
            for window in list(self._windows):
                window.process_events()
            for window in list(self._windows):
                window.tick()
                window.redraw()

    @property
    def program_time(self) -> float:
        """Seconds since the context started, as of the current frame."""
        return self._cached_time

    @property
    def double_click_time(self) -> float:
        """Longest gap in seconds between the clicks of a double click."""
        return _DOUBLE_CLICK_SECONDS


def run() -> None:
    """Run the shared context's event loop."""
    Context.get().run()