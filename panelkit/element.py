"""Base user-interface element: position, size, layout updates and tree links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional, Union

_EPSILON = 1e-6
_REALLY_BIG = 1e6


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__


VecLike = Union[Vec2, tuple]


def _vec(value: VecLike) -> Vec2:
    if isinstance(value, Vec2):
        return value
    x, y = value
    return Vec2(float(x), float(y))


def _different(a: float, b: float) -> bool:
    return abs(a - b) > _EPSILON


def _different_vec(a: Vec2, b: Vec2) -> bool:
    return _different(a.x, b.x) or _different(a.y, b.y)


class Element:
    """A rectangular node of the user-interface tree.

    An element belongs to at most one parent container. Layout work is
    deferred: changes mark the element dirty and queue it with the owning
    window, which later calls back to bring it up to date.

    Event hooks such as ``on_move`` may be overridden in subclasses, or
    observed from outside by registering handlers with ``connect``.
    """

    _is_control: ClassVar[bool] = False

    def __init__(self) -> None:
        self._position = Vec2()
        self._size = Vec2()
        self._min_size = Vec2()
        self._max_size = Vec2(_REALLY_BIG, _REALLY_BIG)
        self._visible = True
        self._needs_update = False
        self._is_updating = False
        self._parent: Optional[Any] = None
        self._listeners: dict[str, list[Callable[..., Any]]] = {}

    # event handlers

    def connect(self, event: str, handler: Callable[..., Any]) -> None:
        """Register a handler called whenever the named event hook runs."""
        self._listeners.setdefault(event, []).append(handler)

    def _emit(self, event: str, *args: Any) -> bool:
        """Call the handlers of an event; return True if any consumed it."""
        consumed = False
        for handler in list(self._listeners.get(event, ())):
            if handler(*args):
                consumed = True
        return consumed

    # position relative to the parent container

    def _sync_parent(self) -> None:
        if self._parent is not None:
            self._parent.force_update()

    @property
    def left(self) -> float:
        self._sync_parent()
        return self._position.x

    @left.setter
    def left(self, value: float) -> None:
        if _different(value, self._position.x):
            self._position = Vec2(float(value), self._position.y)
            self._notify_parent_moved()

    @property
    def top(self) -> float:
        self._sync_parent()
        return self._position.y

    @top.setter
    def top(self, value: float) -> None:
        if _different(value, self._position.y):
            self._position = Vec2(self._position.x, float(value))
            self._notify_parent_moved()

    @property
    def pos(self) -> Vec2:
        self._sync_parent()
        return self._position

    @pos.setter
    def pos(self, value: VecLike) -> None:
        value = _vec(value)
        if _different_vec(value, self._position):
            self._position = value
            self._notify_parent_moved()

    def _notify_parent_moved(self) -> None:
        if self._parent is not None:
            self._parent.require_update()

    def root_pos(self) -> Vec2:
        """Return the position relative to the window."""
        parent_pos = self._parent.root_pos() if self._parent is not None else Vec2()
        return self.pos + parent_pos

    def local_mouse_pos(self) -> Vec2:
        """Return the mouse position relative to this element."""
        window = self.parent_window
        if window is None:
            raise RuntimeError("The Element must belong to a window")
        return _vec(window.mouse_position) - self.root_pos()

    def on_move(self) -> None:
        """Called whenever the element's position changes."""
        self._emit("move")

    # size

    @property
    def width(self) -> float:
        self.force_update()
        return self._size.x

    @property
    def height(self) -> float:
        self.force_update()
        return self._size.y

    @property
    def size(self) -> Vec2:
        self.force_update()
        return self._size

    def set_width(self, value: float, force: bool = False) -> None:
        value = abs(float(value))
        if force:
            self._min_size = Vec2(value, self._min_size.y)
            self._max_size = Vec2(value, self._max_size.y)
        else:
            value = min(max(value, self._min_size.x), self._max_size.x)
        if _different(value, self._size.x):
            self._size = Vec2(value, self._size.y)
            self.require_update()

    def set_min_width(self, value: float) -> None:
        value = abs(float(value))
        self._min_size = Vec2(value, self._min_size.y)
        if self._max_size.x < value:
            self._max_size = Vec2(value, self._max_size.y)
        if self._size.x < value:
            self.set_width(value)

    def set_max_width(self, value: float) -> None:
        value = abs(float(value))
        self._max_size = Vec2(value, self._max_size.y)
        if self._min_size.x > value:
            self._min_size = Vec2(value, self._min_size.y)
        if self._size.x > value:
            self.set_width(value)

    def set_height(self, value: float, force: bool = False) -> None:
        value = abs(float(value))
        if force:
            self._min_size = Vec2(self._min_size.x, value)
            self._max_size = Vec2(self._max_size.x, value)
        else:
            value = min(max(value, self._min_size.y), self._max_size.y)
        if _different(value, self._size.y):
            self._size = Vec2(self._size.x, value)
            self.require_update()

    def set_min_height(self, value: float) -> None:
        value = abs(float(value))
        self._min_size = Vec2(self._min_size.x, value)
        if self._max_size.y < value:
            self._max_size = Vec2(self._max_size.x, value)
        if self._size.y < value:
            self.set_height(value)

    def set_max_height(self, value: float) -> None:
        value = abs(float(value))
        self._max_size = Vec2(self._max_size.x, value)
        if self._min_size.y > value:
            self._min_size = Vec2(self._min_size.x, value)
        if self._size.y > value:
            self.set_height(value)

    def set_size(self, value: VecLike, force: bool = False) -> None:
        value = _vec(value)
        self.set_width(value.x, force)
        self.set_height(value.y, force)

    def set_min_size(self, value: VecLike) -> None:
        value = _vec(value)
        self.set_min_width(value.x)
        self.set_min_height(value.y)

    def set_max_size(self, value: VecLike) -> None:
        value = _vec(value)
        self.set_max_width(value.x)
        self.set_max_height(value.y)

    def on_resize(self) -> None:
        """Called whenever the element's size changes."""
        self._emit("resize")

    # hit testing and visibility

    def hit(self, point: VecLike) -> bool:
        """Return True if the point, in the parent's coordinates, lies inside."""
        p = _vec(point)
        return (
            self._position.x <= p.x < self._position.x + self._size.x
            and self._position.y <= p.y < self._position.y + self._size.y
        )

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = bool(value)

    def find_element_at(self, point: VecLike, exclude: Optional[Element] = None) -> Optional[Element]:
        """Return the element hit at the point, or None."""
        if not self._visible or self is exclude:
            return None
        return self if self.hit(point) else None

    # transitions

    def start_transition(
        self,
        duration: float,
        fn: Callable[[float], None],
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        """Ask the window to call fn with progress from 0 to 1 over duration seconds."""
        window = self.parent_window
        if window is not None:
            window.add_transition(self, duration, fn, on_complete)

    def clear_transitions(self) -> None:
        window = self.parent_window
        if window is not None:
            window.remove_transitions(self)

    # tree operations

    def orphan(self) -> Element:
        """Detach from the parent and return self."""
        if self._parent is None:
            raise RuntimeError("Attempted to orphan an element without a parent")
        return self._parent.release(self)

    def bring_to_front(self) -> None:
        """Draw this element in front of its siblings."""
        if self._parent is not None:
            self._parent._raise_child(self)

    def on_remove(self) -> None:
        """Called whenever the element is removed from the interface."""
        self._emit("remove")

    def close(self) -> None:
        """Detach from the parent and discard the element."""
        self.orphan()

    @property
    def parent_container(self) -> Optional[Any]:
        return self._parent

    @property
    def parent_window(self) -> Optional[Any]:
        return self._find_window()

    @property
    def parent_control(self) -> Optional[Any]:
        """The nearest ancestor that is a control, or None."""
        parent = self._parent
        while parent is not None:
            if parent._is_control:
                return parent
            parent = parent._parent
        return None

    # deferred updates

    def require_update(self) -> None:
        """Mark the element dirty and queue it with its window."""
        if not self._needs_update and not self._is_updating:
            window = self.parent_window
            if window is not None:
                window.enqueue_for_update(self)
                self._needs_update = True

    def update(self) -> Vec2:
        """Bring the contents up to date and return the required size."""
        return self._size

    def force_update(self) -> None:
        """Update immediately if the element is dirty."""
        if self._needs_update and not self._is_updating:
            window = self.parent_window
            if window is not None:
                window.update_one_element(self)

    def require_deep_update(self) -> None:
        """Mark this element and all its descendants dirty."""
        if self.parent_window is None:
            return
        pending = [self]
        while pending:
            element = pending.pop()
            element.require_update()
            pending.extend(reversed(element._child_elements()))

    # hooks used by containers and windows

    def _run_update(self) -> Vec2:
        self._is_updating = True
        try:
            required = self.update()
        finally:
            self._is_updating = False
        self._needs_update = False
        return required

    def _attach(self, parent: Any) -> None:
        self._parent = parent

    def _detach(self) -> None:
        self._parent = None

    def _child_elements(self) -> list:
        return []

    def _raise_child(self, child: Element) -> None:
        raise RuntimeError("Element has no children")

    def _find_window(self) -> Optional[Any]:
        if self._parent is not None:
            return self._parent._find_window()
        return None