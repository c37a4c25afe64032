"""Elements that own and lay out other elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .element import Element, Vec2, _vec

_EPSILON = 1e-6


def _moved(a: Vec2, b: Vec2) -> bool:
    return abs(a.x - b.x) > _EPSILON or abs(a.y - b.y) > _EPSILON


def _notify_removed(element: Element) -> None:
    element.on_remove()
    for child in element._child_elements():
        _notify_removed(child)


@dataclass(eq=False)
class _ChildData:
    child: Element
    available_size: Optional[Vec2] = None
    previous_size: Optional[Vec2] = None
    required_size: Optional[Vec2] = None
    previous_pos: Optional[Vec2] = None


class Container(Element):
    """An element holding an ordered list of children; later children are in front."""

    def __init__(self) -> None:
        self._children: list[_ChildData] = []
        self._parent_window: Optional[Any] = None
        self._clipping = False
        self._shrink = False
        super().__init__()

    @property
    def clipping(self) -> bool:
        """Whether children are cut off at the container's edges."""
        return self._clipping

    @clipping.setter
    def clipping(self, enabled: bool) -> None:
        self._clipping = bool(enabled)

    @property
    def shrink(self) -> bool:
        return self._shrink

    @shrink.setter
    def shrink(self, enable: bool) -> None:
        enable = bool(enable)
        if self._shrink != enable:
            self._shrink = enable
            if enable:
                self.require_deep_update()

    # children

    def add(self, element: Element) -> Element:
        """Adopt the element, mark the subtree dirty and return the element."""
        self.adopt(element)
        self.require_deep_update()
        return element

    def adopt(self, element: Element) -> None:
        """Take ownership of an element that has no parent."""
        if element.parent_container is not None:
            raise ValueError("Element already has a parent")
        element._attach(self)
        self._children.append(_ChildData(element))
        self.require_deep_update()

    def release(self, element: Element) -> Element:
        """Detach a child, notify it and its descendants, and return it."""
        entry = next((cd for cd in self._children if cd.child is element), None)
        if entry is None:
            raise RuntimeError("Attempted to remove a nonexistent child element")
        window = self.window
        if window is not None:
            window.on_remove_element(element)
        _notify_removed(element)
        self.on_remove_child(element)
        element._detach()
        self._children = [cd for cd in self._children if cd is not entry]
        self.require_update()
        return element

    def clear(self) -> None:
        """Release every child, last first."""
        while self._children:
            self.release(self._children[-1].child)

    def on_remove_child(self, element: Element) -> None:
        """Called just before a child is detached."""

    def children(self) -> list[Element]:
        return [cd.child for cd in self._children]

    # layout bookkeeping

    def _entry(self, child: Element) -> _ChildData:
        for cd in self._children:
            if cd.child is child:
                return cd
        raise ValueError("Element is not a child of this container")

    def _select(self, which: Optional[Element]) -> Iterator[_ChildData]:
        return (cd for cd in self._children if which is None or cd.child is which)

    def set_available_size(self, child: Element, size: Any) -> None:
        """Set the space the child is allowed to fill."""
        size = _vec(size)
        entry = self._entry(child)
        if entry.available_size is None or _moved(entry.available_size, size):
            child.require_update()
        entry.available_size = size

    def unset_available_size(self, child: Element) -> None:
        entry = self._entry(child)
        if entry.available_size is not None:
            child.require_update()
        entry.available_size = None

    def get_available_size(self, child: Element) -> Optional[Vec2]:
        return self._entry(child).available_size

    def get_required_size(self, child: Element) -> Vec2:
        """Bring the child up to date and return the size it asked for."""
        entry = self._entry(child)
        if entry.required_size is None:
            child.require_update()
        child.force_update()
        return entry.required_size if entry.required_size is not None else Vec2()

    def set_required_size(self, child: Element, size: Any) -> None:
        self._entry(child).required_size = _vec(size)

    def update_previous_sizes(self, which: Optional[Element] = None) -> None:
        """Record the current size of one child, or of all children."""
        for cd in self._select(which):
            cd.previous_size = cd.child._size

    def get_previous_size(self, child: Element) -> Optional[Vec2]:
        return self._entry(child).previous_size

    def update_positions(self, which: Optional[Element] = None) -> None:
        """Call on_move on every selected child whose position changed."""
        for cd in self._select(which):
            position = cd.child._position
            if cd.previous_pos is None or _moved(cd.previous_pos, position):
                cd.previous_pos = position
                cd.child.on_move()

    # hit testing

    def find_element_at(self, point: Any, exclude: Optional[Element] = None) -> Optional[Element]:
        if self is exclude:
            return None
        point = _vec(point)
        hit_this = self.hit(point)
        if self._clipping and not hit_this:
            return None
        local = point - self.pos
        for cd in reversed(self._children):
            found = cd.child.find_element_at(local, exclude)
            if found is not None:
                return found
        return self if hit_this else None

    # window

    @property
    def window(self) -> Optional[Any]:
        """The window this container belongs to, directly or through its parents."""
        return self._find_window()

    @window.setter
    def window(self, value: Optional[Any]) -> None:
        self._parent_window = value

    def _find_window(self) -> Optional[Any]:
        if self._parent_window is not None:
            return self._parent_window
        return super()._find_window()

    def _child_elements(self) -> list:
        return self.children()

    def _raise_child(self, child: Element) -> None:
        entry = self._entry(child)
        self._children = [cd for cd in self._children if cd is not entry]
        self._children.append(entry)