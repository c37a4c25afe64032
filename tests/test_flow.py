import pytest

from panelkit.element import Element, Vec2
from panelkit.flow import (
    ElementLayout,
    FlowContainer,
    LayoutStyle,
    WhiteSpace,
    WhiteSpaceKind,
)


def _box(w, h):
    e = Element()
    e.set_size((w, h))
    return e


def test_default_padding():
    assert FlowContainer().padding == 5.0


def test_negative_padding_clamps_to_zero():
    fc = FlowContainer()
    fc.padding = -3.0
    assert fc.padding == 0.0


def test_write_tab_default_width():
    fc = FlowContainer()
    fc.write_tab()
    assert fc.layout == [WhiteSpace(WhiteSpaceKind.TAB, 50.0)]


def test_line_and_page_breaks_recorded_in_order():
    fc = FlowContainer()
    fc.write_line_break()
    fc.write_page_break(12.0)
    assert fc.layout == [
        WhiteSpace(WhiteSpaceKind.LINE_BREAK, 0.0),
        WhiteSpace(WhiteSpaceKind.PAGE_BREAK, 12.0),
    ]


def test_add_records_element_layout():
    fc = FlowContainer()
    e = Element()
    assert fc.add(e, LayoutStyle.BLOCK) is e
    item = fc.layout[0]
    assert isinstance(item, ElementLayout)
    assert item.element is e
    assert item.style is LayoutStyle.BLOCK
    assert fc.children() == [e]
    assert e.parent_container is fc


def test_adopt_defaults_to_inline():
    fc = FlowContainer()
    e = Element()
    fc.adopt(e)
    assert fc.layout[0].style is LayoutStyle.INLINE


def test_release_removes_only_element_layout():
    fc = FlowContainer()
    e = Element()
    fc.add(e)
    fc.write_line_break()
    fc.release(e)
    assert fc.layout == [WhiteSpace(WhiteSpaceKind.LINE_BREAK, 0.0)]
    assert fc.children() == []


def test_adopting_parented_element_fails_without_layout_entry():
    a = FlowContainer()
    b = FlowContainer()
    e = Element()
    a.add(e)
    with pytest.raises(ValueError):
        b.adopt(e)
    assert b.layout == []


def test_update_places_children_on_one_line():
    fc = FlowContainer()
    fc.set_size((100, 100))
    a = fc.add(_box(20, 10))
    b = fc.add(_box(30, 15))
    result = fc.update()
    assert a.pos == Vec2(fc.padding, fc.padding)
    assert b.pos == Vec2(a.left + a.width, fc.padding)
    assert result == Vec2(30 + 2 * fc.padding, 15 + 2 * fc.padding)


def test_update_wraps_when_line_is_full():
    fc = FlowContainer()
    fc.set_size((40, 100))
    a = fc.add(_box(20, 10))
    b = fc.add(_box(30, 15))
    fc.update()
    assert b.left == 0.0
    assert b.top == a.top + a.height


def test_first_element_of_line_never_wraps():
    fc = FlowContainer()
    fc.set_size((10, 10))
    a = fc.add(_box(50, 5))
    fc.update()
    assert a.pos == Vec2(fc.padding, fc.padding)