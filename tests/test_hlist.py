import pytest

from panelkit.element import Element, Vec2
from panelkit.hlist import HorizontalList


def _box(w, h):
    e = Element()
    e.set_size((w, h))
    return e


def test_push_back_and_front_order():
    hl = HorizontalList()
    a, b, c = Element(), Element(), Element()
    hl.push_back(a)
    hl.push_back(b)
    hl.push_front(c)
    assert len(hl) == 3
    assert [hl.get_cell(i) for i in range(3)] == [c, a, b]


def test_insert_in_middle():
    hl = HorizontalList()
    a, b, c = Element(), Element(), Element()
    hl.push_back(a)
    hl.push_back(b)
    hl.insert(1, c)
    assert [hl.get_cell(i) for i in range(3)] == [a, c, b]
    assert c.parent_container is hl


def test_insert_invalid_index():
    hl = HorizontalList()
    with pytest.raises(IndexError):
        hl.insert(1, Element())
    assert len(hl) == 0


def test_get_cell_invalid_index():
    hl = HorizontalList()
    hl.push_back(Element())
    with pytest.raises(IndexError):
        hl.get_cell(1)


def test_erase_detaches_element():
    hl = HorizontalList()
    a, b = Element(), Element()
    hl.push_back(a)
    hl.push_back(b)
    hl.erase(0)
    assert len(hl) == 1
    assert hl.get_cell(0) is b
    assert a.parent_container is None


def test_erase_invalid_index():
    with pytest.raises(IndexError):
        HorizontalList().erase(0)


def test_pop_front_and_back():
    hl = HorizontalList()
    a, b, c = Element(), Element(), Element()
    for e in (a, b, c):
        hl.push_back(e)
    hl.pop_front()
    hl.pop_back()
    assert len(hl) == 1
    assert hl.get_cell(0) is b
    assert hl.children() == [b]


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(HorizontalList(), method)()


def test_clear_empties_list():
    hl = HorizontalList()
    hl.push_back(Element())
    hl.push_back(Element())
    hl.clear()
    assert len(hl) == 0
    assert hl.children() == []


def test_negative_padding_clamps_to_zero():
    hl = HorizontalList()
    hl.padding = -4
    assert hl.padding == 0.0


def test_update_lays_out_row():
    hl = HorizontalList()
    hl.padding = 2
    a = _box(10, 5)
    b = _box(20, 8)
    hl.push_back(a)
    hl.push_back(b)
    result = hl.update()
    assert a.pos == Vec2(2, 2)
    assert b.left == a.left + a.width + 2 * 2
    assert b.top == 2
    assert result == Vec2(10 + 20 + 4 * 2, 8 + 2 * 2)
    assert hl.size == result


def test_update_empty_list_has_only_padding():
    hl = HorizontalList()
    hl.padding = 3
    assert hl.update() == Vec2(0, 6)