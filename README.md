# panelkit

panelkit builds trees of user interface elements and computes their layout.
It keeps track of positions, sizes, parents and children, and of focus and
drag state through a window object you supply. It draws nothing itself.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `panelkit.color`
  - `Color(r, g, b, a)`: channels between 0 and 1 (values outside are
    clamped). The properties `red`, `green`, `blue`, `alpha`, `hue`,
    `saturation` and `lightness` can be read and set; setting an RGB channel
    recomputes hue, saturation and lightness, and the other way round.
  - `Color.from_int(0xRRGGBBAA)`, `Color.from_bytes(r, g, b, a)`,
    `Color.hsl(h, s, l, a)`, and `Color.rgb(r, b, g, a)` (note the red, blue,
    green argument order).
  - `to_bytes()` and `to_int()` give the colour back as 8-bit channels or a
    packed `0xRRGGBBAA` integer.
  - `interpolate(c0, c1, t)` blends two colours channel by channel.
- `panelkit.element`
  - `Vec2`: an immutable two-dimensional vector with `+`, `-`, negation and
    scalar `*`.
  - `Element`: position (`left`, `top`, `pos`, `root_pos()`), size (`width`,
    `height`, `size`, `set_width`, `set_size`, minimum and maximum sizes,
    optional `force=True` to fix a size), `visible`, `hit()`,
    `find_element_at()`, `orphan()`, `close()`, `bring_to_front()`, parent
    lookups, and deferred updates (`require_update`, `force_update`,
    `update`, `require_deep_update`). Hooks such as `on_move`, `on_resize`
    and `on_remove` can be overridden, or observed with
    `connect(event, handler)` (for example `connect("resize", fn)`).
- `panelkit.container.Container`: holds ordered children (later ones are in
  front) with `add`, `adopt`, `release`, `clear`, `children()`,
  `find_element_at`, `clipping`, `shrink`, per-child available and required
  sizes, and a `window` property that attaches it to a window object.
- `panelkit.control.Control`: input hooks (`on_left_click`, `on_key_down`,
  `on_scroll`, `on_gain_focus`, ...) that return whether the event was
  consumed, plus `has_focus`, `grab_focus()` and
  `transfer_event_response_to()`.
- `panelkit.draggable.Draggable`: `start_drag()`, `stop_drag()`, `drop()`,
  `dragging` and the `on_drag` hook.
- `panelkit.box.BoxElement`: `background_color`, `border_color` (a `Color`
  or a packed integer), `border_radius`, `border_thickness` and `rect_size`.
- Layout containers:
  - `panelkit.flow.FlowContainer`: places children left to right with
    `padding` (default 5), wrapping onto new lines; `write_line_break`,
    `write_page_break` and `write_tab` record white space in `layout`, and
    `LayoutStyle` tags each child.
  - `panelkit.free.FreeContainer`: positions each child on each axis by a
    `PositionStyle` (`NONE`, `OUTSIDE_BEGIN`, `INSIDE_BEGIN`, `CENTER`,
    `INSIDE_END`, `OUTSIDE_END` and their left/top/right/bottom aliases),
    growing to fit children anchored inside it on both axes.
  - `panelkit.hlist.HorizontalList`: children in one row, with `push_back`,
    `push_front`, `insert`, `erase`, `pop_front`, `pop_back`, `get_cell`,
    `len()` and `padding`.
  - `panelkit.grid.GridContainer`: a table of cells with weighted rows and
    columns (`put_cell`, `get_cell`, `clear_cell`, `set_dimensions`,
    `append_row`, `append_column`, row and column weights). Space is shared
    by weight, but no cell gets less than its child requires.
- `panelkit.context`: `Context.get()` returns the shared context holding the
  open windows; `run()` loops, calling each window's `process_events()`,
  `tick()` and `redraw()`, until no window is left. `program_time` and
  `double_click_time` (0.25 seconds) are available for event handling.

## Example

```python
from panelkit.color import Color, interpolate
from panelkit.element import Element, Vec2
from panelkit.hlist import HorizontalList

red = Color.from_int(0xFF0000FF)
blue = Color(0.0, 0.0, 1.0, 1.0)
purple = interpolate(red, blue, 0.5)

row = HorizontalList()
for width in (10.0, 20.0, 30.0):
    cell = Element()
    cell.set_size(Vec2(width, 5.0))
    row.push_back(cell)

print(len(row))      # 3
print(row.update())  # Vec2(x=60.0, y=5.0)
```

## What it does not do

- There is no window class, no event source and no renderer. Deferred
  updates, focus, dragging, transitions and mouse positions all go through
  a window object that you provide and attach with `Container.window`. The
  package calls these of it: `enqueue_for_update`, `update_one_element`,
  `on_remove_element`, `add_transition`, `remove_transitions`,
  `mouse_position`, `current_control`, `focus_to`, `transfer_response_to`,
  `start_drag`, `stop_drag`, `current_draggable` and `drop_draggable`.
  Without a window, `require_update` does nothing, and layouts are computed
  only when you call `update()` yourself.
- There are no text, button, text entry, slider or menu elements, and no
  fonts.