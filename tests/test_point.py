import pytest

from riotty.point import (
    Anchor,
    CursorShape,
    Dimensions,
    Pos,
    SelectionRange,
    Side,
)


def test_pos_orders_by_row_then_column():
    assert Pos(0, 4) < Pos(1, 0)
    assert Pos(1, 1) < Pos(1, 2)
    assert sorted([Pos(2, 0), Pos(0, 3), Pos(0, 1)]) == [Pos(0, 1), Pos(0, 3), Pos(2, 0)]
    assert max(Pos(-1, 9), Pos(0, 0)) == Pos(0, 0)


def test_dimensions_without_history():
    dims = Dimensions(10, 5)
    assert dims.bottommost_line() == 9
    assert dims.topmost_line() == 0
    assert dims.last_column() == 4
    assert dims.total_lines == dims.screen_lines


def test_dimensions_with_history():
    dims = Dimensions(screen_lines=10, columns=5, history_size=7)
    assert dims.topmost_line() == -7
    assert dims.total_lines == dims.screen_lines + dims.history_size
    assert dims.bottommost_line() - dims.topmost_line() + 1 == dims.total_lines


@pytest.mark.parametrize("lines, columns, history", [(0, 5, 0), (5, 0, 0), (5, 5, -1)])
def test_dimensions_rejects_bad_sizes(lines, columns, history):
    with pytest.raises(ValueError):
        Dimensions(lines, columns, history)


def test_pos_clamp_to():
    dims = Dimensions(10, 5, history_size=2)
    assert Pos(-5, 3).clamp_to(dims) == Pos(dims.topmost_line(), 0)
    assert Pos(20, 1).clamp_to(dims) == Pos(dims.bottommost_line(), dims.last_column())
    assert Pos(3, 2).clamp_to(dims) == Pos(3, 2)


def test_anchor_equality_includes_side():
    assert Anchor(Pos(1, 1), Side.LEFT) == Anchor(Pos(1, 1), Side.LEFT)
    assert not Anchor(Pos(1, 1), Side.LEFT) == Anchor(Pos(1, 1), Side.RIGHT)


def test_selection_range_rejects_reversed_points():
    with pytest.raises(ValueError):
        SelectionRange(Pos(2, 0), Pos(1, 0))


def test_simple_range_contains_wraps_lines():
    sel = SelectionRange(Pos(0, 2), Pos(1, 1))
    assert sel.contains(Pos(0, 2))
    assert sel.contains(Pos(0, 4))
    assert sel.contains(Pos(1, 0))
    assert sel.contains(Pos(1, 1))
    assert not sel.contains(Pos(0, 1))
    assert not sel.contains(Pos(1, 2))
    assert not sel.contains(Pos(2, 0))


def test_block_range_contains_rectangle_only():
    sel = SelectionRange(Pos(0, 2), Pos(5, 3), is_block=True)
    assert sel.contains(Pos(3, 2))
    assert sel.contains(Pos(3, 3))
    assert not sel.contains(Pos(3, 1))
    assert not sel.contains(Pos(3, 4))
    assert not sel.contains(Pos(6, 2))


def test_contains_square_skips_block_cursor_on_boundary():
    sel = SelectionRange(Pos(0, 1), Pos(2, 3))
    assert not sel.contains_square(Pos(0, 1), False, Pos(0, 1), CursorShape.BLOCK)
    assert not sel.contains_square(Pos(2, 3), False, Pos(2, 3), CursorShape.BLOCK)
    assert sel.contains_square(Pos(0, 1), False, Pos(0, 1), CursorShape.BEAM)
    assert sel.contains_square(Pos(1, 0), False, Pos(1, 0), CursorShape.BLOCK)


def test_contains_square_skips_block_corners():
    sel = SelectionRange(Pos(0, 1), Pos(2, 3), is_block=True)
    assert not sel.contains_square(Pos(0, 3), False, Pos(0, 3), CursorShape.BLOCK)
    assert not sel.contains_square(Pos(2, 1), False, Pos(2, 1), CursorShape.BLOCK)
    assert sel.contains_square(Pos(0, 3), False, Pos(5, 5), CursorShape.BLOCK)


def test_contains_square_wide_char_spacer():
    sel = SelectionRange(Pos(0, 3), Pos(0, 4))
    assert sel.contains_square(Pos(0, 2), True, Pos(9, 9), CursorShape.BLOCK)
    assert not sel.contains_square(Pos(0, 2), False, Pos(9, 9), CursorShape.BLOCK)