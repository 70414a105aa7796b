"""Text selection state and its conversion into ranges of grid cells.

A selection starts when the mouse is pressed and follows the pointer until the
button is released. Four kinds are supported: simple selections track exactly
which cells are covered, block selections cover rectangles, semantic
selections grow to whole words and line selections grow to whole lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Protocol

from riotty.point import Anchor, Dimensions, Pos, SelectionRange, Side


class SelectionType(Enum):
    """The different kinds of selection."""

    SIMPLE = "simple"
    BLOCK = "block"
    SEMANTIC = "semantic"
    LINES = "lines"


class SearchableGrid(Protocol):
    """What a terminal must offer for a selection to be turned into a range."""

    dimensions: Dimensions

    def bracket_search(self, point: Pos) -> Optional[Pos]:
        """Position of the bracket matching the one at ``point``, if any."""

    def semantic_search_left(self, point: Pos) -> Pos:
        """Start of the word containing ``point``."""

    def semantic_search_right(self, point: Pos) -> Pos:
        """End of the word containing ``point``."""

    def row_search_left(self, point: Pos) -> Pos:
        """Start of the (possibly wrapped) line containing ``point``."""

    def row_search_right(self, point: Pos) -> Pos:
        """End of the (possibly wrapped) line containing ``point``."""


@dataclass(init=False)
class Selection:
    """A selected region of the grid, from where it began to where it ends now."""

    ty: SelectionType
    start: Anchor = field()
    end: Anchor = field()

    def __init__(self, ty: SelectionType, location: Pos, side: Side) -> None:
        self.ty = ty
        self.start = Anchor(location, side)
        self.end = Anchor(location, side)

    @classmethod
    def _from_anchors(cls, ty: SelectionType, start: Anchor, end: Anchor) -> Selection:
        selection = cls(ty, start.point, start.side)
        selection.end = end
        return selection

    def _ordered(self) -> tuple[Anchor, Anchor]:
        if self.start.point > self.end.point:
            return self.end, self.start
        return self.start, self.end

    def update(self, point: Pos, side: Side) -> None:
        """Move the end of the selection."""
        self.end = Anchor(point, side)

    def rotate(self, dimensions: Dimensions, lines: range, delta: int) -> Optional[Selection]:
        """Shift the selection by ``delta`` lines inside the scrolling region ``lines``.

        Returns the moved selection, or ``None`` once it has been scrolled away.
        """
        bottommost = dimensions.bottommost_line()
        range_top = lines.start
        range_bottom = lines.stop

        swapped = self.start.point > self.end.point
        first, second = (self.end, self.start) if swapped else (self.start, self.end)
        first_row, first_col, first_side = first.point.row, first.point.col, first.side
        second_row, second_col, second_side = second.point.row, second.point.col, second.side

        if (first_row >= range_top or range_top == 0) and first_row < range_bottom:
            first_row = min(first_row - delta, bottommost)

            # The whole selection scrolled out of the region.
            if first_row >= range_bottom and second_row < range_bottom:
                return None

            if first_row < range_top and range_top != 0:
                if self.ty is not SelectionType.BLOCK:
                    first_col = 0
                    first_side = Side.LEFT
                first_row = range_top

        if (second_row >= range_top or range_top == 0) and second_row < range_bottom:
            second_row = min(second_row - delta, bottommost)

            # The end overtook the start.
            if second_row < first_row:
                return None

            if second_row >= range_bottom:
                if self.ty is not SelectionType.BLOCK:
                    second_col = dimensions.last_column()
                    second_side = Side.RIGHT
                second_row = range_bottom - 1

        first = Anchor(Pos(first_row, first_col), first_side)
        second = Anchor(Pos(second_row, second_col), second_side)
        if swapped:
            return Selection._from_anchors(self.ty, second, first)
        return Selection._from_anchors(self.ty, first, second)

    def is_empty(self) -> bool:
        """Whether the selection covers no cell at all."""
        if self.ty is SelectionType.SIMPLE:
            start, end = self._ordered()
            # Identical points, or two adjacent cells touched right -> left.
            return start == end or (
                start.side is Side.RIGHT
                and end.side is Side.LEFT
                and start.point.row == end.point.row
                and start.point.col + 1 == end.point.col
            )
        if self.ty is SelectionType.BLOCK:
            start, end = self.start, self.end
            # Columns matter regardless of the lines involved.
            return (
                (start.point.col == end.point.col and start.side == end.side)
                or (
                    start.point.col + 1 == end.point.col
                    and start.side is Side.RIGHT
                    and end.side is Side.LEFT
                )
                or (
                    end.point.col + 1 == start.point.col
                    and start.side is Side.LEFT
                    and end.side is Side.RIGHT
                )
            )
        return False

    def intersects_range(self, top: Optional[int] = None, bottom: Optional[int] = None) -> bool:
        """Whether any selected line lies in ``top..=bottom``; ``None`` leaves a side open."""
        start_row, end_row = sorted((self.start.point.row, self.end.point.row))
        if top is not None and top > end_row:
            return False
        if bottom is not None and bottom < start_row:
            return False
        return True

    def include_all(self) -> None:
        """Set the sides so that both end cells are wholly included."""
        start, end = self.start.point, self.end.point
        if self.ty is SelectionType.BLOCK:
            reversed_ = start.col > end.col or (start.col == end.col and start.row > end.row)
        else:
            reversed_ = start > end
        start_side, end_side = (Side.RIGHT, Side.LEFT) if reversed_ else (Side.LEFT, Side.RIGHT)
        self.start = replace(self.start, side=start_side)
        self.end = replace(self.end, side=end_side)

    def to_range(self, term: SearchableGrid) -> Optional[SelectionRange]:
        """Convert the selection into grid cells, or ``None`` if nothing is selected."""
        dimensions = term.dimensions
        start, end = self._ordered()

        if end.point.row < dimensions.topmost_line():
            return None
        start = Anchor(start.point.clamp_to(dimensions), start.side)

        if self.ty is SelectionType.SIMPLE:
            return self._range_simple(start, end, dimensions.columns)
        if self.ty is SelectionType.BLOCK:
            return self._range_block(start, end)
        if self.ty is SelectionType.LINES:
            return SelectionRange(
                term.row_search_left(start.point), term.row_search_right(end.point)
            )
        return self._range_semantic(term, start.point, end.point)

    @staticmethod
    def _range_semantic(term: SearchableGrid, start: Pos, end: Pos) -> SelectionRange:
        if start == end:
            matching = term.bracket_search(start)
            if matching is not None:
                if matching.row < start.row or (
                    matching.row == start.row and matching.col < start.col
                ):
                    start = matching
                else:
                    end = matching
                return SelectionRange(start, end)

        return SelectionRange(term.semantic_search_left(start), term.semantic_search_right(end))

    def _range_simple(self, start: Anchor, end: Anchor, columns: int) -> Optional[SelectionRange]:
        if self.is_empty():
            return None

        start_point, end_point = start.point, end.point

        # Drop the last cell when the selection ends on its left half.
        if end.side is Side.LEFT and start_point != end_point:
            if end_point.col == 0:
                end_point = Pos(end_point.row - 1, columns - 1)
            else:
                end_point = Pos(end_point.row, end_point.col - 1)

        # Drop the first cell when the selection starts on its right half.
        if start.side is Side.RIGHT and start_point != end_point:
            start_point = Pos(start_point.row, start_point.col + 1)
            if start_point.col == columns:
                start_point = Pos(start_point.row + 1, 0)

        return SelectionRange(start_point, end_point)

    def _range_block(self, start: Anchor, end: Anchor) -> Optional[SelectionRange]:
        if self.is_empty():
            return None

        start_row, start_col, start_side = start.point.row, start.point.col, start.side
        end_row, end_col, end_side = end.point.row, end.point.col, end.side

        # Always run from top left to bottom right.
        if start_col > end_col:
            start_side, end_side = end_side, start_side
            start_col, end_col = end_col, start_col

        if end_side is Side.LEFT and (start_row, start_col) != (end_row, end_col) and end_col > 0:
            end_col -= 1

        if start_side is Side.RIGHT and (start_row, start_col) != (end_row, end_col):
            start_col += 1

        return SelectionRange(Pos(start_row, start_col), Pos(end_row, end_col), is_block=True)