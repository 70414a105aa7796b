"""Grid positions, sides, dimensions and selected ranges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Which half of a cell a point refers to."""

    LEFT = "left"
    RIGHT = "right"


class CursorShape(Enum):
    """Shapes the terminal cursor can take."""

    BLOCK = "block"
    UNDERLINE = "underline"
    BEAM = "beam"
    HOLLOW_BLOCK = "hollow_block"
    HIDDEN = "hidden"


@dataclass(frozen=True, order=True)
class Pos:
    """A cell position: row first, then column, ordered the same way."""

    row: int
    col: int

    def clamp_to(self, dimensions: Dimensions) -> Pos:
        """Clamp the position into the grid area of ``dimensions``."""
        if self.row < dimensions.topmost_line():
            return Pos(dimensions.topmost_line(), 0)
        if self.row > dimensions.bottommost_line():
            return Pos(dimensions.bottommost_line(), dimensions.last_column())
        return self


@dataclass(frozen=True)
class Dimensions:
    """Size of a grid: visible lines, columns and lines of scrollback history."""

    screen_lines: int
    columns: int
    history_size: int = 0

    def __post_init__(self) -> None:
        if self.screen_lines < 1 or self.columns < 1:
            raise ValueError("a grid needs at least one line and one column")
        if self.history_size < 0:
            raise ValueError("history size cannot be negative")

    @property
    def total_lines(self) -> int:
        return self.screen_lines + self.history_size

    def bottommost_line(self) -> int:
        """Index of the last visible line."""
        return self.screen_lines - 1

    def topmost_line(self) -> int:
        """Index of the oldest line in history (zero or negative)."""
        return -self.history_size

    def last_column(self) -> int:
        """Index of the rightmost column."""
        return self.columns - 1


@dataclass(frozen=True)
class Anchor:
    """A position together with the side of the cell it was taken on."""

    point: Pos
    side: Side


@dataclass(frozen=True)
class SelectionRange:
    """A range of selected cells, start at the top left, end at the bottom right."""

    start: Pos
    end: Pos
    is_block: bool = False

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("selection range start must not come after its end")

    def contains(self, point: Pos) -> bool:
        """Whether ``point`` lies inside the selection."""
        start, end = self.start, self.end
        return (
            start.row <= point.row <= end.row
            and (start.col <= point.col or (start.row != point.row and not self.is_block))
            and (end.col >= point.col or (end.row != point.row and not self.is_block))
        )

    def contains_square(
        self, square_pos: Pos, wide_char: bool, point: Pos, shape: CursorShape
    ) -> bool:
        """Whether the cell at ``square_pos`` is drawn as selected.

        ``point`` is the cursor position; a block cursor sitting on a selection
        boundary is not inverted. ``wide_char`` marks a cell whose trailing
        spacer may be the selected part.
        """
        if shape is CursorShape.BLOCK and point == square_pos:
            on_boundary = self.start == square_pos or self.end == square_pos
            on_block_corner = self.is_block and (
                (self.start.row == square_pos.row and self.end.col == square_pos.col)
                or (self.end.row == square_pos.row and self.start.col == square_pos.col)
            )
            if on_boundary or on_block_corner:
                return False

        if self.contains(square_pos):
            return True

        return wide_char and self.contains(Pos(square_pos.row, square_pos.col + 1))