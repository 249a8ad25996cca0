"""The playing field: a rectangle of cells, each holding a block kind."""

from __future__ import annotations

from dataclasses import dataclass

RESERVED_ROWS = 3


@dataclass(eq=False)
class Cell:
    """One square of the field; ``marked`` means it needs redrawing."""

    kind: str = ""
    marked: bool = False


class Grid:
    """A field of ``width`` columns and ``height`` plus three reserved rows.

    Clearing a row replaces its cells with fresh ones, so anything still
    holding a cleared cell can tell that it is no longer on the field.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height + RESERVED_ROWS
        self._cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_block_type(self, x: int, y: int, kind: str) -> None:
        """Set a cell's kind; positions off the field are ignored."""
        if self.contains(x, y):
            self._cells[y][x].kind = kind

    def mark_cell(self, x: int, y: int) -> None:
        if self.contains(x, y):
            self._cells[y][x].marked = True

    def unmark_all(self) -> None:
        for row in self._cells:
            for cell in row:
                cell.marked = False

    def block_type(self, x: int, y: int) -> str:
        """Return a cell's kind, or an empty string off the field."""
        if self.contains(x, y):
            return self._cells[y][x].kind
        return ""

    def is_marked(self, x: int, y: int) -> bool:
        """Return whether a cell needs redrawing; off the field counts as marked."""
        if self.contains(x, y):
            return self._cells[y][x].marked
        return True

    def cell(self, x: int, y: int) -> Cell:
        if not self.contains(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self._cells[y][x]

    def clear_row(self, row: int) -> None:
        """Replace every cell of a row with a fresh, empty, marked cell."""
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} is outside the grid")
        self._cells[row] = [Cell(marked=True) for _ in range(self.width)]

    def clear(self) -> None:
        for row in range(self.height):
            self.clear_row(row)