"""Finds filled rows, clears them, and lets the remains of blocks fall."""

from __future__ import annotations

from dataclasses import dataclass, field

from biquadris.blocks import Block
from biquadris.grid import RESERVED_ROWS, Grid
from biquadris.movement import MovementController

Square = tuple[int, int]


def _footprint(block: Block) -> set[Square]:
    """Return the grid squares a block covers at its current position."""
    shape = block.shape()
    bottom = len(shape) - 1
    return {
        (block.x + c, block.y - (bottom - r))
        for r, row in enumerate(shape)
        for c, filled in enumerate(row)
        if filled
    }


@dataclass(eq=False)
class _Tracked:
    block: Block
    squares: set[Square] = field(default_factory=set)


class GridInspector:
    """Keeps track of landed blocks and scores the rows and blocks removed."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self._tracked: list[_Tracked] = []
        self.rows_removed = 0
        self.score = 0

    @property
    def blocks(self) -> list[Block]:
        """The landed blocks that still have squares on the grid."""
        return [tracked.block for tracked in self._tracked]

    def update_grid(self, mover: MovementController) -> None:
        """Clear filled rows and let blocks fall until nothing else clears."""
        removed = self._clear_filled_rows()
        self.rows_removed += removed
        self._discard_removed_blocks()
        while removed:
            while self._drop_all(mover):
                pass
            removed = self._clear_filled_rows()
            self.rows_removed += removed
            self._discard_removed_blocks()

    def add_block(self, block: Block) -> None:
        """Start tracking a block that has landed."""
        squares = {square for square in _footprint(block) if self.grid.contains(*square)}
        self._tracked.append(_Tracked(block, squares))

    def calculate_score(self, level: int) -> int:
        """Return the points earned since the last reset at the given level."""
        return (self.rows_removed + level) ** 2 + self.score

    def triggered_action(self) -> bool:
        """Whether more than one row was removed since the last reset."""
        return self.rows_removed > 1

    def reset_score(self) -> None:
        self.rows_removed = 0
        self.score = 0

    def clear(self) -> None:
        self.reset_score()
        self._tracked = []

    def _clear_filled_rows(self) -> int:
        grid = self.grid
        full_rows = [
            y
            for y in range(RESERVED_ROWS, grid.height)
            if all(grid.block_type(x, y) for x in range(grid.width))
        ]
        for y in full_rows:
            grid.clear_row(y)
            for tracked in self._tracked:
                tracked.squares = {square for square in tracked.squares if square[1] != y}
        return len(full_rows)

    def _discard_removed_blocks(self) -> None:
        remaining = []
        for tracked in self._tracked:
            if tracked.squares:
                remaining.append(tracked)
            else:
                self.score += (tracked.block.level + 1) ** 2
        self._tracked = remaining

    def _drop_all(self, mover: MovementController) -> bool:
        """Move every tracked block down one row where possible; True if any moved."""
        moved = False
        saved = mover.block
        lowest_first = sorted(
            self._tracked,
            key=lambda tracked: max(y for _, y in tracked.squares),
            reverse=True,
        )
        try:
            for tracked in lowest_first:
                if tracked.squares == _footprint(tracked.block):
                    mover.block = tracked.block
                    if mover.move_down():
                        tracked.squares = _footprint(tracked.block)
                        moved = True
                elif self._shift_down(tracked):
                    moved = True
        finally:
            mover.block = saved
        return moved

    def _shift_down(self, tracked: _Tracked) -> bool:
        """Move what is left of a partly cleared block down one row."""
        grid = self.grid
        target = {(x, y + 1) for x, y in tracked.squares}
        fits = all(
            grid.contains(x, y) and ((x, y) in tracked.squares or not grid.block_type(x, y))
            for x, y in target
        )
        if not fits:
            return False
        for x, y in tracked.squares:
            grid.set_block_type(x, y, "")
            grid.mark_cell(x, y)
        for x, y in target:
            grid.mark_cell(x, y)
            grid.set_block_type(x, y, tracked.block.kind)
        tracked.squares = target
        tracked.block.y += 1
        return True