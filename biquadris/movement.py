"""Moves the block in play around the grid."""

from __future__ import annotations

from collections.abc import Collection, Iterator

from biquadris.blocks import Block, Shape
from biquadris.grid import Grid


def _footprint(shape: Shape, x: int, y: int) -> Iterator[tuple[int, int]]:
    """Yield the grid squares a shape covers with its bottom-left corner at (x, y)."""
    bottom = len(shape) - 1
    for r, row in enumerate(shape):
        for c, filled in enumerate(row):
            if filled:
                yield x + c, y - (bottom - r)


class MovementController:
    """Keeps track of the block in play and moves it on the grid.

    ``y`` grows downwards, so moving down increases a block's ``y``.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.block: Block | None = None

    def _current(self) -> Block:
        if self.block is None:
            raise LookupError("no block is in play")
        return self.block

    def _fits(
        self,
        shape: Shape,
        x: int,
        y: int,
        own: Collection[tuple[int, int]] = (),
    ) -> bool:
        return all(
            self.grid.contains(cx, cy)
            and ((cx, cy) in own or self.grid.block_type(cx, cy) == "")
            for cx, cy in _footprint(shape, x, y)
        )

    def _erase(self, shape: Shape, x: int, y: int) -> None:
        for cx, cy in _footprint(shape, x, y):
            self.grid.set_block_type(cx, cy, "")
            self.grid.mark_cell(cx, cy)

    def _place(self, shape: Shape, x: int, y: int, kind: str) -> None:
        for cx, cy in _footprint(shape, x, y):
            self.grid.mark_cell(cx, cy)
            self.grid.set_block_type(cx, cy, kind)

    def _shift(self, dx: int, dy: int) -> bool:
        block = self._current()
        shape = block.shape()
        own = set(_footprint(shape, block.x, block.y))
        if not self._fits(shape, block.x + dx, block.y + dy, own):
            return False
        self._erase(shape, block.x, block.y)
        block.x += dx
        block.y += dy
        self._place(shape, block.x, block.y, block.kind)
        return True

    def apply_heaviness(self) -> bool:
        """Move the block down once per unit of heaviness; False if it lands."""
        for _ in range(self._current().heaviness):
            if not self.move_down():
                return False
        return True

    def move_down(self) -> bool:
        return self._shift(0, 1)

    def move_left(self) -> bool:
        return self._shift(-1, 0)

    def move_right(self) -> bool:
        return self._shift(1, 0)

    def rotate(self, clockwise: bool) -> bool:
        """Rotate the block in place; it keeps its old rotation if the new one does not fit."""
        block = self._current()
        old_shape = block.shape()
        own = set(_footprint(old_shape, block.x, block.y))
        if clockwise:
            turn, undo = block.rotate_clockwise, block.rotate_counterclockwise
        else:
            turn, undo = block.rotate_counterclockwise, block.rotate_clockwise
        turn()
        new_shape = block.shape()
        if not self._fits(new_shape, block.x, block.y, own):
            undo()
            return False
        self._erase(old_shape, block.x, block.y)
        self._place(new_shape, block.x, block.y, block.kind)
        return True

    def drop(self) -> bool:
        """Move the block down as far as it goes; True if it moved at all."""
        moved = False
        while self.move_down():
            moved = True
        return moved

    def inject_block(self, block: Block, x: int, y: int) -> bool:
        """Put a block on the grid at (x, y) and make it the block in play."""
        shape = block.shape()
        if not self._fits(shape, x, y):
            return False
        self._place(shape, x, y, block.kind)
        block.x = x
        block.y = y
        self.block = block
        return True

    def replace_block(self, block: Block) -> bool:
        """Swap the block in play for another that takes over its state and position."""
        old = self._current()
        block.x = old.x
        block.y = old.y
        block.shape_index = old.shape_index
        block.heaviness = old.heaviness
        block.lifetime = old.lifetime
        block.level = old.level
        old_shape = old.shape()
        self._erase(old_shape, old.x, old.y)
        if self.inject_block(block, old.x, old.y):
            return True
        self._place(old_shape, old.x, old.y, old.kind)
        return False