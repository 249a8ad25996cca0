"""Periodically drops a single-square block after a turn."""

from __future__ import annotations

from typing import Protocol

from biquadris.block_factory import make_block
from biquadris.blocks import Block
from biquadris.movement import MovementController


class _BlockTracker(Protocol):
    def add_block(self, block: Block) -> None: ...


class PostProcessor:
    """Drops a star block every ``period`` + 1 turns while enabled."""

    def __init__(self) -> None:
        self.drop_block_after = False
        self.initial_x = 5
        self.initial_y = 0
        self.period = 5
        self.times_left = self.period

    def execute(self, mover: MovementController, inspector: _BlockTracker) -> None:
        """Run at the end of a turn; drops a star block when its time has come."""
        if self.drop_block_after and self.times_left == 0:
            star = make_block("*")
            if mover.inject_block(star, self.initial_x, self.initial_y):
                mover.drop()
                inspector.add_block(mover.block)
            self.times_left = self.period
        else:
            self.times_left -= 1

    def set_drop_block_after(self, enable: bool) -> None:
        self.drop_block_after = enable

    def set_initial_position(self, x: int, y: int) -> None:
        self.initial_x = x
        self.initial_y = y

    def set_period(self, period: int) -> None:
        self.period = period
        self.times_left = period