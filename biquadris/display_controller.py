"""Sends one player's game state to every display."""

from __future__ import annotations

from collections.abc import Iterable

from biquadris.blocks import Shape
from biquadris.display import NEXT_SIZE, Display
from biquadris.grid import Grid

BLIND_COLUMNS = range(2, 9)
BLIND_ROWS = range(2, 12)
BLIND_COLOR = "?"


class DisplayController:
    """Draws one player's board, next block and scores on a set of displays."""

    def __init__(self, displays: Iterable[Display], controller_id: int) -> None:
        self.displays = list(displays)
        self.controller_id = controller_id
        self.blinded = False

    def _each(self, draw) -> None:
        for display in self.displays:
            draw(display)

    def draw_grid(self, grid: Grid) -> None:
        """Redraw the squares marked as changed, or all of them after a blind."""
        repaint_all = self.blinded
        self.blinded = False
        for y in range(grid.height):
            for x in range(grid.width):
                if repaint_all or grid.is_marked(x, y):
                    kind = grid.block_type(x, y)
                    for display in self.displays:
                        display.set_color(x, y, kind, self.controller_id)
        grid.unmark_all()

    def draw_next_block(self, shape: Shape, kind: str) -> None:
        for y, row in enumerate(shape):
            for x, filled in enumerate(row):
                if filled:
                    for display in self.displays:
                        display.set_next(x, y, kind, self.controller_id)

    def empty_next_block(self) -> None:
        for y in range(NEXT_SIZE):
            for x in range(NEXT_SIZE):
                for display in self.displays:
                    display.set_next(x, y, "", self.controller_id)

    def blind(self) -> None:
        """Cover the middle of the board until the next full redraw."""
        self.blinded = True
        for y in BLIND_ROWS:
            for x in BLIND_COLUMNS:
                for display in self.displays:
                    display.set_color(x, y, BLIND_COLOR, self.controller_id)

    def update_level(self, level: int) -> None:
        self._each(lambda display: display.set_level(level, self.controller_id))

    def update_current_score(self, score: int) -> None:
        self._each(lambda display: display.set_current_score(score, self.controller_id))

    def update_highest_score(self, score: int) -> None:
        self._each(lambda display: display.set_highest_score(score))