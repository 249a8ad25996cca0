"""Displays showing both players' boards, levels and scores."""

from __future__ import annotations

from abc import ABC, abstractmethod

PLAYER_COUNT = 2
PANEL_GAP = 7
NEXT_SIZE = 4


class Display(ABC):
    """Something that shows the state of both players' games."""

    @abstractmethod
    def set_color(self, x: int, y: int, color: str, player: int) -> None:
        """Show a board square in the given colour; an empty colour clears it."""

    @abstractmethod
    def set_level(self, level: int, player: int) -> None:
        """Show a player's level."""

    @abstractmethod
    def set_current_score(self, score: int, player: int) -> None:
        """Show a player's current score."""

    @abstractmethod
    def set_highest_score(self, score: int) -> None:
        """Show the highest score reached."""

    @abstractmethod
    def set_next(self, x: int, y: int, color: str, player: int) -> None:
        """Show a square of a player's next block."""


def _field(label: str, value: int | None) -> str:
    return label if value is None else f"{label} {value}"


class TextDisplay(Display):
    """A display that renders both boards side by side as text."""

    def __init__(self, rows: int = 15, columns: int = 11) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"board size must be positive, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self._boards = [[[" "] * columns for _ in range(rows)] for _ in range(PLAYER_COUNT)]
        self._next = [[[" "] * NEXT_SIZE for _ in range(NEXT_SIZE)] for _ in range(PLAYER_COUNT)]
        self._levels: list[int | None] = [None] * PLAYER_COUNT
        self._scores: list[int | None] = [None] * PLAYER_COUNT
        self._highest: int | None = None

    @staticmethod
    def _check_player(player: int) -> int:
        if not 0 <= player < PLAYER_COUNT:
            raise ValueError(f"player must be 0 or 1, got {player}")
        return player

    @staticmethod
    def _put(area: list[list[str]], x: int, y: int, color: str) -> None:
        if not (0 <= y < len(area) and 0 <= x < len(area[y])):
            raise IndexError(f"square ({x}, {y}) is outside the display")
        area[y][x] = color[0] if color else " "

    def set_color(self, x: int, y: int, color: str, player: int) -> None:
        self._put(self._boards[self._check_player(player)], x, y, color)

    def set_level(self, level: int, player: int) -> None:
        self._levels[self._check_player(player)] = level

    def set_current_score(self, score: int, player: int) -> None:
        self._scores[self._check_player(player)] = score

    def set_highest_score(self, score: int) -> None:
        self._highest = score

    def set_next(self, x: int, y: int, color: str, player: int) -> None:
        self._put(self._next[self._check_player(player)], x, y, color)

    def render(self) -> str:
        """Return the whole display as text, one line per row."""
        width = self.columns + PANEL_GAP

        def pair(left: str, right: str) -> str:
            return left.ljust(width) + right

        boundary = "-" * self.columns
        lines = [
            pair("Player 1", "Player 2"),
            pair(*(_field("Level:", level) for level in self._levels)),
            pair(*(_field("Score:", score) for score in self._scores)),
            pair(_field("Highest:", self._highest), _field("Highest:", self._highest)),
            pair(boundary, boundary),
        ]
        lines.extend(
            pair("".join(left), "".join(right)) for left, right in zip(*self._boards)
        )
        lines.append(pair(boundary, boundary))
        lines.append(pair("Next:", "Next:"))
        lines.extend(pair("".join(left), "".join(right)) for left, right in zip(*self._next))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()