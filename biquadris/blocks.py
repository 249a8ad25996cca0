"""Tetromino blocks and their rotation states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

Shape = tuple[tuple[bool, ...], ...]

ROTATION_COUNT = 4


def _shape(*rows: str) -> Shape:
    """Build a shape from rows of text, where '#' marks a filled square."""
    return tuple(tuple(ch == "#" for ch in row) for row in rows)


@dataclass(eq=False)
class Block:
    """A falling piece: its rotation state, weight, lifetime, level and position.

    Shapes are 4x4 grids whose bottom row sits at ``y``; row ``r`` of the
    shape covers grid row ``y - r`` counted from the top of the shape.
    """

    shape_index: int = 0
    heaviness: int = 0
    lifetime: int = -1
    level: int = 0
    x: int = 0
    y: int = 0

    kind: ClassVar[str] = ""
    _shapes: ClassVar[tuple[Shape, ...]] = ()

    def __post_init__(self) -> None:
        if len(self._shapes) != ROTATION_COUNT:
            raise TypeError(f"{type(self).__name__} is not a concrete block")

    def shape(self) -> Shape:
        """Return the 4x4 occupancy grid for the current rotation."""
        return self._shapes[self.shape_index]

    def rotate_clockwise(self) -> None:
        self.shape_index = (self.shape_index + 1) % ROTATION_COUNT

    def rotate_counterclockwise(self) -> None:
        self.shape_index = (self.shape_index - 1) % ROTATION_COUNT


_I_FLAT = _shape("....", "....", "....", "####")
_I_TALL = _shape("#...", "#...", "#...", "#...")


class IBlock(Block):
    kind = "I"
    _shapes = (_I_FLAT, _I_TALL, _I_FLAT, _I_TALL)


class JBlock(Block):
    kind = "J"
    _shapes = (
        _shape("....", ".#..", ".#..", "##.."),
        _shape("....", "....", "#...", "###."),
        _shape("....", "##..", "#...", "#..."),
        _shape("....", "....", "###.", "..#."),
    )


class LBlock(Block):
    kind = "L"
    _shapes = (
        _shape("....", "##..", ".#..", ".#.."),
        _shape("....", "....", "..#.", "###."),
        _shape("....", "#...", "#...", "##.."),
        _shape("....", "....", "###.", "#..."),
    )


_O_SHAPE = _shape("....", "....", "##..", "##..")


class OBlock(Block):
    kind = "O"
    _shapes = (_O_SHAPE,) * ROTATION_COUNT


_S_UPRIGHT = _shape("....", "#...", "##..", ".#..")
_S_FLAT = _shape("....", "....", ".##.", "##..")


class SBlock(Block):
    kind = "S"
    _shapes = (_S_UPRIGHT, _S_FLAT, _S_UPRIGHT, _S_FLAT)


class TBlock(Block):
    kind = "T"
    _shapes = (
        _shape("....", "#...", "##..", "#..."),
        _shape("....", "....", "###.", ".#.."),
        _shape("....", ".#..", "##..", ".#.."),
        _shape("....", "....", ".#..", "###."),
    )


_Z_UPRIGHT = _shape("....", ".#..", "##..", "#...")
_Z_FLAT = _shape("....", "....", "##..", ".##.")


class ZBlock(Block):
    kind = "Z"
    _shapes = (_Z_UPRIGHT, _Z_FLAT, _Z_UPRIGHT, _Z_FLAT)


_STAR_SHAPE = _shape("....", "....", "....", "#...")


class StarBlock(Block):
    kind = "*"
    _shapes = (_STAR_SHAPE,) * ROTATION_COUNT