"""Instructions and chains of repeated instructions."""

from __future__ import annotations

import enum
from collections.abc import Iterator


class Instruction(enum.Enum):
    OVER = enum.auto()
    BLIND = enum.auto()
    HEAVY = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    CLOCKWISE = enum.auto()
    COUNTERCLOCKWISE = enum.auto()
    DROP = enum.auto()
    LEVELUP = enum.auto()
    LEVELDOWN = enum.auto()
    IBLOCK = enum.auto()
    JBLOCK = enum.auto()
    LBLOCK = enum.auto()
    OBLOCK = enum.auto()
    SBLOCK = enum.auto()
    ZBLOCK = enum.auto()
    TBLOCK = enum.auto()


class Operation:
    """An instruction repeated ``times`` times, followed by an optional next operation."""

    def __init__(
        self,
        instruction: Instruction,
        times: int = 1,
        next_op: Operation | None = None,
    ) -> None:
        if times < 0:
            raise ValueError(f"times must not be negative, got {times}")
        self.instruction = instruction
        self.times = times
        self.next_op = next_op

    def next_instruction(self) -> Instruction:
        """Consume and return the next instruction, or OVER when all are used up."""
        if self.times == 0:
            if self.next_op is not None:
                return self.next_op.next_instruction()
            return Instruction.OVER
        self.times -= 1
        return self.instruction

    def __iter__(self) -> Iterator[Instruction]:
        """Consume the remaining instructions in order."""
        while (instruction := self.next_instruction()) is not Instruction.OVER:
            yield instruction

    def copy(self) -> Operation:
        """Return an independent copy of the whole chain."""
        next_copy = self.next_op.copy() if self.next_op is not None else None
        return Operation(self.instruction, self.times, next_copy)