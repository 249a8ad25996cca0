"""Sources of new blocks: by name, from a fixed sequence, or at random."""

from __future__ import annotations

import bisect
import itertools
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from biquadris.blocks import (
    Block,
    IBlock,
    JBlock,
    LBlock,
    OBlock,
    SBlock,
    StarBlock,
    TBlock,
    ZBlock,
)

_BLOCK_TYPES: dict[str, type[Block]] = {
    cls.kind: cls for cls in (IBlock, JBlock, LBlock, OBlock, SBlock, TBlock, ZBlock)
}


def make_block(name: str) -> Block:
    """Create a block from its one-letter name; any other name gives a star block."""
    return _BLOCK_TYPES.get(name, StarBlock)()


class BlockFactory(ABC):
    """Something that hands out the next block to play."""

    @abstractmethod
    def next_block(self) -> Block:
        """Return a fresh block."""


class SequenceBlockFactory(BlockFactory):
    """Hands out blocks following a fixed sequence of names, over and over."""

    def __init__(self, sequence: Iterable[str]) -> None:
        self.sequence = tuple(sequence)
        if not self.sequence:
            raise ValueError("a block sequence needs at least one name")
        self._names = itertools.cycle(self.sequence)

    def next_block(self) -> Block:
        return make_block(next(self._names))


class RandomBlockFactory(BlockFactory):
    """Hands out blocks at random, each name chosen in proportion to its weight."""

    def __init__(self, weights: Mapping[str, int], rng: random.Random | None = None) -> None:
        items = sorted(weights.items())
        if not items:
            raise ValueError("at least one block weight is needed")
        for name, weight in items:
            if weight <= 0:
                raise ValueError(f"weight of block {name!r} must be positive, got {weight}")
        self._names = [name for name, _ in items]
        self._cumulative = list(itertools.accumulate(weight for _, weight in items))
        self._rng = rng if rng is not None else random.Random()

    def next_block(self) -> Block:
        value = self._rng.randrange(self._cumulative[-1])
        return make_block(self._names[bisect.bisect_right(self._cumulative, value)])