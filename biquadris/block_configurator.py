"""Assigns weight and lifetime to new blocks according to the level's rules."""

from __future__ import annotations

import random

from biquadris.blocks import Block


class BlockConfigurator:
    """Holds the heaviness and lifetime rules and applies them to blocks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.heaviness_lower = 0
        self.heaviness_upper = 0
        self.extra_heaviness = 0
        self.normal_weight = 1
        self.limited_weight = 0
        self.lifetime_lower = 0
        self.lifetime_upper = 0

    def _in_range(self, lower: int, upper: int) -> int:
        if upper == lower:
            return lower
        return lower + self._rng.randrange(upper - lower)

    def configure(self, block: Block) -> None:
        """Set the block's heaviness and lifetime; any extra heaviness is used up."""
        total = self.normal_weight + self.limited_weight
        if total <= 0:
            raise ValueError("normal and limited-time weights cannot both be zero")
        block.heaviness = self._in_range(self.heaviness_lower, self.heaviness_upper)
        block.heaviness += self.extra_heaviness
        self.extra_heaviness = 0
        block.lifetime = -1
        lifetime = self._in_range(self.lifetime_lower, self.lifetime_upper)
        if self._rng.randrange(total) < self.limited_weight:
            block.lifetime = lifetime

    def set_heaviness(self, lower: int, upper: int) -> None:
        if lower > upper:
            raise ValueError(f"heaviness bounds out of order: {lower} > {upper}")
        self.heaviness_lower = lower
        self.heaviness_upper = upper

    def set_extra_heaviness(self, extra: int) -> None:
        self.extra_heaviness = extra

    def set_normal_weight(self, weight: int) -> None:
        self.normal_weight = weight

    def set_limited_weight(self, weight: int) -> None:
        self.limited_weight = weight

    def set_lifetime_range(self, lower: int, upper: int) -> None:
        if lower > upper:
            raise ValueError(f"lifetime bounds out of order: {lower} > {upper}")
        self.lifetime_lower = lower
        self.lifetime_upper = upper