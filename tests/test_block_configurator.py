import random

import pytest

from biquadris.blocks import OBlock
from biquadris.block_configurator import BlockConfigurator


def configured(configurator):
    block = OBlock()
    configurator.configure(block)
    return block


def test_defaults_give_plain_block():
    block = configured(BlockConfigurator(random.Random(1)))
    assert (block.heaviness, block.lifetime) == (0, -1)


def test_fixed_heaviness():
    configurator = BlockConfigurator(random.Random(1))
    configurator.set_heaviness(1, 1)
    assert configured(configurator).heaviness == 1


def test_extra_heaviness_is_used_once():
    configurator = BlockConfigurator(random.Random(1))
    configurator.set_heaviness(1, 1)
    configurator.set_extra_heaviness(2)
    assert configured(configurator).heaviness == 1 + 2
    assert configured(configurator).heaviness == 1


@pytest.mark.parametrize("seed", range(10))
def test_heaviness_stays_in_range(seed):
    configurator = BlockConfigurator(random.Random(seed))
    configurator.set_heaviness(2, 5)
    assert 2 <= configured(configurator).heaviness < 5


def test_limited_only_uses_lifetime():
    configurator = BlockConfigurator(random.Random(7))
    configurator.set_normal_weight(0)
    configurator.set_limited_weight(1)
    configurator.set_lifetime_range(4, 4)
    assert configured(configurator).lifetime == 4


@pytest.mark.parametrize("seed", range(10))
def test_lifetime_stays_in_range(seed):
    configurator = BlockConfigurator(random.Random(seed))
    configurator.set_normal_weight(0)
    configurator.set_limited_weight(3)
    configurator.set_lifetime_range(2, 6)
    assert 2 <= configured(configurator).lifetime < 6


def test_normal_only_never_limits_lifetime():
    configurator = BlockConfigurator(random.Random(5))
    configurator.set_lifetime_range(3, 9)
    assert {configured(configurator).lifetime for _ in range(30)} == {-1}


def test_both_weights_zero_is_an_error():
    configurator = BlockConfigurator(random.Random(0))
    configurator.set_normal_weight(0)
    with pytest.raises(ValueError):
        configurator.configure(OBlock())


def test_bounds_out_of_order_are_errors():
    configurator = BlockConfigurator(random.Random(0))
    with pytest.raises(ValueError):
        configurator.set_heaviness(3, 1)
    with pytest.raises(ValueError):
        configurator.set_lifetime_range(5, 2)