import pytest

from biquadris.blocks import IBlock, JBlock, OBlock
from biquadris.grid import Grid
from biquadris.movement import MovementController


def occupied(grid):
    return {
        (x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if grid.block_type(x, y) != ""
    }


def shifted(cells, dx, dy):
    return {(x + dx, y + dy) for x, y in cells}


@pytest.fixture
def grid():
    return Grid(11, 15)


@pytest.fixture
def mover(grid):
    return MovementController(grid)


def test_inject_places_block(grid, mover):
    block = OBlock()
    assert mover.inject_block(block, 0, 3)
    assert mover.block is block
    assert (block.x, block.y) == (0, 3)
    assert occupied(grid) == {(0, 2), (1, 2), (0, 3), (1, 3)}
    assert {grid.block_type(x, y) for x, y in occupied(grid)} == {"O"}


def test_inject_into_occupied_space_fails(grid, mover):
    first = OBlock()
    mover.inject_block(first, 0, 3)
    assert not mover.inject_block(JBlock(), 0, 3)
    assert mover.block is first


def test_move_down_shifts_cells(grid, mover):
    mover.inject_block(JBlock(), 2, 5)
    before = occupied(grid)
    assert mover.move_down()
    assert occupied(grid) == shifted(before, 0, 1)
    assert mover.block.y == 6


def test_move_left_blocked_by_wall(grid, mover):
    mover.inject_block(OBlock(), 0, 3)
    before = occupied(grid)
    assert not mover.move_left()
    assert occupied(grid) == before
    assert mover.move_right()
    assert occupied(grid) == shifted(before, 1, 0)


def test_move_right_blocked_by_wall(grid, mover):
    mover.inject_block(OBlock(), grid.width - 2, 3)
    assert not mover.move_right()
    assert mover.block.x == grid.width - 2


def test_drop_reaches_bottom(grid, mover):
    mover.inject_block(OBlock(), 4, 3)
    assert mover.drop()
    assert max(y for _, y in occupied(grid)) == grid.height - 1
    assert len(occupied(grid)) == 4
    assert not mover.drop()


def test_drop_lands_on_other_blocks(grid, mover):
    mover.inject_block(OBlock(), 4, 3)
    mover.drop()
    mover.inject_block(OBlock(), 4, 3)
    mover.drop()
    assert mover.block.y == grid.height - 3
    assert len(occupied(grid)) == 8


def test_rotate_changes_shape(grid, mover):
    mover.inject_block(IBlock(), 0, grid.height - 1)
    assert mover.rotate(True)
    assert mover.block.shape_index == 1
    assert len(occupied(grid)) == 4
    assert {x for x, _ in occupied(grid)} == {0}
    assert mover.rotate(False)
    assert mover.block.shape_index == 0
    assert {y for _, y in occupied(grid)} == {grid.height - 1}


def test_rotate_blocked_keeps_rotation(grid, mover):
    block = IBlock()
    block.rotate_clockwise()
    mover.inject_block(block, grid.width - 1, grid.height - 1)
    before = occupied(grid)
    assert not mover.rotate(True)
    assert block.shape_index == 1
    assert occupied(grid) == before


def test_apply_heaviness(grid, mover):
    block = OBlock(heaviness=2)
    mover.inject_block(block, 3, 5)
    assert mover.apply_heaviness()
    assert block.y == 5 + 2
    mover.drop()
    assert not mover.apply_heaviness()


def test_replace_block_keeps_position(grid, mover):
    mover.inject_block(IBlock(heaviness=1, level=2), 0, 5)
    replacement = OBlock()
    assert mover.replace_block(replacement)
    assert mover.block is replacement
    assert (replacement.x, replacement.y) == (0, 5)
    assert (replacement.heaviness, replacement.level) == (1, 2)
    assert {grid.block_type(x, y) for x, y in occupied(grid)} == {"O"}
    assert len(occupied(grid)) == 4


def test_replace_block_that_does_not_fit_restores_old(grid, mover):
    old = IBlock()
    mover.inject_block(old, 0, grid.height - 1)
    grid.set_block_type(0, grid.height - 2, "Z")
    assert not mover.replace_block(OBlock())
    assert mover.block is old
    assert all(grid.block_type(x, grid.height - 1) == "I" for x in range(4))


def test_moving_marks_vacated_cells(grid, mover):
    mover.inject_block(OBlock(), 0, 3)
    grid.unmark_all()
    mover.move_down()
    assert grid.is_marked(0, 2)
    assert grid.block_type(0, 2) == ""


def test_no_block_in_play(mover):
    with pytest.raises(LookupError):
        mover.move_down()
    with pytest.raises(LookupError):
        mover.replace_block(OBlock())