import io

import pytest

from biquadris.game_controller import ControllerEvent, ControllerInfo
from biquadris.operation import Instruction, Operation
from biquadris.turn_switcher import TurnSwitcher


class FakeController:
    def __init__(self, name):
        self.name = name
        self.event = ControllerEvent.NORMAL
        self.received = []
        self.restarts = 0

    def execute(self, operation):
        self.received.append(operation)

    def restart(self):
        self.restarts += 1

    def info(self):
        return ControllerInfo(0, self.name)


def make_switcher():
    first, second = FakeController("player 1"), FakeController("player 2")
    out = io.StringIO()
    return TurnSwitcher([first, second], out), first, second, out


def test_operations_go_to_current_player():
    switcher, first, second, _ = make_switcher()
    op = Operation(Instruction.LEFT)
    switcher.pass_operation(op)
    assert first.received == [op]
    assert second.received == []


@pytest.mark.parametrize("event", [ControllerEvent.SWITCH, ControllerEvent.ACTION])
def test_switch_and_action_advance_turn(event):
    switcher, first, second, _ = make_switcher()
    first.event = event
    switcher.notify(first)
    op = Operation(Instruction.RIGHT)
    switcher.pass_operation(op)
    assert second.received == [op]
    second.event = event
    switcher.notify(second)
    assert switcher.current == 0


def test_normal_keeps_turn():
    switcher, first, _, _ = make_switcher()
    switcher.notify(first)
    assert switcher.current == 0


def test_game_over_restarts_everyone():
    switcher, first, second, out = make_switcher()
    first.event = ControllerEvent.SWITCH
    switcher.notify(first)
    second.event = ControllerEvent.GAME_OVER
    switcher.notify(second)
    assert out.getvalue() == "Game over!! player 2 lose\nNew game!!\n"
    assert (first.restarts, second.restarts) == (1, 1)
    assert switcher.current == 0


def test_restart_announces_new_game():
    switcher, first, second, out = make_switcher()
    switcher.restart()
    assert out.getvalue() == "New game!!\n"
    assert first.restarts == second.restarts == 1


def test_needs_controllers():
    with pytest.raises(ValueError):
        TurnSwitcher([], io.StringIO())