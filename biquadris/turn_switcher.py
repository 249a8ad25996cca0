"""Passes commands to the player whose turn it is."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from biquadris.game_controller import ControllerEvent, GameController, Observer
from biquadris.operation import Operation


class TurnSwitcher(Observer):
    """Hands operations to players in turn and restarts everyone on a game over."""

    def __init__(self, controllers: Iterable[GameController], out: TextIO | None = None) -> None:
        self.controllers = list(controllers)
        if not self.controllers:
            raise ValueError("at least one controller is needed")
        self.out = out if out is not None else sys.stdout
        self.current = 0

    def pass_operation(self, operation: Operation) -> None:
        self.controllers[self.current].execute(operation)

    def notify(self, controller: GameController) -> None:
        event = controller.event
        if event in (ControllerEvent.ACTION, ControllerEvent.SWITCH):
            self.current = (self.current + 1) % len(self.controllers)
        elif event is ControllerEvent.GAME_OVER:
            print(f"Game over!! {controller.info().name} lose", file=self.out)
            self.restart()

    def restart(self) -> None:
        print("New game!!", file=self.out)
        for controller in self.controllers:
            controller.restart()
        self.current = 0