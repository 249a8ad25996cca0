"""One player's game: the block in play, the field, the level and the score."""

from __future__ import annotations

import enum
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from biquadris.block_configurator import BlockConfigurator
from biquadris.block_factory import BlockFactory, RandomBlockFactory, make_block
from biquadris.blocks import Block
from biquadris.display_controller import DisplayController
from biquadris.grid import RESERVED_ROWS, Grid
from biquadris.grid_inspector import GridInspector
from biquadris.movement import MovementController
from biquadris.operation import Instruction, Operation
from biquadris.post_processor import PostProcessor

MAX_LEVEL = 4
BOARD_WIDTH = 11
BOARD_HEIGHT = 13
SPAWN_X = 0
SPAWN_Y = RESERVED_ROWS
HEAVY_EXTRA = 2
STAR_PERIOD = 5

BLOCK_INSTRUCTIONS: dict[str, Instruction] = {
    "I": Instruction.IBLOCK,
    "J": Instruction.JBLOCK,
    "L": Instruction.LBLOCK,
    "O": Instruction.OBLOCK,
    "S": Instruction.SBLOCK,
    "Z": Instruction.ZBLOCK,
    "T": Instruction.TBLOCK,
}
_BLOCK_KINDS = {instruction: kind for kind, instruction in BLOCK_INSTRUCTIONS.items()}

_LEVEL_WEIGHTS: dict[int, dict[str, int]] = {
    1: {"S": 1, "Z": 1, "I": 2, "J": 2, "L": 2, "O": 2, "T": 2},
    2: {"S": 1, "Z": 1, "I": 1, "J": 1, "L": 1, "O": 1, "T": 1},
    3: {"S": 2, "Z": 2, "I": 1, "J": 1, "L": 1, "O": 1, "T": 1},
    4: {"S": 2, "Z": 2, "I": 1, "J": 1, "L": 1, "O": 1, "T": 1},
}


class ControllerEvent(enum.Enum):
    GAME_OVER = enum.auto()
    SWITCH = enum.auto()
    ACTION = enum.auto()
    NORMAL = enum.auto()


@dataclass(frozen=True)
class ControllerInfo:
    level: int
    name: str


class Observer(ABC):
    """Something told about each event of a game controller."""

    @abstractmethod
    def notify(self, controller: GameController) -> None:
        """Called with the controller whose ``event`` has just changed."""


class GameController:
    """Runs one player's game and reports its events to observers."""

    def __init__(
        self,
        sequence_factory: BlockFactory,
        display: DisplayController,
        level: int = 0,
        name: str = "",
        rng: random.Random | None = None,
    ) -> None:
        if not 0 <= level <= MAX_LEVEL:
            raise ValueError(f"level must be between 0 and {MAX_LEVEL}, got {level}")
        self.level = level
        self.name = name
        self.score = 0
        self.highest_score = 0
        self.event = ControllerEvent.NORMAL
        self._observers: list[Observer] = []
        self._rng = rng if rng is not None else random.Random()
        self._sequence_factory = sequence_factory
        self.current_factory: BlockFactory = sequence_factory
        self.display = display
        self.grid = Grid(BOARD_WIDTH, BOARD_HEIGHT)
        self.mover = MovementController(self.grid)
        self.inspector = GridInspector(self.grid)
        self.configurator = BlockConfigurator(self._rng)
        self.post_processor = PostProcessor()
        self.next_block: Block | None = None
        self._set_level()
        self.display.update_level(self.level)
        self.display.update_current_score(self.score)
        self.load_block()

    def _set_level(self) -> None:
        weights = _LEVEL_WEIGHTS.get(self.level)
        if weights is None:
            self.current_factory = self._sequence_factory
        else:
            self.current_factory = RandomBlockFactory(weights, self._rng)
        heaviness = 1 if self.level >= 3 else 0
        self.configurator.set_heaviness(heaviness, heaviness)
        self.configurator.set_normal_weight(1)
        self.configurator.set_limited_weight(0)
        self.post_processor.set_drop_block_after(self.level == MAX_LEVEL)
        if self.level == MAX_LEVEL:
            self.post_processor.set_period(STAR_PERIOD)

    def _game_over(self) -> None:
        self.event = ControllerEvent.GAME_OVER
        self.notify_observers()

    def load_block(self) -> bool:
        """Put the waiting block into play; False, after reporting game over, if it does not fit."""
        if self.mover.block is not None:
            raise RuntimeError("a block is already in play")
        block = self.next_block if self.next_block is not None else self.current_factory.next_block()
        self.next_block = None
        block.level = self.level
        self.configurator.configure(block)
        self.display.empty_next_block()
        if not self.mover.inject_block(block, SPAWN_X, SPAWN_Y):
            self._game_over()
            return False
        self.next_block = self.current_factory.next_block()
        self.display.draw_next_block(self.next_block.shape(), self.next_block.kind)
        self.display.draw_grid(self.grid)
        return True

    def execute(self, operation: Operation) -> None:
        """Carry out every instruction of an operation on this player's game."""
        turn_complete = False
        for instruction in operation:
            if instruction in _BLOCK_KINDS:
                if not self.mover.replace_block(make_block(_BLOCK_KINDS[instruction])):
                    self._game_over()
                    return
            elif instruction is Instruction.BLIND:
                self.display.blind()
            elif instruction is Instruction.HEAVY:
                self.configurator.set_extra_heaviness(HEAVY_EXTRA)
            elif instruction is Instruction.LEFT:
                self.mover.move_left()
            elif instruction is Instruction.RIGHT:
                self.mover.move_right()
            elif instruction is Instruction.CLOCKWISE:
                self.mover.rotate(True)
            elif instruction is Instruction.COUNTERCLOCKWISE:
                self.mover.rotate(False)
            elif instruction is Instruction.LEVELUP:
                self.level_up()
            elif instruction is Instruction.LEVELDOWN:
                self.level_down()
            elif instruction is Instruction.DOWN:
                turn_complete = not self.mover.move_down()
            elif instruction is Instruction.DROP:
                self.mover.drop()
                turn_complete = True
            if turn_complete:
                break
        self.event = ControllerEvent.NORMAL
        self.notify_observers()
        if not turn_complete and not self.mover.apply_heaviness():
            turn_complete = True
        self.display.draw_grid(self.grid)
        if turn_complete:
            self.event = ControllerEvent.SWITCH
            if self._after_drop():
                self.notify_observers()

    def _after_drop(self) -> bool:
        self.inspector.add_block(self.mover.block)
        self.post_processor.execute(self.mover, self.inspector)
        self.inspector.update_grid(self.mover)
        self.score += self.inspector.calculate_score(self.level)
        self.display.update_current_score(self.score)
        if self.score > self.highest_score:
            self.highest_score = self.score
            self.display.update_highest_score(self.highest_score)
        if self.inspector.triggered_action():
            self.event = ControllerEvent.ACTION
        self.inspector.reset_score()
        self.mover.block = None
        return self.load_block()

    def level_up(self) -> None:
        if self.level < MAX_LEVEL:
            self.level += 1
            self._set_level()
            self.display.update_level(self.level)

    def level_down(self) -> None:
        if self.level > 0:
            self.level -= 1
            self._set_level()
            self.display.update_level(self.level)

    def restart(self) -> None:
        """Start a fresh game at the current level."""
        self.score = 0
        self.event = ControllerEvent.NORMAL
        self.grid.clear()
        self.inspector.clear()
        self.mover.block = None
        self.next_block = None
        self.display.update_level(self.level)
        self.display.update_current_score(self.score)
        self.load_block()

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.notify(self)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def info(self) -> ControllerInfo:
        return ControllerInfo(self.level, self.name)