"""Command-line entry point: two players taking turns on one text display."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from biquadris.block_factory import SequenceBlockFactory
from biquadris.display import TextDisplay
from biquadris.display_controller import DisplayController
from biquadris.game_controller import (
    BLOCK_INSTRUCTIONS,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    GameController,
)
from biquadris.grid import RESERVED_ROWS
from biquadris.interpreter import Interpreter, InvalidCommand
from biquadris.operation import Instruction, Operation
from biquadris.turn_switcher import TurnSwitcher


def read_sequence(path: str | Path) -> list[str]:
    """Read whitespace-separated block names from a file."""
    return Path(path).read_text().split()


def default_command_sets() -> list[dict[str, Operation]]:
    """Return the normal command set and the set used after a special action."""
    normal = {
        "left": Operation(Instruction.LEFT),
        "right": Operation(Instruction.RIGHT),
        "down": Operation(Instruction.DOWN),
        "clockwise": Operation(Instruction.CLOCKWISE),
        "counterclockwise": Operation(Instruction.COUNTERCLOCKWISE),
        "drop": Operation(Instruction.DROP),
        "levelup": Operation(Instruction.LEVELUP),
        "leveldown": Operation(Instruction.LEVELDOWN),
    }
    action = {
        "blind": Operation(Instruction.BLIND),
        "heavy": Operation(Instruction.HEAVY),
    }
    for name, instruction in BLOCK_INSTRUCTIONS.items():
        normal[name] = Operation(instruction)
        action[name] = Operation(instruction)
    return [normal, action]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="biquadris", allow_abbrev=False)
    parser.add_argument("-text", action="store_true", help="use the text display only")
    parser.add_argument("-seed", type=int, default=None, help="seed for random blocks")
    parser.add_argument("-scriptfile1", default="sequence1.txt", help="block sequence for player 1")
    parser.add_argument("-scriptfile2", default="sequence2.txt", help="block sequence for player 2")
    parser.add_argument("-startlevel", type=int, default=0, help="level to start at")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    display = TextDisplay(rows=BOARD_HEIGHT + RESERVED_ROWS, columns=BOARD_WIDTH)
    try:
        factories = [
            SequenceBlockFactory(read_sequence(args.scriptfile1)),
            SequenceBlockFactory(read_sequence(args.scriptfile2)),
        ]
        controllers = [
            GameController(factory, DisplayController([display], index), args.startlevel, f"player {index + 1}", rng)
            for index, factory in enumerate(factories)
        ]
    except (OSError, ValueError) as exc:
        print(f"biquadris: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    interpreter = Interpreter(default_command_sets())
    switcher = TurnSwitcher(controllers, out)
    for controller in controllers:
        controller.add_observer(interpreter)
        controller.add_observer(switcher)

    out.write(display.render())
    tokens = (token for line in sys.stdin for token in line.split())
    for token in tokens:
        if token == "restart":
            switcher.restart()
        elif token == "force":
            instruction = BLOCK_INSTRUCTIONS.get(next(tokens, ""))
            if instruction is None:
                print("Please enter a block name!!", file=out)
                continue
            switcher.pass_operation(Operation(instruction))
        else:
            try:
                operation = interpreter.interpret(token)
            except InvalidCommand as exc:
                print(exc, file=out)
                continue
            switcher.pass_operation(operation)
        out.write(display.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())