"""Turns typed commands into operations, with prefixes, multipliers and macros."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from biquadris.operation import Operation

_COMMAND_PATTERN = re.compile(r"(\d*)(.*)", re.DOTALL)


class InvalidCommand(Exception):
    """A command that cannot be understood."""


def _last(op: Operation) -> Operation:
    while op.next_op is not None:
        op = op.next_op
    return op


def _repeat(op: Operation, times: int) -> Operation:
    """Return a fresh operation doing ``op`` ``times`` times over."""
    if op.next_op is None:
        return Operation(op.instruction, op.times * times)
    head: Operation | None = None
    for _ in range(times):
        piece = op.copy()
        if head is None:
            head = piece
        else:
            _last(head).next_op = piece
    return head if head is not None else Operation(op.instruction, 0)


class Interpreter:
    """Interprets commands against one of several command sets.

    The first set is in use normally; the second, if there is one, after a
    controller reports an action.
    """

    def __init__(self, command_sets: Iterable[Mapping[str, Operation]]) -> None:
        self.command_sets = [dict(commands) for commands in command_sets]
        if not self.command_sets:
            raise ValueError("at least one command set is needed")
        self.active = 0

    @property
    def commands(self) -> dict[str, Operation]:
        """The command set now in use."""
        return self.command_sets[self.active]

    def _lookup(self, name: str) -> Operation:
        if not name:
            raise InvalidCommand("no command given")
        commands = self.commands
        if name in commands:
            return commands[name]
        matches = [known for known in commands if known.startswith(name)]
        if not matches:
            raise InvalidCommand(f"cannot find command {name!r}")
        if len(matches) > 1:
            raise InvalidCommand(f"command {name!r} matches several: {', '.join(sorted(matches))}")
        return commands[matches[0]]

    def interpret(self, text: str) -> Operation:
        """Return the operation for a command such as ``3ri`` (right, three times)."""
        match = _COMMAND_PATTERN.fullmatch(text.strip())
        digits, name = match.groups()
        times = int(digits) if digits else 1
        return _repeat(self._lookup(name), times)

    def add_command(self, name: str, commands: Iterable[str]) -> None:
        """Define ``name`` as a sequence of existing commands."""
        if not name or name[0].isdigit():
            raise InvalidCommand(f"invalid command name {name!r}")
        if name in self.commands:
            raise InvalidCommand(f"command {name!r} already exists")
        head: Operation | None = None
        for text in commands:
            op = self.interpret(text)
            if head is None:
                head = op
            else:
                _last(head).next_op = op
        if head is None:
            raise InvalidCommand(f"command {name!r} needs at least one step")
        self.commands[name] = head

    def rename_command(self, old_name: str, new_name: str) -> None:
        """Give an existing command a new name; unknown names are ignored."""
        if old_name not in self.commands:
            return
        if not new_name or new_name[0].isdigit():
            raise InvalidCommand(f"invalid command name {new_name!r}")
        if new_name in self.commands:
            raise InvalidCommand(f"command {new_name!r} already exists")
        self.commands[new_name] = self.commands.pop(old_name)

    def notify(self, controller) -> None:
        """Switch command sets on a controller's ACTION or NORMAL event."""
        event = getattr(controller.event, "name", controller.event)
        if event == "ACTION":
            if len(self.command_sets) > 1:
                self.active = 1
        elif event == "NORMAL":
            self.active = 0