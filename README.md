# biquadris

A two-player falling-block puzzle game for the terminal. Two players take
turns on their own boards, shown side by side as text. Clearing two or more
rows in one turn lets a player hit the opponent with a special action.

## Installation

```
pip install .
```

## Playing

```
biquadris
```

By default the game reads the block sequences `sequence1.txt` and
`sequence2.txt` from the current directory. Both files must exist, whatever
the starting level. If a file cannot be read, or the starting level is not
between 0 and 4, the command prints `biquadris: <reason>` to standard error and
exits with status 1.

Options:

- `-text`: accepted. The game always uses the text display.
- `-seed N`: seed the random block generator and the block settings.
- `-scriptfile1 PATH`: block sequence for player 1.
- `-scriptfile2 PATH`: block sequence for player 2.
- `-startlevel N`: level to start both players at, 0 to 4 (default 0).

A sequence file holds block names separated by whitespace: `I`, `J`, `L`, `O`,
`S`, `Z`, `T`. Any other name gives a single-square `*` block.

After every command the whole display is printed again: both players' levels,
scores, the highest score, both boards and the next block for each player.

### Levels

- Level 0: blocks come from the player's sequence file in order, starting
  over at the end.
- Levels 1 to 4: blocks are chosen at random. Level 1 favours `I`, `J`, `L`,
  `O` and `T`. Level 2 weighs all blocks equally. Levels 3 and 4 favour `S`
  and `Z`.
- Levels 3 and 4: every block is heavy and moves down one extra row after each
  command.
- Level 4: every sixth turn a `*` block drops down column 5.

### Commands

Commands are read from standard input, separated by whitespace. A command may
start with a repeat count, as in `3right`. A command name may be shortened to
any prefix that matches only one command, so `ri` means `right`; `c` is
rejected because it matches both rotations.

| Command            | Effect                                          |
|--------------------|-------------------------------------------------|
| `left`, `right`    | move the current block sideways                 |
| `down`             | move the current block down one row             |
| `clockwise`        | rotate clockwise                                |
| `counterclockwise` | rotate counterclockwise                         |
| `drop`             | drop the block as far as it goes, end the turn  |
| `levelup`          | raise the level                                 |
| `leveldown`        | lower the level                                 |
| `I`, `J`, `L`, `O`, `S`, `Z`, `T` | replace the current block with this kind |
| `force X`          | replace the current block with block `X`        |
| `restart`          | start a new game for both players               |

A turn also ends when a `down` or a heavy block's extra move finds the block
cannot go lower. An unknown or ambiguous command prints a message and is
skipped. `force` followed by anything but a block letter prints
`Please enter a block name!!`.

### Scoring and actions

At the end of each turn a player scores `(rows cleared + level)²`, plus
`(block level + 1)²` for every block that has been cleared away entirely.
The highest score is kept across new games.

When a player clears two or more rows in one turn, the next command is taken
from the action set and applied to the opponent:

- `heavy`: the opponent's next block is heavier by two rows.
- `blind`: the middle of the opponent's board (columns 2 to 8, rows 2 to 11)
  is painted with `?`; the board is redrawn in full at the end of the same
  command.
- a block letter: replaces the opponent's current block.

The game is over for a player when a new block, or a replacement block, does
not fit on the board. The program then prints `Game over!! player N lose`,
then `New game!!`, and both players start again at their current levels.

## What it does not do

There is no graphical window: the only display is the text one, so `-text`
changes nothing. New commands can be defined and renamed through
`Interpreter.add_command` and `Interpreter.rename_command`, but the
`biquadris` command offers no way to do so while playing.

## Using the library

The game pieces can be used on their own:

```python
from biquadris.grid import Grid
from biquadris.movement import MovementController
from biquadris.block_factory import make_block

grid = Grid(11, 15)
mover = MovementController(grid)
mover.inject_block(make_block("T"), 0, 3)
mover.move_right()
mover.drop()
```

Commands become chains of instructions:

```python
from biquadris.cli import default_command_sets
from biquadris.interpreter import Interpreter

interpreter = Interpreter(default_command_sets())
operation = interpreter.interpret("3ri")
list(operation)  # [Instruction.RIGHT, Instruction.RIGHT, Instruction.RIGHT]
```

Other parts:

- `biquadris.blocks`: the block kinds `IBlock`, `JBlock`, `LBlock`, `OBlock`,
  `SBlock`, `TBlock`, `ZBlock`, `StarBlock` and their rotations.
- `biquadris.block_factory`: `SequenceBlockFactory` and `RandomBlockFactory`.
- `biquadris.grid_inspector.GridInspector`: clears full rows, lets blocks fall
  and keeps the score for a turn.
- `biquadris.display.TextDisplay`: `render()` returns the text view of both
  boards.
- `biquadris.game_controller.GameController`: one player's game;
  `biquadris.turn_switcher.TurnSwitcher` passes operations to the player whose
  turn it is.