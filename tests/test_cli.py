import io
import sys

import pytest

from biquadris.cli import default_command_sets, main, read_sequence
from biquadris.interpreter import Interpreter
from biquadris.operation import Instruction


@pytest.fixture
def scripts(tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("O I\n")
    second.write_text("I\n")
    return ["-scriptfile1", str(first), "-scriptfile2", str(second)]


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_read_sequence(tmp_path):
    path = tmp_path / "seq.txt"
    path.write_text("I J\nL  O\n")
    assert read_sequence(path) == ["I", "J", "L", "O"]


def test_default_command_sets():
    normal, action = default_command_sets()
    interpreter = Interpreter([normal, action])
    assert interpreter.interpret("lef").instruction is Instruction.LEFT
    assert interpreter.interpret("dr").instruction is Instruction.DROP
    assert "blind" in action and "blind" not in normal
    assert action["heavy"].instruction is Instruction.HEAVY


def test_main_renders_after_each_command(monkeypatch, capsys, scripts):
    code, out = run(monkeypatch, capsys, ["-text", "-seed", "3", *scripts], "right\ndrop\n")
    assert code == 0
    assert out.count("Player 1") == 3


def test_main_reports_unknown_command(monkeypatch, capsys, scripts):
    code, out = run(monkeypatch, capsys, scripts, "xyz\n")
    assert code == 0
    assert "cannot find command" in out


def test_main_force_needs_block_name(monkeypatch, capsys, scripts):
    code, out = run(monkeypatch, capsys, scripts, "force II\n")
    assert code == 0
    assert "Please enter a block name!!" in out


def test_main_restart(monkeypatch, capsys, scripts):
    code, out = run(monkeypatch, capsys, scripts, "restart\n")
    assert code == 0
    assert "New game!!" in out


def test_main_missing_sequence_file(monkeypatch, capsys, tmp_path):
    missing = str(tmp_path / "missing.txt")
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    code = main(["-scriptfile1", missing, "-scriptfile2", missing])
    assert code == 1
    assert "biquadris:" in capsys.readouterr().err