"""Tests for the command-line entry point."""

import io

import pytest

from st3pbot import cli


@pytest.fixture
def stdio(monkeypatch):
    """Replace stdin/stdout with in-memory streams."""
    def _set(text):
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
        monkeypatch.setattr("sys.stdout", stdout)
        return stdout

    return _set


class TestCli:

    def test_session_and_quit(self, stdio):
        stdout = stdio("st3p version 1\nmove _________ X win-length 3\nquit\nidentify\n")
        assert cli.main([]) == 0
        assert stdout.getvalue().splitlines() == ["st3p version 1 ok", "best b2"]

    def test_end_of_input_exits_cleanly(self, stdio):
        stdout = stdio("move XX O\nmove 3/3/3 O\n")
        assert cli.main([]) == 0
        assert stdout.getvalue() == "best b2\n"

    def test_identity_flags(self, stdio):
        stdout = stdio("identify\n")
        assert cli.main(["--name", "tester", "--author", "someone"]) == 0
        lines = stdout.getvalue().splitlines()
        assert lines[0] == "identify name tester"
        assert lines[1] == "identify author someone"
        assert lines[3] == "identify ok"

    def test_default_win_length_flag(self, stdio):
        # With a default of 2 X wins next to its own mark
        stdout = stdio("move O2/1X1/3 X\n")
        assert cli.main(["--default-win-length", "2"]) == 0
        assert stdout.getvalue() == "best b1\n"

    def test_max_board_size_flag(self, stdio):
        stdout = stdio("move 4/4/4/4 X\nmove 3/3/3 X\n")
        assert cli.main(["--max-board-size", "3"]) == 0
        assert stdout.getvalue() == "best b2\n"

    def test_invalid_config_exits_with_error(self, stdio):
        stdout = stdio("identify\n")
        assert cli.main(["--max-board-size", "0"]) == 2
        assert stdout.getvalue() == ""

    def test_log_file(self, stdio, tmp_path):
        log_file = tmp_path / "bot.log"
        stdout = stdio("move 3/3/3 X\n")
        assert cli.main(["--log-file", str(log_file), "--log-level", "INFO"]) == 0
        assert stdout.getvalue() == "best b2\n"
