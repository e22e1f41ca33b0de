"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from connectk.cli import app
from connectk.utils import Config

runner = CliRunner()

SCENARIO = "\n".join([
    "/pov 1", "0",
    "/pov 2", "1",
    "/pov 1", "invalid", "1",
    "/pov 2", "10", "2",
    "/pov 1", "2",
    "/pov 2", "3",
    "/print",
    "/result",
    "/exit",
]) + "\n"


class TestRepl:
    def test_scenario(self):
        result = runner.invoke(app, ["repl", "--options", "4x3@3", "--quiet"], input=SCENARIO)
        assert result.exit_code == 0
        assert "| |X|X| |" in result.output
        assert "|X|O|O|O|" in result.output
        assert "O wins" in result.output
        # Both bad inputs were reported
        assert "failed to parse move" in result.output
        assert "column 10 does not exist" in result.output

    def test_wrong_player_rejected(self):
        commands = "/pov 2\n0\n/state\n"
        result = runner.invoke(app, ["repl", "--options", "4x3@3", "--quiet"], input=commands)
        assert result.exit_code == 0
        assert "///#x" in result.output
        assert "turn" in result.output

    def test_load_and_moves(self):
        commands = "/load XOX/O//#x\n/moves\n/load nope\n/state\n"
        result = runner.invoke(app, ["repl", "-o", "4x3@3", "-q"], input=commands)
        assert result.exit_code == 0
        assert "1 2 3" in result.output
        assert "XOX/O//#x" in result.output

    def test_resume_and_reset(self):
        commands = "/state\n/reset\n/state\n/options\n"
        result = runner.invoke(
            app, ["repl", "-o", "4x3@3", "-s", "X///#o", "-q"], input=commands
        )
        assert result.exit_code == 0
        assert "X///#o" in result.output
        assert "///#x" in result.output
        assert "4x3@3" in result.output

    def test_unknown_command(self):
        result = runner.invoke(app, ["repl", "-q"], input="/frobnicate\n")
        assert result.exit_code == 0
        assert "unknown command" in result.output

    def test_bad_options_exit(self):
        result = runner.invoke(app, ["repl", "--options", "4x4@5"], input="")
        assert result.exit_code == 1

    def test_move_log(self, tmp_path):
        log_dir = tmp_path / "logs"
        result = runner.invoke(
            app,
            ["repl", "-o", "4x3@3", "-q", "--log-dir", str(log_dir)],
            input="0\n1\n0\n",
        )
        assert result.exit_code == 0

        files = list(log_dir.glob("moves_*.jsonl"))
        assert len(files) == 1
        records = [json.loads(line) for line in files[0].read_text().splitlines()]
        assert [r["column"] for r in records] == [0, 1, 0]
        assert records[-1]["state"] == "XX/O//#o"

    def test_config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        Config(options="3x2@3", verbose=False).save(str(path))
        result = runner.invoke(app, ["repl", "--config", str(path)], input="/options\n")
        assert result.exit_code == 0
        assert "3x2@3" in result.output


class TestShow:
    def test_show(self):
        result = runner.invoke(app, ["show", "X/O//#x", "--options", "4x3@3"])
        assert result.exit_code == 0
        assert "|X|O| | |" in result.output
        assert "X to move" in result.output

    def test_show_invalid(self):
        result = runner.invoke(app, ["show", "X/O//#o", "--options", "4x3@3"])
        assert result.exit_code == 1


class TestCheck:
    def test_valid(self):
        result = runner.invoke(app, ["check", "XO/XO/X/#X", "-o", "4x3@3"])
        assert result.exit_code == 0
        assert "XO/XO/X/#X" in result.output
        assert "X wins" in result.output

    def test_invalid(self):
        result = runner.invoke(app, ["check", "X/O/X/#X", "-o", "4x3@3"])
        assert result.exit_code == 1

    def test_default_options(self):
        result = runner.invoke(app, ["check", "//////#x"])
        assert result.exit_code == 0
        assert "ongoing" in result.output


class TestConfigInit:
    def test_writes_defaults(self, tmp_path):
        path = tmp_path / "connectk.yaml"
        result = runner.invoke(app, ["config-init", str(path)])
        assert result.exit_code == 0
        assert Config.load(str(path)) == Config()
