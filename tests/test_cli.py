"""
Tests for the command-line host.
"""

import io

import pytest

from live_scoreboard import cli
from live_scoreboard.commands import CommandProcessor
from live_scoreboard.settings import CONFIG_ENV_VAR


WORLD_CUP_SCRIPT = """\
# Group stage
start Mexico Canada
update Mexico 0 Canada 5
start Spain Brazil
update Spain 10 Brazil 2
start Germany France
update Germany 2 France 2
start Uruguay Italy
update Uruguay 6 Italy 6
start Argentina Australia
update Argentina 3 Australia 1
summary
"""


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def script_file(tmp_path):
    def _write(text):
        path = tmp_path / "commands.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestRunSession:
    """Test run_session() with in-memory streams"""

    def test_commands_and_errors(self):
        out = io.StringIO()
        lines = ["start A B\n", "start A C\n", "summary\n"]

        status = cli.run_session(CommandProcessor(), lines, out)

        assert status == cli.EXIT_OK
        assert out.getvalue().splitlines() == [
            "Started: A 0 - B 0",
            "Error: A is currently playing a game",
            "A 0 - B 0",
        ]

    def test_stop_on_error(self):
        out = io.StringIO()
        lines = ["start A A\n", "start C D\n"]
        processor = CommandProcessor()

        status = cli.run_session(processor, lines, out, stop_on_error=True)

        assert status == cli.EXIT_COMMAND_FAILED
        assert out.getvalue() == "Error: A cannot play with itself\n"
        assert processor.board.summary() == []

    def test_quit_stops_reading(self):
        out = io.StringIO()
        processor = CommandProcessor()

        cli.run_session(processor, ["start A B\n", "quit\n", "start C D\n"], out)

        assert processor.board.summary() == ["A 0 - B 0"]

    def test_prompt_written(self):
        out = io.StringIO()

        cli.run_session(CommandProcessor(), ["summary\n"], out, prompt="> ")

        assert out.getvalue() == "> No games in progress\n> "

    def test_parse_errors_reported(self):
        out = io.StringIO()

        cli.run_session(CommandProcessor(), ["kickoff A B\n"], out)

        assert out.getvalue().startswith("Error: Unknown command 'kickoff'")


class TestMain:
    """Test main() end to end"""

    def test_script_mode(self, script_file, capsys):
        status = cli.main(["--script", script_file(WORLD_CUP_SCRIPT), "--log-level", "WARNING"])

        assert status == 0
        output = capsys.readouterr().out.splitlines()
        assert output[-5:] == [
            "Uruguay 6 - Italy 6",
            "Spain 10 - Brazil 2",
            "Mexico 0 - Canada 5",
            "Argentina 3 - Australia 1",
            "Germany 2 - France 2",
        ]

    def test_script_stop_on_error(self, script_file, capsys):
        path = script_file("start A B\nupdate B 1 A 0\nsummary\n")

        status = cli.main(["--script", path, "--stop-on-error", "--log-level", "ERROR"])

        assert status == 1
        output = capsys.readouterr().out.splitlines()
        assert output == ["Started: A 0 - B 0", "Error: Couldn't find a game for update"]

    def test_stdin_mode(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("start Japan Indonesia\nsummary\n"))

        status = cli.main(["--log-level", "ERROR"])

        assert status == 0
        assert capsys.readouterr().out.splitlines() == [
            "Started: Japan 0 - Indonesia 0",
            "Japan 0 - Indonesia 0",
        ]

    def test_unknown_log_level_in_config_falls_back(self, script_file, tmp_path, capsys):
        config_path = tmp_path / "settings.json"
        config_path.write_text('{"log_level": "VERBOSE"}', encoding="utf-8")

        status = cli.main(["--config", str(config_path), "--script", script_file("start A B\n")])

        assert status == 0
        assert capsys.readouterr().out.splitlines() == ["Started: A 0 - B 0"]

    def test_bad_log_level_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--log-level", "LOUD"])

        assert exc_info.value.code == 2
