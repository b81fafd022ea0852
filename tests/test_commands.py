"""
Tests for command parsing and the command processor.
"""

import pytest

from live_scoreboard.commands import Command, CommandProcessor, HELP_LINES, parse_command
from live_scoreboard.scoreboard import ScoreBoard
from live_scoreboard.scoreboard_exceptions import (
    CommandParseError,
    ContestNotFoundError,
    TeamBusyError,
)


class TestParseCommand:
    """Test parse_command()"""

    def test_start(self):
        assert parse_command("start Mexico Canada") == Command("start", ("Mexico", "Canada"))

    def test_update_reorders_arguments(self):
        """Text form is HOME HOME_SCORE AWAY AWAY_SCORE"""
        assert parse_command("update Japan 2 Indonesia 0") == Command(
            "update", ("Japan", "Indonesia", 2, 0)
        )

    def test_finish(self):
        assert parse_command("finish Mexico Canada") == Command("finish", ("Mexico", "Canada"))

    def test_summary_and_case(self):
        assert parse_command("SUMMARY") == Command("summary")

    def test_exit_alias(self):
        assert parse_command("exit") == Command("quit")

    def test_quoted_names(self):
        assert parse_command('start "South Korea" "Saudi Arabia"') == Command(
            "start", ("South Korea", "Saudi Arabia")
        )

    @pytest.mark.parametrize("line", ["", "   ", "# a comment", "\n"])
    def test_blank_and_comment_lines(self, line):
        assert parse_command(line) is None

    def test_trailing_comment(self):
        assert parse_command("start A B  # opener") == Command("start", ("A", "B"))

    @pytest.mark.parametrize("line, reason", [
        ("kickoff A B", "Unknown command"),
        ("start A", "start takes 2 argument"),
        ("finish A B C", "finish takes 2 argument"),
        ("update A 1 B", "update takes 4 argument"),
        ("update A one B 0", "Score must be a non-negative integer"),
        ("update A -1 B 0", "Score must be a non-negative integer"),
        ('start "South Korea Japan', "No closing quotation"),
    ])
    def test_malformed(self, line, reason):
        with pytest.raises(CommandParseError, match=reason) as exc_info:
            parse_command(line)

        assert exc_info.value.error_code == "BAD_COMMAND"


class TestCommandProcessor:
    """Test CommandProcessor dispatch"""

    def test_creates_board_when_none_given(self):
        assert isinstance(CommandProcessor().board, ScoreBoard)

    def test_uses_given_board(self, board):
        processor = CommandProcessor(board)
        processor.execute_line("start Japan Indonesia")

        assert board.summary() == ["Japan 0 - Indonesia 0"]

    def test_full_flow(self):
        processor = CommandProcessor()

        assert processor.execute_line("start Japan Indonesia") == ["Started: Japan 0 - Indonesia 0"]
        assert processor.execute_line("update Japan 2 Indonesia 0") == ["Updated: Japan 2 - Indonesia 0"]
        assert processor.execute_line("summary") == ["Japan 2 - Indonesia 0"]
        assert processor.execute_line("finish Japan Indonesia") == ["Finished: Japan - Indonesia"]
        assert processor.execute_line("summary") == ["No games in progress"]

    def test_help(self):
        assert CommandProcessor().execute_line("help") == HELP_LINES

    def test_blank_line_produces_nothing(self):
        assert CommandProcessor().execute_line("") == []

    def test_quit_produces_nothing(self):
        assert CommandProcessor().execute(Command("quit")) == []

    def test_board_errors_propagate(self):
        processor = CommandProcessor()
        processor.execute_line("start A B")

        with pytest.raises(TeamBusyError):
            processor.execute_line("start A C")
        with pytest.raises(ContestNotFoundError):
            processor.execute_line("finish B A")

        assert processor.board.summary() == ["A 0 - B 0"]
