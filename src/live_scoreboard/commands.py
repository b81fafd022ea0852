"""
Text command layer for scoreboard hosts.

Turns lines such as

    start Mexico Canada
    update Mexico 0 Canada 5
    finish Mexico Canada
    summary

into ScoreBoard calls. Team names containing spaces can be quoted:
start "South Korea" Japan
"""

import shlex
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .logging_config import get_logger
from .scoreboard import ScoreBoard
from .scoreboard_exceptions import CommandParseError


logger = get_logger(__name__)

HELP_LINES = [
    "start HOME AWAY                           start a new game at 0 - 0",
    "update HOME HOME_SCORE AWAY AWAY_SCORE    set the score of a game",
    "finish HOME AWAY                          remove a finished game",
    "summary                                   show the board",
    "help                                      show this help",
    "quit                                      leave",
]

# action -> number of arguments
COMMAND_ARITY = {
    "start": 2,
    "update": 4,
    "finish": 2,
    "summary": 0,
    "help": 0,
    "quit": 0,
}

ALIASES = {
    "exit": "quit",
}


@dataclass(frozen=True)
class Command:
    """A parsed command line"""
    action: str
    args: Tuple = ()


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one command line.

    Returns:
        Command, or None for blank lines and # comments

    Raises:
        CommandParseError: For unknown actions, wrong argument counts,
            unbalanced quotes or scores that are not non-negative integers
    """
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise CommandParseError(line, str(e).capitalize()) from e

    if not tokens:
        return None

    action = tokens[0].lower()
    action = ALIASES.get(action, action)
    if action not in COMMAND_ARITY:
        raise CommandParseError(line, f"Unknown command {tokens[0]!r}")

    args = tokens[1:]
    expected = COMMAND_ARITY[action]
    if len(args) != expected:
        raise CommandParseError(
            line, f"{action} takes {expected} argument(s), got {len(args)}"
        )

    if action == "update":
        home_name, home_score, away_name, away_score = args
        return Command(action, (
            home_name,
            away_name,
            _parse_score(line, home_score),
            _parse_score(line, away_score),
        ))

    return Command(action, tuple(args))


def _parse_score(line: str, token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise CommandParseError(line, f"Score must be a non-negative integer, got {token!r}")
    return int(token)


class CommandProcessor:
    """
    Applies parsed commands to a ScoreBoard.

    Scoreboard errors propagate to the caller unchanged; the processor
    leaves reporting to the host.
    """

    def __init__(self, board: Optional[ScoreBoard] = None):
        self.board = board if board is not None else ScoreBoard()

    def execute(self, command: Command) -> List[str]:
        """
        Run a command against the board.

        Returns:
            Output lines for the host to display

        Raises:
            ScoreboardException: If the board rejects the command
        """
        if command.action == "start":
            home_name, away_name = command.args
            self.board.start(home_name, away_name)
            return [f"Started: {home_name} 0 - {away_name} 0"]

        if command.action == "update":
            home_name, away_name, home_score, away_score = command.args
            self.board.update(home_name, away_name, home_score, away_score)
            return [f"Updated: {home_name} {home_score} - {away_name} {away_score}"]

        if command.action == "finish":
            home_name, away_name = command.args
            self.board.finish(home_name, away_name)
            return [f"Finished: {home_name} - {away_name}"]

        if command.action == "summary":
            lines = self.board.summary()
            return lines if lines else ["No games in progress"]

        if command.action == "help":
            return list(HELP_LINES)

        # quit is handled by the host loop
        return []

    def execute_line(self, line: str) -> List[str]:
        """Parse and run a single line; blank lines produce no output"""
        command = parse_command(line)
        if command is None:
            return []
        logger.debug(f"Executing {command.action} {command.args}")
        return self.execute(command)
