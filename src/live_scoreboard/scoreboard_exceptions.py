"""
Scoreboard Exception Classes

Exception hierarchy for the live scoreboard. Every error is recoverable:
the board validates before it mutates, so a raised exception always leaves
the collection exactly as it was.

Exception Hierarchy:
    ScoreboardException (base)
    ├── SelfPlayError
    ├── TeamBusyError
    ├── ContestNotFoundError
    ├── InvalidTeamNameError
    ├── InvalidScoreError
    └── CommandParseError
"""

from typing import Any, Dict, Optional


class ScoreboardException(Exception):
    """
    Base exception for all scoreboard errors.

    str() of the exception is the plain human-readable message so hosting
    layers can print it as-is; use formatted_message() for the coded form.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        """
        Initialize scoreboard exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)

    def formatted_message(self) -> str:
        """Format the error message with optional error code."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def context(self) -> Dict[str, Any]:
        """Offending values carried by the exception (overridden by subclasses)."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging"""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context(),
        }


class SelfPlayError(ScoreboardException):
    """Raised when a game is started with the same team on both sides."""

    def __init__(self, team_name: str):
        self.team_name = team_name
        super().__init__(f"{team_name} cannot play with itself", "SELF_PLAY")

    def context(self) -> Dict[str, Any]:
        return {"team_name": self.team_name}


class TeamBusyError(ScoreboardException):
    """Raised when a team named in start() is already in an active game."""

    def __init__(self, team_name: str):
        self.team_name = team_name
        super().__init__(f"{team_name} is currently playing a game", "TEAM_BUSY")

    def context(self) -> Dict[str, Any]:
        return {"team_name": self.team_name}


class ContestNotFoundError(ScoreboardException):
    """
    Raised when update() or finish() names a home/away pair with no
    matching active game.

    Role-swapped pairs and pairs where only one team matches are not found.
    """

    OPERATION_LABELS = {
        "update": "update",
        "finish": "removal",
    }

    def __init__(self, home_name: str, away_name: str, operation: str):
        """
        Args:
            home_name: Home team name used for the lookup
            away_name: Away team name used for the lookup
            operation: "update" or "finish"
        """
        self.home_name = home_name
        self.away_name = away_name
        self.operation = operation
        label = self.OPERATION_LABELS.get(operation, operation)
        super().__init__(f"Couldn't find a game for {label}", "CONTEST_NOT_FOUND")

    def context(self) -> Dict[str, Any]:
        return {
            "home_name": self.home_name,
            "away_name": self.away_name,
            "operation": self.operation,
        }


class InvalidTeamNameError(ScoreboardException, ValueError):
    """Raised when a team name is not a non-empty string."""

    def __init__(self, team_name: Any):
        self.team_name = team_name
        super().__init__(
            f"Invalid team name: {team_name!r}. Must be a non-empty string.",
            "INVALID_TEAM_NAME"
        )

    def context(self) -> Dict[str, Any]:
        return {"team_name": self.team_name}


class InvalidScoreError(ScoreboardException, ValueError):
    """Raised when a score is not a non-negative integer."""

    def __init__(self, team_name: str, score: Any):
        self.team_name = team_name
        self.score = score
        super().__init__(
            f"Invalid score for {team_name}: {score!r}. Must be a non-negative integer.",
            "INVALID_SCORE"
        )

    def context(self) -> Dict[str, Any]:
        return {"team_name": self.team_name, "score": self.score}


class CommandParseError(ScoreboardException):
    """Raised when a text command cannot be parsed."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line.strip()!r}", "BAD_COMMAND")

    def context(self) -> Dict[str, Any]:
        return {"line": self.line}
