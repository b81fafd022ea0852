"""
Live Scoreboard

In-memory registry of games in progress, ordered by total score with the
most recently started game first on ties.
"""

from .scoreboard import Contest, ContestSnapshot, ScoreBoard, Team
from .scoreboard_exceptions import (
    CommandParseError,
    ContestNotFoundError,
    InvalidScoreError,
    InvalidTeamNameError,
    ScoreboardException,
    SelfPlayError,
    TeamBusyError,
)

__version__ = "1.0.0"

__all__ = [
    "ScoreBoard",
    "Team",
    "Contest",
    "ContestSnapshot",
    "ScoreboardException",
    "SelfPlayError",
    "TeamBusyError",
    "ContestNotFoundError",
    "InvalidTeamNameError",
    "InvalidScoreError",
    "CommandParseError",
]
