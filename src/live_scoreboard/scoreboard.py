"""
Scoreboard System

In-memory registry of the games currently being played and their live
scores. The board keeps itself ordered for display at all times:

    1. Highest combined score first
    2. Ties go to the most recently started game

A team can only play one game at a time. Scores are absolute: update()
replaces both scores rather than adding to them.

Usage:
    board = ScoreBoard()
    board.start("Mexico", "Canada")
    board.update("Mexico", "Canada", 0, 5)
    board.summary()          # ["Mexico 0 - Canada 5"]
    board.finish("Mexico", "Canada")
"""

from dataclasses import dataclass
from itertools import count
from typing import Iterator, List, Optional

from .logging_config import get_logger
from .scoreboard_exceptions import (
    ContestNotFoundError,
    InvalidScoreError,
    InvalidTeamNameError,
    SelfPlayError,
    TeamBusyError,
)


logger = get_logger(__name__)


@dataclass
class Team:
    """One side of a game"""
    name: str
    score: int = 0


@dataclass
class Contest:
    """
    A game between a home and an away team.

    start_order is assigned by the owning ScoreBoard and only its relative
    value matters (later games get larger numbers).
    """
    home: Team
    away: Team
    start_order: int

    def __post_init__(self):
        if self.home.name == self.away.name:
            raise SelfPlayError(self.home.name)

    @property
    def total_score(self) -> int:
        return self.home.score + self.away.score

    def involves(self, team_name: str) -> bool:
        return team_name in (self.home.name, self.away.name)

    def summary_line(self) -> str:
        return f"{self.home.name} {self.home.score} - {self.away.name} {self.away.score}"


@dataclass(frozen=True)
class ContestSnapshot:
    """Read-only copy of a game handed out to callers"""
    home_name: str
    home_score: int
    away_name: str
    away_score: int
    start_order: int

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    @property
    def leader(self) -> Optional[str]:
        """Name of the leading team, or None if tied"""
        if self.home_score == self.away_score:
            return None
        return self.home_name if self.home_score > self.away_score else self.away_name

    def summary_line(self) -> str:
        return f"{self.home_name} {self.home_score} - {self.away_name} {self.away_score}"

    @classmethod
    def from_contest(cls, contest: Contest) -> "ContestSnapshot":
        return cls(
            home_name=contest.home.name,
            home_score=contest.home.score,
            away_name=contest.away.name,
            away_score=contest.away.score,
            start_order=contest.start_order,
        )


def _sort_key(contest: Contest):
    return (contest.total_score, contest.start_order)


class ScoreBoard:
    """
    Live scoreboard for all games currently in progress.

    Owns its Contest records exclusively. Callers get rendered summary lines
    or ContestSnapshot copies, never the records themselves.

    Not thread-safe; a host serving several callers must serialize access.
    """

    def __init__(self):
        self._contests: List[Contest] = []
        self._start_counter = count(1)

    # ---------- Mutations ----------
    def start(self, home_name: str, away_name: str) -> None:
        """
        Start a new game with a 0 - 0 score.

        Args:
            home_name: Home team name
            away_name: Away team name

        Raises:
            InvalidTeamNameError: If either name is empty or not a string
            SelfPlayError: If both names are the same
            TeamBusyError: If either team is already playing (home checked first)
        """
        _validate_team_name(home_name)
        _validate_team_name(away_name)

        if home_name == away_name:
            raise SelfPlayError(home_name)

        for team_name in (home_name, away_name):
            if self._find_contest_involving(team_name) is not None:
                raise TeamBusyError(team_name)

        contest = Contest(
            home=Team(home_name),
            away=Team(away_name),
            start_order=next(self._start_counter),
        )
        self._contests.append(contest)
        self._sort()

        logger.debug(f"Started game {contest.summary_line()} (start_order={contest.start_order})")

    def update(self, home_name: str, away_name: str,
               home_score: int, away_score: int) -> None:
        """
        Replace the score of a game in progress.

        Args:
            home_name: Home team of the game, exactly as started
            away_name: Away team of the game, exactly as started
            home_score: New absolute home score
            away_score: New absolute away score

        Raises:
            InvalidScoreError: If a score is not a non-negative integer
            ContestNotFoundError: If no game has this exact home/away pair
        """
        _validate_score(home_name, home_score)
        _validate_score(away_name, away_score)

        contest = self._find_contest_between(home_name, away_name)
        if contest is None:
            raise ContestNotFoundError(home_name, away_name, "update")

        contest.home.score = home_score
        contest.away.score = away_score
        self._sort()

        logger.debug(f"Updated game {contest.summary_line()}")

    def finish(self, home_name: str, away_name: str) -> None:
        """
        Remove a finished game from the board.

        Raises:
            ContestNotFoundError: If no game has this exact home/away pair
        """
        contest = self._find_contest_between(home_name, away_name)
        if contest is None:
            raise ContestNotFoundError(home_name, away_name, "finish")

        self._contests.remove(contest)
        self._sort()

        logger.debug(f"Finished game {contest.summary_line()}")

    # ---------- Reads ----------
    def summary(self) -> List[str]:
        """
        Get the board as display lines, in board order.

        Returns:
            One "Home X - Away Y" line per game, empty list if no games
        """
        return [contest.summary_line() for contest in self._contests]

    def standings(self) -> List[ContestSnapshot]:
        """Get read-only copies of all games, in board order"""
        return [ContestSnapshot.from_contest(contest) for contest in self._contests]

    def is_playing(self, team_name: str) -> bool:
        """Check whether a team is in a game in progress"""
        return self._find_contest_involving(team_name) is not None

    # ---------- Internal helpers ----------
    def _find_contest_involving(self, team_name: str) -> Optional[Contest]:
        """First game with team_name on either side, or None"""
        for contest in self._contests:
            if contest.involves(team_name):
                return contest
        return None

    def _find_contest_between(self, home_name: str, away_name: str) -> Optional[Contest]:
        """
        Game with exactly this home and away team, or None.

        A game with the roles swapped does not match.
        """
        contest = self._find_contest_involving(home_name)
        if contest is None:
            return None
        if contest.home.name != home_name or contest.away.name != away_name:
            return None
        return contest

    def _sort(self) -> None:
        # list.sort is stable, equal keys keep their current relative order
        self._contests.sort(key=_sort_key, reverse=True)

    # ---------- Dunder helpers ----------
    def __len__(self) -> int:
        return len(self._contests)

    def __iter__(self) -> Iterator[str]:
        return iter(self.summary())

    def __str__(self) -> str:
        """Summary lines joined by newlines"""
        return "\n".join(self.summary())

    def __repr__(self) -> str:
        return f"ScoreBoard(games={len(self._contests)})"


def _validate_team_name(team_name) -> None:
    if not isinstance(team_name, str) or not team_name.strip():
        raise InvalidTeamNameError(team_name)


def _validate_score(team_name: str, score) -> None:
    if isinstance(score, bool) or not isinstance(score, int) or score < 0:
        raise InvalidScoreError(team_name, score)
