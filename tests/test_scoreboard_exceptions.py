"""
Tests for the scoreboard exception hierarchy.
"""

import pytest

from live_scoreboard.scoreboard_exceptions import (
    CommandParseError,
    ContestNotFoundError,
    InvalidScoreError,
    InvalidTeamNameError,
    ScoreboardException,
    SelfPlayError,
    TeamBusyError,
)


class TestMessages:
    """str() of each exception is the plain message hosts print"""

    def test_self_play(self):
        error = SelfPlayError("Georgia")

        assert str(error) == "Georgia cannot play with itself"
        assert error.error_code == "SELF_PLAY"

    def test_team_busy(self):
        error = TeamBusyError("Spain")

        assert str(error) == "Spain is currently playing a game"
        assert error.error_code == "TEAM_BUSY"

    def test_not_found_for_update(self):
        error = ContestNotFoundError("Spain", "Brazil", "update")

        assert str(error) == "Couldn't find a game for update"
        assert error.home_name == "Spain"
        assert error.away_name == "Brazil"

    def test_not_found_for_finish(self):
        assert str(ContestNotFoundError("Spain", "Brazil", "finish")) == "Couldn't find a game for removal"

    def test_formatted_message(self):
        assert TeamBusyError("Spain").formatted_message() == "[TEAM_BUSY] Spain is currently playing a game"
        assert ScoreboardException("plain").formatted_message() == "plain"


class TestHierarchy:
    """Test base classes"""

    @pytest.mark.parametrize("error", [
        SelfPlayError("A"),
        TeamBusyError("A"),
        ContestNotFoundError("A", "B", "update"),
        InvalidTeamNameError(""),
        InvalidScoreError("A", -1),
        CommandParseError("bogus", "Unknown command"),
    ])
    def test_all_are_scoreboard_exceptions(self, error):
        assert isinstance(error, ScoreboardException)

    def test_validation_errors_are_value_errors(self):
        assert isinstance(InvalidTeamNameError(""), ValueError)
        assert isinstance(InvalidScoreError("A", -1), ValueError)
        assert not isinstance(TeamBusyError("A"), ValueError)


class TestToDict:
    """Test structured form used for logging"""

    def test_to_dict(self):
        data = ContestNotFoundError("Spain", "Brazil", "finish").to_dict()

        assert data == {
            "error_type": "ContestNotFoundError",
            "error_code": "CONTEST_NOT_FOUND",
            "message": "Couldn't find a game for removal",
            "context": {"home_name": "Spain", "away_name": "Brazil", "operation": "finish"},
        }

    def test_invalid_score_context(self):
        error = InvalidScoreError("Spain", -3)

        assert error.context() == {"team_name": "Spain", "score": -3}
        assert "-3" in str(error)
