"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Empty and pre-populated scoreboards
- Root logger isolation between tests
"""

import logging
import sys
from pathlib import Path

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"

if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


from live_scoreboard.scoreboard import ScoreBoard  # noqa: E402


# ============================================================================
# SCOREBOARD FIXTURES
# ============================================================================

# (home, away, home_score, away_score), in start order
WORLD_CUP_GAMES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]


@pytest.fixture
def board():
    """Empty scoreboard"""
    return ScoreBoard()


@pytest.fixture
def world_cup_board():
    """
    Scoreboard with five games started in WORLD_CUP_GAMES order,
    each updated to its final score right after it starts.
    """
    scoreboard = ScoreBoard()
    for home, away, home_score, away_score in WORLD_CUP_GAMES:
        scoreboard.start(home, away)
        scoreboard.update(home, away, home_score, away_score)
    return scoreboard


# ============================================================================
# LOGGING ISOLATION
# ============================================================================

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any setup_logging() call made during a test."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    yield

    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in original_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
