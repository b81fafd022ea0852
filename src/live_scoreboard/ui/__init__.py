"""
Live Scoreboard UI Package

PySide6 ticker and desktop window for a ScoreBoard.
"""

from .scoreboard_ticker_widget import ContestScoreCard, ScoreboardTickerWidget
from .scoreboard_window import ScoreboardWindow

__all__ = ["ContestScoreCard", "ScoreboardTickerWidget", "ScoreboardWindow"]
