"""
ScoreboardTickerWidget - ESPN-style horizontal scrolling scoreboard.

Shows the games of a ScoreBoard as a strip of score cards, in board order
(highest total first). The widget only reads the board.
"""

from typing import List, Optional, Sequence

from PySide6.QtWidgets import (
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QScrollArea,
    QFrame,
    QPushButton,
)
from PySide6.QtCore import Qt, Signal

from ..scoreboard import ContestSnapshot, ScoreBoard
from ..settings import ScoreboardSettings
from .theme import (
    ESPN_RED,
    ESPN_DARK_BG,
    ESPN_CARD_BG,
    ESPN_CARD_HOVER,
    ESPN_TEXT_MUTED,
    ESPN_BORDER,
    nav_button_style,
    team_label_style,
)


class ContestScoreCard(QFrame):
    """Individual game score card in the ticker."""

    clicked = Signal(str)  # summary line

    def __init__(
        self,
        contest: ContestSnapshot,
        card_width: int = ScoreboardSettings.TICKER_CARD_WIDTH,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self._contest = contest
        self._card_width = card_width
        self._setup_ui()

    @property
    def contest(self) -> ContestSnapshot:
        return self._contest

    def _setup_ui(self):
        """Build the score card UI."""
        self.setFixedWidth(self._card_width)
        self.setFixedHeight(70)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.setStyleSheet(f"""
            ContestScoreCard {{
                background-color: {ESPN_CARD_BG};
                border: 1px solid {ESPN_BORDER};
                border-radius: 4px;
            }}
            ContestScoreCard:hover {{
                border: 1px solid {ESPN_RED};
                background-color: {ESPN_CARD_HOVER};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 6, 8, 6)
        layout.setSpacing(2)

        leader = self._contest.leader
        layout.addLayout(self._team_row(
            self._contest.home_name, self._contest.home_score,
            leader == self._contest.home_name
        ))
        layout.addLayout(self._team_row(
            self._contest.away_name, self._contest.away_score,
            leader == self._contest.away_name
        ))

        total_label = QLabel(f"TOTAL {self._contest.total_score}")
        total_label.setStyleSheet(f"color: {ESPN_TEXT_MUTED}; font-size: 9px;")
        total_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(total_label)

    def _team_row(self, name: str, score: int, leading: bool) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(4)

        name_label = QLabel(name)
        name_label.setStyleSheet(team_label_style(leading, 11))
        row.addWidget(name_label)
        row.addStretch()

        score_label = QLabel(str(score))
        score_label.setStyleSheet(team_label_style(leading, 12))
        row.addWidget(score_label)
        return row

    def mousePressEvent(self, event):
        """Handle click to emit the game's summary line."""
        self.clicked.emit(self._contest.summary_line())
        super().mousePressEvent(event)


class ScoreboardTickerWidget(QWidget):
    """
    ESPN-style horizontal scoreboard ticker.

    Features:
    - Horizontal scrolling list of live games in board order
    - Left/right navigation arrows
    - Click on a game to emit its summary line
    """

    contest_clicked = Signal(str)

    def __init__(
        self,
        card_width: int = ScoreboardSettings.TICKER_CARD_WIDTH,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self._card_width = card_width
        self._standings: List[ContestSnapshot] = []
        self._setup_ui()

    def _setup_ui(self):
        """Build the ticker UI."""
        self.setFixedHeight(90)
        self.setStyleSheet(f"""
            ScoreboardTickerWidget {{
                background-color: {ESPN_DARK_BG};
                border-bottom: 2px solid {ESPN_RED};
            }}
        """)

        main_layout = QHBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self._left_btn = QPushButton("<")
        self._left_btn.setFixedSize(30, 70)
        self._left_btn.setStyleSheet(nav_button_style())
        self._left_btn.clicked.connect(self._scroll_left)
        main_layout.addWidget(self._left_btn)

        self._scroll_area = QScrollArea()
        self._scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self._scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self._scroll_area.setWidgetResizable(True)
        self._scroll_area.setStyleSheet("""
            QScrollArea {
                background-color: transparent;
                border: none;
            }
        """)

        self._cards_container = QWidget()
        self._cards_container.setStyleSheet("background-color: transparent;")
        self._cards_layout = QHBoxLayout(self._cards_container)
        self._cards_layout.setContentsMargins(8, 8, 8, 8)
        self._cards_layout.setSpacing(8)
        self._cards_layout.addStretch()

        self._empty_label = QLabel("No games in progress")
        self._empty_label.setStyleSheet(f"color: {ESPN_TEXT_MUTED}; font-size: 11px;")
        self._cards_layout.insertWidget(0, self._empty_label)

        self._scroll_area.setWidget(self._cards_container)
        main_layout.addWidget(self._scroll_area)

        self._right_btn = QPushButton(">")
        self._right_btn.setFixedSize(30, 70)
        self._right_btn.setStyleSheet(nav_button_style())
        self._right_btn.clicked.connect(self._scroll_right)
        main_layout.addWidget(self._right_btn)

        # Scroll range is only known once the layout settles
        self._scroll_area.horizontalScrollBar().rangeChanged.connect(
            lambda _minimum, _maximum: self._update_button_states()
        )

    def set_standings(self, standings: Sequence[ContestSnapshot]):
        """
        Replace the cards with the given games, keeping their order.

        Args:
            standings: Games as returned by ScoreBoard.standings()
        """
        self._standings = list(standings)

        for card in self.cards():
            self._cards_layout.removeWidget(card)
            card.deleteLater()

        # Empty label sits first, stretch last
        for contest in self._standings:
            card = ContestScoreCard(contest, self._card_width)
            card.clicked.connect(self.contest_clicked.emit)
            self._cards_layout.insertWidget(self._cards_layout.count() - 1, card)

        self._empty_label.setVisible(not self._standings)
        self._update_button_states()

    def refresh_from(self, board: ScoreBoard):
        """Redraw the ticker from the board's current standings"""
        self.set_standings(board.standings())

    def cards(self) -> List[ContestScoreCard]:
        """Score cards currently in the ticker, left to right"""
        cards = []
        for index in range(self._cards_layout.count()):
            widget = self._cards_layout.itemAt(index).widget()
            if isinstance(widget, ContestScoreCard):
                cards.append(widget)
        return cards

    def _scroll_left(self):
        """Scroll ticker left."""
        scroll_bar = self._scroll_area.horizontalScrollBar()
        scroll_bar.setValue(scroll_bar.value() - 300)
        self._update_button_states()

    def _scroll_right(self):
        """Scroll ticker right."""
        scroll_bar = self._scroll_area.horizontalScrollBar()
        scroll_bar.setValue(scroll_bar.value() + 300)
        self._update_button_states()

    def _update_button_states(self):
        """Update enabled state of navigation buttons."""
        scroll_bar = self._scroll_area.horizontalScrollBar()
        self._left_btn.setEnabled(scroll_bar.value() > scroll_bar.minimum())
        self._right_btn.setEnabled(scroll_bar.value() < scroll_bar.maximum())
