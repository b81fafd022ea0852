#!/usr/bin/env python3
"""
Live Scoreboard - desktop host

Ticker across the top, board summary in the middle and a command line at
the bottom. Commands use the same syntax as the command-line host.
"""

import sys
from typing import Optional

from PySide6.QtWidgets import (
    QApplication,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from ..commands import CommandProcessor, HELP_LINES, parse_command
from ..logging_config import get_logger, log_exception, setup_logging
from ..scoreboard import ScoreBoard
from ..scoreboard_exceptions import ScoreboardException
from ..settings import load_settings
from .scoreboard_ticker_widget import ScoreboardTickerWidget


logger = get_logger(__name__)


class ScoreboardWindow(QMainWindow):
    """
    Main window driving a ScoreBoard through text commands.

    The window owns the board; the ticker and the summary list are redrawn
    after every accepted command.
    """

    def __init__(
        self,
        board: Optional[ScoreBoard] = None,
        card_width: Optional[int] = None,
        parent: Optional[QWidget] = None
    ):
        super().__init__(parent)
        self._processor = CommandProcessor(board)

        self.setWindowTitle("Live Scoreboard")
        self.setMinimumSize(800, 500)

        central_widget = QWidget()
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        if card_width is None:
            self.ticker = ScoreboardTickerWidget()
        else:
            self.ticker = ScoreboardTickerWidget(card_width)
        layout.addWidget(self.ticker)

        self.summary_list = QListWidget()
        layout.addWidget(self.summary_list, stretch=1)

        self.command_input = QLineEdit()
        self.command_input.setPlaceholderText("start HOME AWAY | update HOME 1 AWAY 0 | finish HOME AWAY")
        self.command_input.returnPressed.connect(self._on_command_entered)
        layout.addWidget(self.command_input)

        self.setCentralWidget(central_widget)

        self.statusbar = QStatusBar()
        self.setStatusBar(self.statusbar)

        self.ticker.contest_clicked.connect(
            lambda line: self.statusbar.showMessage(line, 5000)
        )

        self.refresh()

    @property
    def board(self) -> ScoreBoard:
        return self._processor.board

    def refresh(self):
        """Redraw ticker and summary list from the board"""
        self.ticker.refresh_from(self.board)
        self.summary_list.clear()
        self.summary_list.addItems(self.board.summary())

    def run_command(self, line: str) -> bool:
        """
        Run one command line against the board.

        Returns:
            True if the command was accepted
        """
        try:
            command = parse_command(line)
            if command is None:
                return True
            if command.action == "quit":
                self.close()
                return True
            if command.action == "help":
                self.statusbar.showMessage(" | ".join(h.split()[0] for h in HELP_LINES), 5000)
                return True
            output = self._processor.execute(command)
        except ScoreboardException as e:
            self.statusbar.showMessage(f"Error: {e}")
            log_exception(logger, e, context={"input": line.strip()},
                          level="WARNING", include_traceback=False)
            return False

        self.refresh()
        if output:
            self.statusbar.showMessage(output[-1], 5000)
        return True

    def _on_command_entered(self):
        line = self.command_input.text()
        if self.run_command(line):
            self.command_input.clear()


def main() -> int:
    """Entry point for the live-scoreboard-gui script"""
    settings = load_settings()
    setup_logging(
        level=settings["log_level"],
        log_dir=settings["log_dir"],
        enable_console=settings["log_to_console"],
        enable_file=settings["log_to_file"],
        format_style=settings["log_format"],
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Live Scoreboard")

    window = ScoreboardWindow(card_width=settings["ticker_card_width"])
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
