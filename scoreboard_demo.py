#!/usr/bin/env python3
"""
Scoreboard System Demonstration

Runs five World Cup games through the live scoreboard and prints the board
after each step, then shows how the board rejects invalid requests.
"""

import sys
from pathlib import Path

# Add project paths
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from live_scoreboard import ScoreBoard, ScoreboardException  # noqa: E402


GAMES = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]


def print_board(board: ScoreBoard):
    for position, line in enumerate(board.summary(), start=1):
        print(f"  {position}. {line}")
    print()


def main():
    """Demonstrate scoreboard functionality"""
    print("Live Scoreboard Demo")
    print("=" * 50)

    board = ScoreBoard()

    for home, away, home_score, away_score in GAMES:
        print(f"Kick-off: {home} vs {away}")
        board.start(home, away)
        board.update(home, away, home_score, away_score)
        print(f"Score update: {home} {home_score} - {away} {away_score}")
        print_board(board)

    print("Invalid requests")
    print("-" * 30)
    attempts = [
        ("start Spain Peru", lambda: board.start("Spain", "Peru")),
        ("start Peru Peru", lambda: board.start("Peru", "Peru")),
        ("update Italy Uruguay", lambda: board.update("Italy", "Uruguay", 1, 0)),
        ("finish Peru Chile", lambda: board.finish("Peru", "Chile")),
    ]
    for label, attempt in attempts:
        try:
            attempt()
        except ScoreboardException as e:
            print(f"  {label:<22} -> {e}")
    print()

    print("Full time: Uruguay vs Italy")
    board.finish("Uruguay", "Italy")
    print_board(board)


if __name__ == "__main__":
    main()
