#!/usr/bin/env python3
"""
Live Scoreboard - command-line host

Reads scoreboard commands from the terminal (or a script file) and prints
the results. Rejected commands are reported and the session carries on.

Usage:
    # Interactive session
    live-scoreboard

    # Replay a script of commands
    live-scoreboard --script world_cup.txt

    # Stop at the first rejected command (exit status 1)
    live-scoreboard --script world_cup.txt --stop-on-error
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from .commands import CommandProcessor, parse_command
from .logging_config import get_logger, log_exception, setup_logging
from .scoreboard_exceptions import ScoreboardException
from .settings import load_settings


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_COMMAND_FAILED = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="live-scoreboard",
        description="Track live games and show them ordered by total score.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Commands:\n  " + "\n  ".join(
            [
                "start HOME AWAY",
                "update HOME HOME_SCORE AWAY AWAY_SCORE",
                "finish HOME AWAY",
                "summary",
            ]
        ),
    )
    parser.add_argument(
        "--script",
        type=argparse.FileType("r", encoding="utf-8"),
        help="Read commands from FILE instead of standard input",
    )
    parser.add_argument(
        "--config",
        help="Settings JSON file (default: $LIVE_SCOREBOARD_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Exit with status 1 at the first rejected command",
    )
    return parser


def run_session(
    processor: CommandProcessor,
    lines: Iterable[str],
    out: TextIO,
    stop_on_error: bool = False,
    prompt: str = "",
) -> int:
    """
    Run commands until the input ends or a quit command is read.

    Returns:
        Process exit status
    """
    if prompt:
        out.write(prompt)
        out.flush()

    for line_number, line in enumerate(lines, start=1):
        try:
            command = parse_command(line)
            if command is not None:
                if command.action == "quit":
                    break
                for output in processor.execute(command):
                    print(output, file=out)
        except ScoreboardException as e:
            print(f"Error: {e}", file=out)
            log_exception(
                logger,
                e,
                context={"line": line_number, "input": line.strip()},
                level="WARNING",
                include_traceback=False,
            )
            if stop_on_error:
                return EXIT_COMMAND_FAILED

        if prompt:
            out.write(prompt)
            out.flush()

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the live-scoreboard console script"""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    setup_logging(
        level=args.log_level or settings["log_level"],
        log_dir=settings["log_dir"],
        enable_console=settings["log_to_console"],
        enable_file=settings["log_to_file"],
        format_style=settings["log_format"],
    )

    processor = CommandProcessor()

    if args.script is not None:
        with args.script as script:
            logger.info(f"Running script {script.name}")
            return run_session(processor, script, sys.stdout, args.stop_on_error)

    interactive = sys.stdin.isatty()
    prompt = settings["prompt"] if interactive else ""
    status = run_session(processor, sys.stdin, sys.stdout, args.stop_on_error, prompt)
    if interactive:
        print()
    return status


if __name__ == "__main__":
    sys.exit(main())
