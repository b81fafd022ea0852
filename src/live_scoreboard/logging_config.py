"""
Logging Configuration for Live Scoreboard

Provides logging configuration with:
- Rotating file handlers (prevents unbounded log growth)
- Colored console output
- Module-specific loggers for granular control

Usage Example:
    from live_scoreboard.logging_config import setup_logging, get_logger

    # Setup logging once at host startup
    setup_logging(level="INFO", log_dir="logs", enable_file=True)

    # Get logger in any module
    logger = get_logger(__name__)
    logger.info("Scoreboard host started")

Log Files Created:
- logs/live_scoreboard.log: Main log (INFO+)
- logs/live_scoreboard_debug.log: Debug log (DEBUG+)
- logs/live_scoreboard_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backup files.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


# Log format templates
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "live_scoreboard"


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to log levels.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Add color to levelname without leaking it into other handlers"""
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _level(level: str) -> int:
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def _rotating_handler(log_dir: str, suffix: str, level: int, log_format: str,
                      max_bytes: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    Call once at host startup. Existing root handlers are replaced.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        format_style: "detailed" or "simple" format

    Raises:
        ValueError: If level is not a known logging level
    """
    numeric_level = _level(level)

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        root_logger.addHandler(
            _rotating_handler(log_dir, "", logging.INFO, log_format, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count)
        )

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR",
    include_traceback: bool = True
) -> None:
    """
    Log an exception with context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context dict (command, team names, etc.)
        level: Log level (default: ERROR)
        include_traceback: Attach the traceback (off for expected rejections)

    Example:
        >>> try:
        ...     board.start("Spain", "Brazil")
        ... except ScoreboardException as e:
        ...     log_exception(logger, e, context={"command": "start"}, level="WARNING")
    """
    context_str = ""
    if context:
        context_items = [f"{k}={v}" for k, v in context.items()]
        context_str = f" [{', '.join(context_items)}]"

    logger.log(
        _level(level),
        f"Exception occurred{context_str}: {type(exception).__name__}: {str(exception)}",
        exc_info=exception if include_traceback else None
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Example:
        >>> # Trace every board mutation without raising the global level
        >>> configure_module_logger("live_scoreboard.scoreboard", level="DEBUG")
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(_level(level))

    logger.propagate = propagate

    return logger


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        >>> logger = get_logger("live_scoreboard.scoreboard")
        >>> with LogContext(logger, "DEBUG"):
        ...     board.update("Spain", "Brazil", 10, 2)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = _level(level)
        self.original_level = logger.level

    def __enter__(self):
        """Set temporary level"""
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore original level"""
        self.logger.setLevel(self.original_level)
