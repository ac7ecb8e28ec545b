# utils/logger.py
# This file is part of Execgraph - Memory-Model Execution Graphs
#
# Logging utility for execution loading and rendering with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for execution graph rendering."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class GraphLogger:
    """Centralized logger for loading and rendering candidate executions.

    Messages go to stderr so that DOT text written to stdout stays clean.
    """

    def __init__(self, name: str = "execgraph", level: LogLevel = LogLevel.INFO):
        """Initialize the graph logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(GraphFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    @property
    def level(self) -> int:
        return self.logger.level

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for execution graph events
    def executions_loaded(self, count: int, source: Optional[str] = None):
        """Log how many candidate executions were read."""
        source_str = f" from {source}" if source else ""
        self.info(f"Loaded {count} candidate execution(s){source_str}")

    def execution_selected(self, index: int, count: int):
        self.debug(f"Selected execution {index + 1}/{count}")

    def render_summary(self, index: int, events: int, threads: int, lines: int):
        """Log the size of a rendered graph."""
        self.debug(
            f"Rendered execution {index}: {events} events on {threads} thread(s), {lines} DOT lines"
        )

    def export_result(self, success: bool, message: str = ""):
        if success:
            self.info(f"✅ {message}" if message else "✅ Graph exported")
        else:
            self.warning(f"⚠️  {message}" if message else "⚠️  Graph export failed")


class GraphFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[GraphLogger] = None


def get_logger(name: str = "execgraph") -> GraphLogger:
    """Get or create the global graph logger instance.

    Args:
        name: Logger name (default: "execgraph")

    Returns:
        GraphLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = GraphLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
