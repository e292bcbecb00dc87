# utils/logger.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Logging utility for the proof engine with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for proof sessions."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FitchLogger:
    """Centralized logger for the proof engine with structured output."""

    def __init__(self, name: str = "fitchpad", level: LogLevel = LogLevel.INFO):
        """Initialize the Fitchpad logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(FitchFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
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

    # Specialized methods for proof events
    def line_added(self, index: int, depth: int, formula: str, justification: str):
        """Log a line appended to the proof."""
        self.debug(f"    ➕ line {index} at depth {depth}: {formula}  [{justification}]")

    def line_deleted(self, index: int, boundary: int, depth: int):
        """Log removal of the last line."""
        self.debug(f"    ➖ line {index} removed (boundary={boundary}, depth={depth})")

    def depth_changed(self, old: int, new: int):
        """Log a change of the nesting cursor."""
        self.debug(f"    ↕ depth {old} → {new}")

    def rule_rejected(self, rule: str, cited: Sequence[int], reason: str):
        """Log a rule application whose preconditions did not hold."""
        cited_str = ", ".join(str(i) for i in cited)
        self.debug(f"    💥 {rule} [{cited_str}] rejected: {reason}")

    def command_result(self, command: str, ok: bool, message: str = ""):
        """Log the outcome of a session command."""
        mark = "✅" if ok else "❌"
        suffix = f" - {message}" if message else ""
        self.debug(f"{mark} {command}{suffix}")


class FitchFormatter(logging.Formatter):
    """Custom formatter for Fitchpad logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[FitchLogger] = None


def get_logger(name: str = "fitchpad") -> FitchLogger:
    """Get or create the global Fitchpad logger instance.

    Args:
        name: Logger name (default: "fitchpad")

    Returns:
        FitchLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FitchLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)

