# utils/__init__.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Utility module exports

from .logger import get_logger, set_log_level, LogLevel

__all__ = [
    "get_logger",
    "set_log_level",
    "LogLevel",
]
