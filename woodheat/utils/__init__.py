"""woodheat utilities - logging and number helpers."""

from woodheat.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)
from woodheat.utils.numbers import (
    clamp,
    format_number,
    parse_finite,
    parse_positive,
)

__all__ = [
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
    # Numbers
    "clamp",
    "format_number",
    "parse_finite",
    "parse_positive",
]
