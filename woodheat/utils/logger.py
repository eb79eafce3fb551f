"""Centralized logging for woodheat.

The CLI configures logging once at startup; library modules never do.

Usage:
    from woodheat.utils.logger import Logger

    # Front ends configure once
    Logger.configure(level="INFO", output="stderr")

    # Library code asks for a lazily bound logger
    log = Logger.lazy("data.intensity")
    log.debug("Skipping row without country code")

    # Front-end code that requires configuration
    log = Logger.get("commands.compare")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when Logger.get() is used before Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Centralized logging for woodheat.

    ``configure`` installs a single handler on the ``woodheat`` logger.
    ``get`` requires that configuration; ``lazy`` does not and is what
    the data pipeline and emissions engine use, since they run inside
    whatever front end imports them.

    Example:
        >>> Logger.configure(level="DEBUG", timestamps=False)
        >>> Logger.get("cli").info("Loading dataset")
    """

    _configured: bool = False
    _root_name: str = "woodheat"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
        include_location: bool = False,
        format_string: str | None = None,
    ) -> None:
        """Configure the logger. Must be called before Logger.get().

        Args:
            level: Log level - "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
                or a LogLevel enum value.
            output: Where to send logs:
                - None: stdout (default)
                - "stderr": sys.stderr
                - str/Path: File path
                - TextIO: Any file-like object
            timestamps: Include timestamps in messages (default True).
            include_location: Include [filename:lineno] (default False).
            format_string: Custom format string (overrides timestamps/include_location).
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None:
            new_handler = logging.StreamHandler(sys.stdout)
        elif output == "stderr":
            new_handler = logging.StreamHandler(sys.stderr)
        elif isinstance(output, str | Path):
            new_handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(level.to_logging_level())

        if format_string is None:
            parts = []
            if timestamps:
                parts.append("%(asctime)s")
            parts.append("%(levelname)s")
            parts.append("[%(name)s]")
            if include_location:
                parts.append("[%(filename)s:%(lineno)d]")
            parts.append("%(message)s")
            format_string = " ".join(parts)

        new_handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "woodheat."). If None, returns
                the package root logger.

        Returns:
            Logger instance.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()
        return cls.lazy(name)

    @classmethod
    def lazy(cls, name: str | None = None) -> logging.Logger:
        """Get a namespaced logger without requiring configuration.

        Records go nowhere special until a front end calls configure();
        warnings still reach Python's last-resort handler.

        Args:
            name: Logger name (appended to "woodheat.").

        Returns:
            Logger instance.
        """
        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured
