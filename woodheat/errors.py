"""Exceptions raised by woodheat."""


class WoodheatError(Exception):
    """Base exception for woodheat errors."""

    pass


class DatasetParseError(WoodheatError):
    """Raised when the dataset text cannot be read as a table at all.

    Individual malformed rows never raise; they are skipped.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DefaultsFileError(WoodheatError):
    """Raised when an emission-defaults override file is unusable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load emission defaults from {path}: {reason}")
