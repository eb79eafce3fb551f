"""woodheat - wood stove vs. heating system emissions comparison."""

from woodheat.version import WOODHEAT_VERSION, Version

__version__ = str(WOODHEAT_VERSION)
__version_info__ = WOODHEAT_VERSION

__all__ = [
    "WOODHEAT_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
