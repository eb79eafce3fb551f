"""Version information for woodheat."""

from woodheat.version.woodheat_version import WOODHEAT_VERSION, Version

__all__ = ["WOODHEAT_VERSION", "Version"]
