from dataclasses import dataclass
from datetime import datetime
import hashlib
import os


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for woodheat.

    Carries the semver triple, a digest of the package sources and the
    release date.
    """
    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.3.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version with short source digest and release date."""
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        """Return shortened hash (default 8 characters)."""
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted release date."""
        return self.date.strftime(fmt)


def _source_digest() -> str:
    """
    SHA256 over the ``.py`` files of the installed woodheat package.

    Files are visited in sorted order so the digest is stable across
    platforms.
    """
    package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    hasher = hashlib.sha256()

    for root, dirs, files in os.walk(package_dir):
        dirs[:] = sorted(d for d in dirs if d != "__pycache__")
        for name in sorted(files):
            if not name.endswith(".py"):
                continue
            path = os.path.join(root, name)
            hasher.update(os.path.relpath(path, package_dir).encode("utf-8"))
            try:
                with open(path, "rb") as f:
                    hasher.update(f.read())
            except OSError:
                continue

    return hasher.hexdigest()


WOODHEAT_VERSION = Version(
    major=0,
    minor=3,
    patch=0,
    hash=_source_digest(),
    date=datetime(2026, 10, 12),
)
