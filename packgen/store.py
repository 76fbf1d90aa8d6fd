"""Storage backends for generated artifacts.

The generated packs double as a cache: their modification times decide
whether the next run has to regenerate anything.  ``GeneratedArtifactStore``
hides where those files live so the staleness logic can run against an
in-memory store with a controllable clock.
"""

from __future__ import annotations

import shutil
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path


class GeneratedArtifactStore(ABC):
    """Read/write access to generated files, keyed by path."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """True if a file is stored at *path*."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """True if *path* is a directory in the store."""

    @abstractmethod
    def mtime(self, path: Path) -> float:
        """Modification time of *path* in seconds since the epoch."""

    @abstractmethod
    def write(self, path: Path, content: str) -> None:
        """Create or overwrite *path*, creating parent directories."""

    @abstractmethod
    def clear(self, directory: Path) -> None:
        """Recursively delete *directory* and recreate it empty."""


class FileSystemArtifactStore(GeneratedArtifactStore):
    """Stores artifacts on the local disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def mtime(self, path: Path) -> float:
        return Path(path).stat().st_mtime

    def write(self, path: Path, content: str) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def clear(self, directory: Path) -> None:
        shutil.rmtree(directory, ignore_errors=True)
        Path(directory).mkdir(parents=True, exist_ok=True)


class InMemoryArtifactStore(GeneratedArtifactStore):
    """Dict-backed store for tests and dry runs.

    Every ``write`` stamps the file with ``clock()``, so tests can move time
    forward explicitly instead of sleeping past mtime resolution.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self.files: dict[Path, tuple[str, float]] = {}
        self.directories: set[Path] = set()
        self.writes: list[Path] = []

    def exists(self, path: Path) -> bool:
        return Path(path) in self.files

    def is_dir(self, path: Path) -> bool:
        path = Path(path)
        return path in self.directories or any(
            path in p.parents for p in self.files
        )

    def mtime(self, path: Path) -> float:
        try:
            return self.files[Path(path)][1]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def read_text(self, path: Path) -> str:
        """Return the content written to *path*."""
        try:
            return self.files[Path(path)][0]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write(self, path: Path, content: str) -> None:
        path = Path(path)
        self.directories.update(path.parents)
        self.files[path] = (content, self.clock())
        self.writes.append(path)

    def clear(self, directory: Path) -> None:
        directory = Path(directory)
        self.files = {
            p: entry for p, entry in self.files.items() if directory not in p.parents
        }
        self.directories = {
            d for d in self.directories if d != directory and directory not in d.parents
        }
        self.directories.add(directory)
        self.directories.update(directory.parents)
