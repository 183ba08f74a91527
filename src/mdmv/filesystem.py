"""Filesystem access used by every mdmv component."""

import glob
import os
from pathlib import Path
from typing import IO, List, Optional, Union
from loguru import logger

PathLike = Union[str, Path]


class Filesystem:
    """Disk access rooted at an optional base directory.

    With a root, every path is resolved under it, including paths that start
    with a separator. Without one, paths go to the OS as given.
    """

    def __init__(self, root: Optional[Path] = None, log=None):
        self.root = Path(root) if root is not None else None
        self.log = log or logger
        self.log.debug("Filesystem initialized: root={}", self.root or "<cwd>")

    def _real(self, path: PathLike) -> Path:
        """Map a filesystem path to a path on disk."""
        if self.root is None:
            return Path(path)
        return self.root / str(path).lstrip("/\\")

    def open(self, path: PathLike) -> IO[str]:
        """Open a text file for reading."""
        return self._real(path).open("r", encoding="utf-8")

    def exists(self, path: PathLike) -> bool:
        return self._real(path).exists()

    def is_dir(self, path: PathLike) -> bool:
        return self._real(path).is_dir()

    def is_empty(self, path: PathLike) -> bool:
        """Check whether a directory has no entries."""
        with os.scandir(self._real(path)) as entries:
            return next(entries, None) is None

    def rename(self, src: PathLike, dest: PathLike):
        """Rename src to dest, replacing an existing dest file."""
        self._real(src).replace(self._real(dest))
        self.log.debug("Renamed: {} → {}", src, dest)

    def makedirs(self, path: PathLike):
        """Create a directory and its parents if missing."""
        self._real(path).mkdir(parents=True, exist_ok=True)
        self.log.debug("Created directory: {}", path)

    def remove(self, path: PathLike):
        """Remove a file or an empty directory."""
        real = self._real(path)
        if real.is_dir():
            real.rmdir()
        else:
            real.unlink()
        self.log.debug("Removed: {}", path)

    def glob(self, pattern: str) -> List[Path]:
        """Expand a glob pattern, returning sorted filesystem paths."""
        if self.root is None:
            matches = glob.glob(pattern)
        else:
            matches = glob.glob(pattern.lstrip("/\\"), root_dir=self.root)
        self.log.debug("Glob {} matched {} paths", pattern, len(matches))
        return sorted(Path(match) for match in matches)
