"""Remove source directories emptied by a move batch."""

import os
from pathlib import Path
from typing import Iterable, List, Set
from loguru import logger

from mdmv.document import Document, attachment_path
from mdmv.errors import CleanupError
from mdmv.filesystem import Filesystem


def cleanup_candidates(documents: Iterable[Document]) -> Set[Path]:
    """Collect directories that might be empty once the documents are moved.

    Must be called before the move: afterwards the documents no longer point
    at their original directories.
    """
    dirs = set()
    for document in documents:
        dirs.add(Path(os.path.normpath(document.directory)))
        for attachment in document.attachments:
            dirs.add(attachment_path(document.directory, attachment).parent)

    # Never sweep the filesystem root itself
    dirs.discard(Path("."))
    return dirs


def clean_up(fs: Filesystem, dirs: Iterable[Path], log=None) -> List[Path]:
    """Remove empty directories, deepest paths first.

    Directories that are gone or not empty are left alone.

    Returns:
        Directories that were removed.

    Raises:
        CleanupError: An existing directory could not be checked or removed.
    """
    log = log or logger
    removed = []

    # Reverse lexical order puts nested dirs before their parents
    for directory in sorted(dirs, key=str, reverse=True):
        try:
            if not fs.is_dir(directory):
                continue
            empty = fs.is_empty(directory)
        except OSError as e:
            raise CleanupError(f"failed to check if dir is empty: {e}") from e

        if not empty:
            log.debug("Keeping non-empty directory: {}", directory)
            continue

        try:
            fs.remove(directory)
        except OSError as e:
            raise CleanupError(f"failed to clean up a dir: {e}") from e
        removed.append(directory)
        log.info("Removed empty directory: {}", directory)

    return removed
