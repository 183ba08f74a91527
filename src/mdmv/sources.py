"""Resolve the source argument into markdown file paths."""

import os
from pathlib import Path
from typing import List
from loguru import logger

from mdmv.errors import NoFilesFoundError
from mdmv.filesystem import Filesystem

MARKDOWN_GLOB = "*.md"
WILDCARDS = ("*", "?")


def is_pattern(source: str) -> bool:
    """Check if the source contains glob wildcards."""
    return any(char in source for char in WILDCARDS)


def find_files(fs: Filesystem, source: str, log=None) -> List[Path]:
    """Expand a file name, directory or glob pattern into file paths.

    A directory stands for every markdown file directly inside it. A plain
    file name is returned as is; a missing file surfaces when it is parsed.

    Raises:
        NoFilesFoundError: A directory or pattern matched nothing.
    """
    log = log or logger

    if fs.is_dir(source):
        source = os.path.join(source, MARKDOWN_GLOB)
        log.debug("Source is a directory, searching {}", source)

    if is_pattern(source):
        files = fs.glob(source)
        if not files:
            raise NoFilesFoundError(source)
        log.debug("Found {} files matching {}", len(files), source)
        return files

    return [Path(source)]
