"""Move markdown files together with their attachments."""

import os
import re
from pathlib import Path
from typing import Optional, Union
from loguru import logger

from mdmv.document import Document, MoveResult, attachment_path
from mdmv.errors import MoveError
from mdmv.filesystem import Filesystem


def same_dir(first: Path, second: Path) -> bool:
    """Compare two directory paths after normalization."""
    return os.path.normpath(first) == os.path.normpath(second)


class Mover:
    """Rename documents and their attachments on a filesystem.

    Every successful rename is recorded in ``result``. Nothing is rolled back:
    if an attachment fails to move, the document itself stays at its new
    location and the error propagates.
    """

    NUMBER_SUFFIX_PATTERN = re.compile(r'_\d+$')  # index_2 -> index

    def __init__(self, fs: Filesystem, result: Optional[MoveResult] = None, log=None):
        self.fs = fs
        self.result = result if result is not None else MoveResult()
        self.log = log or logger

    def move(self, document: Document, dest: Union[str, Path]) -> Path:
        """Move a document to an exact file path.

        An existing file at ``dest`` is overwritten. Attachments are moved
        only when the document changes directory, keeping their path relative
        to the document. An image referenced several times is moved once.
        """
        dest = Path(dest)
        if self._exists(dest):
            self.log.warning("File already exists and will be overwritten: {}", dest.name)

        self._ensure_dir(dest)

        src = document.path
        self._rename(src, dest, "failed to move the file")
        document.path = dest
        self.result.moved.append((src, dest))
        self.log.info("Moved: {} → {}", src, dest)

        if same_dir(src.parent, dest.parent) or not document.attachments:
            return dest

        for attachment in document.distinct_attachments:
            attachment_src = attachment_path(src.parent, attachment)
            attachment_dest = attachment_path(dest.parent, attachment)

            self._ensure_dir(attachment_dest)
            self._rename(attachment_src, attachment_dest, "failed to move the attachment")
            self.result.attachments.append((attachment_src, attachment_dest))
            self.log.debug("Moved attachment: {} → {}", attachment_src, attachment_dest)

        return dest

    def move_to_dir(self, document: Document, dir_name: Union[str, Path]) -> Path:
        """Move a document into an existing directory under a free file name.

        Attachments that are missing on disk are skipped with a warning.
        """
        dir_name = Path(dir_name)
        dest = self.unique_name(dir_name / document.filename)

        src = document.path
        self._rename(src, dest, "failed to move a file")
        document.path = dest
        self.result.moved.append((src, dest))
        self.log.info("Moved: {} → {}", src, dest)

        for attachment in document.distinct_attachments:
            attachment_src = attachment_path(src.parent, attachment)
            attachment_dest = attachment_path(dir_name, attachment)

            if not self._exists(attachment_src):
                self.log.warning("attachment is missing: {}", attachment_src)
                self.result.missing_attachments.append(attachment_src)
                continue

            self._ensure_dir(attachment_dest)
            self._rename(attachment_src, attachment_dest, "failed to move an attachment")
            self.result.attachments.append((attachment_src, attachment_dest))
            self.log.debug("Moved attachment: {} → {}", attachment_src, attachment_dest)

        return dest

    def unique_name(self, dest: Path) -> Path:
        """Return dest, or dest with a _N suffix if the name is taken."""
        candidate = dest
        counter = 1
        while self._exists(candidate):
            if counter == 1:
                self.log.warning("File with the same name already exists: {}", dest)
            stem = self.NUMBER_SUFFIX_PATTERN.sub("", dest.stem)
            candidate = dest.with_name(f"{stem}_{counter}{dest.suffix}")
            counter += 1
        return candidate

    def _exists(self, path: Path) -> bool:
        try:
            return self.fs.exists(path)
        except OSError as e:
            raise MoveError(f"failed to check if a file exists: {e}") from e

    def _rename(self, src: Path, dest: Path, message: str):
        try:
            self.fs.rename(src, dest)
        except OSError as e:
            raise MoveError(f"{message}: {e}") from e

    def _ensure_dir(self, dest: Path):
        """Create the parent directory tree of a destination file."""
        parent = dest.parent
        try:
            if self.fs.is_dir(parent):
                return
            self.fs.makedirs(parent)
        except OSError as e:
            raise MoveError(f"failed to create a directory: {e}") from e
