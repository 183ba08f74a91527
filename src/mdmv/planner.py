"""Choose how a batch of documents is moved to a destination."""

import os
from typing import List
from loguru import logger

from mdmv.document import Document
from mdmv.errors import AmbiguousDestinationError, InvalidTemplateError, MoveError, NoFilesToMoveError
from mdmv.filesystem import Filesystem
from mdmv.mover import Mover

TITLE_PLACEHOLDER = "%title%"
SEPARATORS = {"/", os.sep}


def is_template(dest: str) -> bool:
    """Check if the destination is a template.

    Raises:
        InvalidTemplateError: '%' is used without a supported placeholder.
    """
    if "%" not in dest:
        return False
    if TITLE_PLACEHOLDER not in dest:
        raise InvalidTemplateError(dest)
    return True


def render_template(template: str, title: str) -> str:
    """Substitute the title placeholder, keeping the title a single path component."""
    escaped = title
    for separator in SEPARATORS:
        escaped = escaped.replace(separator, "_")
    return template.replace(TITLE_PLACEHOLDER, escaped, 1)


class MovePlanner:
    """Decide where each document goes and hand it to the Mover.

    The destination is one of:
    * a template like ``notes/%title%/index.md``, filled in per document with
      the text of its first heading;
    * an existing directory, receiving every document under its own name;
    * a file path, only valid for a single document.
    """

    def __init__(self, fs: Filesystem, mover: Mover, log=None):
        self.fs = fs
        self.mover = mover
        self.log = log or logger

    def move_files(self, documents: List[Document], dest: str):
        if not documents:
            raise NoFilesToMoveError()

        if is_template(dest):
            self.log.debug("Destination is a template: {}", dest)
            for document in documents:
                self.mover.move(document, render_template(dest, self._template_title(document)))
            return

        if self.fs.is_dir(dest):
            self.log.debug("Destination is a directory: {}", dest)
            for document in documents:
                self.mover.move_to_dir(document, dest)
            return

        if len(documents) > 1:
            raise AmbiguousDestinationError()

        self.log.debug("Destination is a file path: {}", dest)
        try:
            self.mover.move(documents[0], dest)
        except MoveError as e:
            raise MoveError(f"failed to move a file: {e}") from e

    def _template_title(self, document: Document) -> str:
        """Title used in templates, falling back to the file name."""
        if document.title:
            return document.title
        fallback = document.path.stem
        self.log.warning("No heading found in {}, using file name for the title: {}", document.path, fallback)
        return fallback
