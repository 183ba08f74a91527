"""Move engine orchestrating a batch: find, parse, move, clean up."""

from pathlib import Path
from typing import List
from loguru import logger

from mdmv.cleanup import clean_up, cleanup_candidates
from mdmv.document import Document, MoveResult
from mdmv.filesystem import Filesystem
from mdmv.markdown import MarkdownParser
from mdmv.mover import Mover
from mdmv.planner import MovePlanner
from mdmv.sources import find_files


class MoveEngine:
    """Move markdown files and their attachments from a source to a destination."""

    def __init__(self, fs: Filesystem, log=None):
        self.fs = fs
        self.log = log or logger
        self.parser = MarkdownParser(fs, log=self.log)
        self.log.debug("MoveEngine initialized")

    def run(self, source: str, dest: str) -> MoveResult:
        """
        Move everything matched by source to dest.

        Args:
            source: File, directory or glob pattern
            dest: File path, existing directory or %title% template

        Returns:
            MoveResult with every rename performed

        Raises:
            MdmvError: The batch could not be completed. Renames done before
                the failure are kept.
        """
        result = MoveResult()

        files = find_files(self.fs, source, log=self.log)
        documents = self.parse_files(files, result)

        # Collect paths to clean up before the documents move away
        dirs = cleanup_candidates(documents)

        mover = Mover(self.fs, result=result, log=self.log)
        MovePlanner(self.fs, mover, log=self.log).move_files(documents, dest)

        result.removed_dirs = clean_up(self.fs, dirs, log=self.log)

        self.log.debug(
            "Moved {} files, {} attachments, removed {} directories",
            result.file_count, len(result.attachments), len(result.removed_dirs)
        )
        return result

    def parse_files(self, files: List[Path], result: MoveResult) -> List[Document]:
        """Parse files into documents, skipping the unreadable ones."""
        documents = []
        for path in files:
            try:
                documents.append(self.parser.parse(path))
            except (OSError, UnicodeDecodeError) as e:
                self.log.warning("Skipping {}: {}", path, e)
                result.skipped.append(path)
        return documents


def mv(fs: Filesystem, source: str, dest: str, log=None) -> MoveResult:
    """Move markdown files from source to dest on the given filesystem."""
    return MoveEngine(fs, log=log).run(source, dest)
