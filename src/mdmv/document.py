"""Document models for mdmv."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


def attachment_path(directory: Path, attachment: str) -> Path:
    """Join an attachment reference to a directory.

    A leading separator does not make the reference absolute: ``/images/a.png``
    in ``notes/page.md`` is ``notes/images/a.png``.
    """
    return Path(os.path.normpath(directory / attachment.lstrip("/\\")))


@dataclass
class Document:
    """A markdown file scheduled for a move."""
    path: Path              # Current location, updated after every move
    title: str = ""         # Text of the first heading, "" when there is none
    attachments: List[str] = field(default_factory=list)  # Image targets as written: ![](images/a.png)

    @property
    def filename(self) -> str:
        """Get document filename."""
        return self.path.name

    @property
    def directory(self) -> Path:
        """Get the directory holding the document."""
        return self.path.parent

    @property
    def distinct_attachments(self) -> List[str]:
        """Attachments with repeated references to the same file dropped, in order."""
        seen = set()
        distinct = []
        for attachment in self.attachments:
            key = os.path.normpath(attachment.lstrip("/\\"))
            if key not in seen:
                seen.add(key)
                distinct.append(attachment)
        return distinct


@dataclass
class MoveResult:
    """Result of a move batch."""
    moved: List[Tuple[Path, Path]] = field(default_factory=list)        # (source, destination)
    attachments: List[Tuple[Path, Path]] = field(default_factory=list)  # (source, destination)
    missing_attachments: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    removed_dirs: List[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.moved)
