"""Markdown parsing: document title and image attachments."""

import re
from pathlib import Path
from typing import List, Optional
from loguru import logger

from mdmv.document import Document
from mdmv.filesystem import Filesystem


class MarkdownParser:
    """Read markdown files into Document objects."""

    TITLE_PATTERN = re.compile(r'#+(.*)')  # first run of '#' anywhere on the line
    IMAGE_PATTERN = re.compile(r'!\[([^\]]*)\]\(<?([^>\)]+)>?\)')  # ![alt](path) or ![alt](<path>)
    EXTERNAL_PREFIXES = ('http://', 'https://')

    def __init__(self, fs: Filesystem, log=None):
        self.fs = fs
        self.log = log or logger

    def parse(self, path: Path) -> Document:
        """Scan a markdown file line by line for its title and attachments.

        Raises:
            OSError: The file cannot be opened or read.
            UnicodeDecodeError: The file is not valid UTF-8 text.
        """
        path = Path(path)
        title = ""
        attachments: List[str] = []

        with self.fs.open(path) as handle:
            for line in handle:
                if not title:
                    title = self.extract_title(line) or ""
                attachments.extend(self.extract_images(line))

        self.log.debug("Parsed {}: title={!r}, attachments={}", path, title, len(attachments))
        return Document(path=path, title=title, attachments=attachments)

    def extract_title(self, line: str) -> Optional[str]:
        """Return the text after the first run of # on a line, if any."""
        match = self.TITLE_PATTERN.search(line)
        if not match:
            return None
        return match.group(1).strip() or None

    def extract_images(self, line: str) -> List[str]:
        """Return local image targets referenced on a line."""
        targets = []
        for match in self.IMAGE_PATTERN.finditer(line):
            target = match.group(2).strip()
            if target.startswith(self.EXTERNAL_PREFIXES):
                self.log.debug("Skipping external URL: {}", target)
                continue
            targets.append(target)
        return targets
