"""Error types raised by mdmv operations."""


class MdmvError(Exception):
    """Base class for failures that abort a move batch."""


class NoFilesFoundError(MdmvError):
    """Source pattern matched no files."""

    def __init__(self, source: str = ""):
        self.source = source
        super().__init__("no markdown files found")


class NoFilesToMoveError(MdmvError):
    """Nothing left to move after parsing the source files."""

    def __init__(self):
        super().__init__("no files to move")


class AmbiguousDestinationError(MdmvError):
    """Several files were given a single literal destination."""

    def __init__(self):
        super().__init__("specify an existing directory as a destination for multiple markdown files")


class InvalidTemplateError(MdmvError):
    """Destination contains '%' without a supported placeholder."""

    def __init__(self, dest: str = ""):
        self.dest = dest
        super().__init__("incorrect template in the destination path")


class MoveError(MdmvError):
    """A rename or directory creation failed."""


class CleanupError(MdmvError):
    """An emptied source directory could not be checked or removed."""
