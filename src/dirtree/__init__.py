"""dirtree: print a directory hierarchy as an indented tree."""

__version__ = "0.1.0"


class DirtreeError(Exception):
    """User-facing CLI error.

    Every failure that ends a run derives from this class. The message is
    printed to stderr and the process exits with code 1.
    """


class DirectoryReadError(DirtreeError):
    """A directory could not be listed (missing, not a directory, no access)."""


class InvalidPatternError(DirtreeError):
    """An include or exclude regular expression failed to compile."""


class OutputCreationError(DirtreeError):
    """The ``-o`` output file could not be created."""
