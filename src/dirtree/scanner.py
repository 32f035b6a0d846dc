"""Single-directory listing using os.scandir."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dirtree import DirectoryReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DirEntry:
    """A single filesystem entry read from one directory listing.

    Attributes:
        name: Basename of the entry.
        path: Listed directory path joined with ``name``.
        is_dir: Whether the entry is a directory (symlinks are not followed).
    """

    name: str
    path: Path
    is_dir: bool


def list_directory(directory: Path) -> list[DirEntry]:
    """List *directory* and return its entries sorted by name.

    Args:
        directory: Directory to read.

    Returns:
        list[DirEntry]: Entries in code point order of their names.

    Raises:
        DirectoryReadError: If the path is missing, is not a directory, or
            cannot be read.
    """
    logger.debug("Reading directory: %s", directory)
    try:
        with os.scandir(directory) as it:
            raw_entries = list(it)
    except FileNotFoundError as exc:
        raise DirectoryReadError(f"'{directory}': no such directory") from exc
    except NotADirectoryError as exc:
        raise DirectoryReadError(f"'{directory}' is not a directory") from exc
    except PermissionError as exc:
        raise DirectoryReadError(f"'{directory}': permission denied") from exc
    except OSError as exc:
        raise DirectoryReadError(f"cannot read '{directory}': {exc}") from exc

    raw_entries.sort(key=lambda e: e.name)

    entries: list[DirEntry] = []
    for dir_entry in raw_entries:
        try:
            is_dir = dir_entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise DirectoryReadError(f"cannot stat '{dir_entry.path}': {exc}") from exc
        entries.append(
            DirEntry(name=dir_entry.name, path=directory / dir_entry.name, is_dir=is_dir)
        )
    return entries
