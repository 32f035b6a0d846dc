"""Tree renderer: walk a directory and write one prefixed line per entry."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from dirtree.config import TreeConfig
from dirtree.filter import ConfigFilter, EntryFilter
from dirtree.gitignore import GitignoreMatcher
from dirtree.scanner import DirEntry, list_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Box-drawing character set for tree rendering."""

    branch: str
    last_branch: str
    vertical: str  # continuation under an entry with later siblings
    space: str  # continuation under the last entry


UNICODE_GLYPHS = Glyphs(
    branch="├── ",
    last_branch="└── ",
    vertical="│   ",
    space="    ",
)

ASCII_GLYPHS = Glyphs(
    branch="|-- ",
    last_branch="\\-- ",
    vertical="|   ",
    space="    ",
)


def connector(prefix: str, is_last: bool, glyphs: Glyphs, no_indent: bool) -> str:
    """Return the full prefix drawn in front of an entry's name."""
    if no_indent:
        return ""
    return prefix + (glyphs.last_branch if is_last else glyphs.branch)


def continuation(prefix: str, is_last: bool, glyphs: Glyphs, no_indent: bool) -> str:
    """Return the prefix handed down to an entry's children."""
    if no_indent:
        return ""
    return prefix + (glyphs.space if is_last else glyphs.vertical)


def _visible_children(directory: Path, entry_filter: EntryFilter) -> list[DirEntry]:
    return [e for e in list_directory(directory) if not entry_filter.should_exclude(e)]


def render(
    root: str | Path,
    config: TreeConfig,
    sink: TextIO,
    entry_filter: EntryFilter | None = None,
) -> None:
    """Write the tree under *root* to *sink*, one line per visible entry.

    Entries are emitted in pre-order with siblings sorted by name. Lastness
    of a sibling (``└──`` versus ``├──``) is decided over the visible
    siblings, after filtering. Lines are written as soon as they are
    produced, so a read error part-way leaves the earlier lines in *sink*.

    Args:
        root: Directory to list. Its own name is not printed.
        config: Resolved run configuration.
        sink: Writable text stream receiving the lines.
        entry_filter: Filter override. Defaults to a ``ConfigFilter`` built
            from *config*, loading ``root/.gitignore`` when enabled.

    Raises:
        DirectoryReadError: If *root* or any descended directory cannot be
            listed. The traversal stops at the first failure.
    """
    root_path = Path(root)
    if entry_filter is None:
        matcher = GitignoreMatcher.load(root_path) if config.gitignore else None
        entry_filter = ConfigFilter(config, matcher)
    glyphs = ASCII_GLYPHS if config.charset == "ascii" else UNICODE_GLYPHS

    # Iterative DFS using an explicit stack.
    # Stack items: (entry, prefix, is_last_sibling, depth)
    # Push children in reverse order so that the first child is popped first.
    stack: list[tuple[DirEntry, str, bool, int]] = []

    def push_children(directory: Path, prefix: str, depth: int) -> None:
        children = _visible_children(directory, entry_filter)
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], prefix, i == len(children) - 1, depth))

    push_children(root_path, "", 0)

    while stack:
        entry, prefix, is_last, depth = stack.pop()

        display_name = os.path.normpath(entry.path) if config.full_path else entry.name
        sink.write(
            connector(prefix, is_last, glyphs, config.no_indent) + display_name + "\n"
        )

        if not entry.is_dir:
            continue
        if not config.descends_into(depth):
            logger.debug(
                "Depth limit %d reached, not descending: %s",
                config.max_depth,
                entry.path,
            )
            continue
        push_children(
            entry.path,
            continuation(prefix, is_last, glyphs, config.no_indent),
            depth + 1,
        )
