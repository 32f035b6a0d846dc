"""Entry filtering: hidden, directory-only, regex and gitignore rules."""

from __future__ import annotations

import logging
from typing import Protocol

from dirtree.config import TreeConfig
from dirtree.gitignore import GitignoreMatcher
from dirtree.scanner import DirEntry

logger = logging.getLogger(__name__)


class EntryFilter(Protocol):
    """Protocol for entry filtering.

    Keeps the renderer decoupled from the matching strategy.
    """

    def should_exclude(self, entry: DirEntry) -> bool: ...


class ConfigFilter:
    """Apply the configured filters to each listed entry.

    Checks run in a fixed order: hidden names, directory-only mode, the
    ``-I`` exclude pattern, the ``-P`` include pattern and finally the root
    ``.gitignore`` when one is loaded. Regexes use search semantics, so
    ``-P go`` matches ``main.go`` and ``golang`` alike.
    """

    def __init__(
        self,
        config: TreeConfig,
        gitignore: GitignoreMatcher | None = None,
    ) -> None:
        """Initialize the filter.

        Args:
            config: Resolved run configuration.
            gitignore: Optional matcher for the root ``.gitignore``.
        """
        self._config = config
        self._gitignore = gitignore

    def should_exclude(self, entry: DirEntry) -> bool:
        """Return whether *entry* is hidden from output (and not descended into).

        Args:
            entry: Entry from a directory listing.

        Returns:
            bool: ``True`` when any rule rejects the entry.
        """
        cfg = self._config
        name = entry.name

        if not cfg.show_hidden and name.startswith("."):
            return True
        if cfg.dirs_only and not entry.is_dir:
            return True
        if cfg.exclude_pattern is not None and cfg.exclude_pattern.search(name):
            logger.debug("Excluded by -I: %s", entry.path)
            return True
        if cfg.include_pattern is not None and not cfg.include_pattern.search(name):
            logger.debug("Not matched by -P: %s", entry.path)
            return True
        if self._gitignore is not None and self._gitignore.is_ignored(
            entry.path, entry.is_dir
        ):
            logger.debug("Ignored by .gitignore: %s", entry.path)
            return True
        return False
