"""Root .gitignore matching via pathspec."""

from __future__ import annotations

import logging
from pathlib import Path

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)


class GitignoreMatcher:
    """Match entry paths against the ``.gitignore`` found at a tree root.

    Paths are matched relative to the root, directories with a trailing
    ``/`` so that patterns such as ``build/`` apply to them.
    """

    def __init__(self, root: Path, spec: GitIgnoreSpec) -> None:
        self._root = root
        self._spec = spec

    @classmethod
    def load(cls, root: Path) -> GitignoreMatcher | None:
        """Build a matcher from ``root/.gitignore``.

        Args:
            root: Tree root directory.

        Returns:
            GitignoreMatcher | None: Matcher when the file exists and is
            readable, otherwise ``None``.
        """
        gitignore_path = root / ".gitignore"
        try:
            lines = gitignore_path.read_text(encoding="utf-8").splitlines()
        except OSError:
            logger.debug("No readable .gitignore at %s", gitignore_path)
            return None
        return cls(root, GitIgnoreSpec.from_lines(lines))

    def is_ignored(self, path: Path, is_dir: bool) -> bool:
        try:
            rel = path.relative_to(self._root).as_posix()
        except ValueError:
            return False
        if is_dir:
            rel += "/"
        return self._spec.match_file(rel)
