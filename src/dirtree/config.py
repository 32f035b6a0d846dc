"""Immutable run configuration resolved once from the command line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from dirtree import InvalidPatternError

UNLIMITED_DEPTH = -1


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Options controlling what the renderer lists and how it draws it.

    Attributes:
        show_hidden: Whether to include entries whose name starts with ``.``.
        dirs_only: Whether to list directories only.
        max_depth: Deepest level to descend into. Any negative value means
            unlimited; ``0`` lists only the root's children.
        full_path: Whether to print the joined path instead of the bare name.
        include_pattern: Only entries whose name matches are listed.
        exclude_pattern: Entries whose name matches are skipped.
        no_indent: Whether to drop connectors and indentation entirely.
        charset: Glyph set used for connectors.
        gitignore: Whether to honour the root ``.gitignore``.
    """

    show_hidden: bool = False
    dirs_only: bool = False
    max_depth: int = UNLIMITED_DEPTH
    full_path: bool = False
    include_pattern: re.Pattern[str] | None = None
    exclude_pattern: re.Pattern[str] | None = None
    no_indent: bool = False
    charset: Literal["unicode", "ascii"] = "unicode"
    gitignore: bool = False

    def descends_into(self, depth: int) -> bool:
        """Return whether a directory found at *depth* should be expanded."""
        return self.max_depth < 0 or depth < self.max_depth


def compile_pattern(pattern: str | None, option: str) -> re.Pattern[str] | None:
    """Compile a user-supplied regular expression.

    Args:
        pattern: Raw pattern text, or ``None``/empty when the option is unset.
        option: Flag name used in the error message (e.g. ``-P``).

    Returns:
        re.Pattern[str] | None: Compiled pattern, or ``None`` when unset.

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression.
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(
            f"invalid pattern for {option} '{pattern}': {exc}"
        ) from exc
