"""CLI entry point for dirtree: I/O boundary only."""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from typing import TextIO

from dirtree import DirtreeError, OutputCreationError, __version__
from dirtree.config import UNLIMITED_DEPTH, TreeConfig, compile_pattern
from dirtree.renderer import render

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "DIRTREE_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``dirtree`` command.
    """
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="list the contents of a directory as an indented tree",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Root directory to display (default: current directory)",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="all_files",
        help="Include hidden files and directories (starting with .)",
    )
    parser.add_argument(
        "-d",
        "--dirs-only",
        action="store_true",
        dest="dirs_only",
        help="List directories only",
    )
    parser.add_argument(
        "-L",
        "--level",
        type=int,
        default=UNLIMITED_DEPTH,
        dest="max_depth",
        help="Limit the level of recursion; 0 lists the top level only "
        "(default: -1, unlimited)",
    )
    parser.add_argument(
        "-f",
        "--full-path",
        action="store_true",
        dest="full_path",
        help="Print the path joined from the root for each entry",
    )
    parser.add_argument(
        "-P",
        "--pattern",
        default=None,
        dest="include",
        help="List only entries whose name matches this regular expression",
    )
    parser.add_argument(
        "-I",
        "--exclude",
        default=None,
        dest="exclude",
        help="Skip entries whose name matches this regular expression",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    parser.add_argument(
        "-i",
        "--noindent",
        action="store_true",
        dest="no_indent",
        help="Do not print indentation lines",
    )
    parser.add_argument(
        "--charset",
        choices=["unicode", "ascii"],
        default="unicode",
        help="Character set for tree drawing (default: unicode)",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip entries ignored by the root directory's .gitignore",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Log debug messages to stderr (otherwise ${LOG_LEVEL_ENV})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _build_config(args: argparse.Namespace) -> TreeConfig:
    """Turn parsed arguments into an immutable configuration.

    Args:
        args: Parsed CLI namespace.

    Returns:
        TreeConfig: Resolved run configuration.

    Raises:
        InvalidPatternError: If ``-P`` or ``-I`` is not a valid regex.
    """
    return TreeConfig(
        show_hidden=args.all_files,
        dirs_only=args.dirs_only,
        max_depth=args.max_depth,
        full_path=args.full_path,
        include_pattern=compile_pattern(args.include, "-P"),
        exclude_pattern=compile_pattern(args.exclude, "-I"),
        no_indent=args.no_indent,
        charset=args.charset,
        gitignore=args.gitignore,
    )


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr at the requested level."""
    if debug:
        level = logging.DEBUG
    else:
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_with_args(args: argparse.Namespace, sink: TextIO) -> None:
    """Render the tree for parsed arguments into *sink*.

    Raises:
        DirtreeError: On any user-facing validation or I/O error.
    """
    config = _build_config(args)
    logger.debug("Rendering %s with %s", args.directory, config)
    render(args.directory, config, sink)


def run_dirtree(argv: list[str] | None = None) -> str:
    """Run dirtree with provided CLI args and return the rendered text.

    This function is intentionally side-effect free and is the primary
    test target for CLI behavior. ``-o`` is accepted but ignored here;
    ``main`` performs the file write.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Returns:
        str: Rendered output, one newline-terminated line per entry.

    Raises:
        DirtreeError: On any user-facing validation or I/O error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    sink = io.StringIO()
    _run_with_args(args, sink)
    return sink.getvalue()


def _open_output(path: str) -> TextIO:
    try:
        return open(
            path, "w", encoding="utf-8", errors="surrogateescape", newline=""
        )
    except OSError as exc:
        raise OutputCreationError(f"cannot create '{path}': {exc}") from exc


def main(argv: list[str] | None = None) -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once and streams output to stdout or the ``-o``
    file. Exits with code 1 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)  # single parse
    _configure_logging(args.debug)
    # Undecodable filenames arrive as surrogate escapes; write their raw bytes.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="surrogateescape")

    try:
        if args.output_file:
            with _open_output(args.output_file) as sink:
                _run_with_args(args, sink)
        else:
            _run_with_args(args, sys.stdout)
    except DirtreeError as exc:
        sys.stderr.write(f"dirtree: {exc}\n")
        sys.exit(1)
