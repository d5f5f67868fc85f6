"""Command-line front door for gridls.

Parses ls-style flags into ``ListingOptions`` and resolves defaults from the
config file, the environment, and whether stdout is a terminal. Then lists
the operands and turns accumulated diagnostics into an exit status.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from .config import load_listing_defaults
from .diagnostics import EXIT_FAILURE, Diagnostics, configure_logging, logger
from .errors import FatalTraversalError
from .listing import ListingOptions, SortMode, TimeField, list_paths
from .terminal import output_width

PROG = "gridls"


class _FlagAction(argparse.Action):
    """Apply a fixed set of option updates in command-line order.

    Later flags override earlier ones (``-l1`` lists one name per line while
    ``-1l`` is a long listing), so every flag writes its updates when seen.
    """

    def __init__(self, option_strings, dest, updates: Mapping[str, object], **kwargs) -> None:
        self.updates = dict(updates)
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        for key, value in self.updates.items():
            setattr(namespace, key, value)


_FLAGS: tuple[tuple[str, dict[str, object], str], ...] = (
    ("-A", {"show_hidden": True}, "List all entries except . and .."),
    ("-a", {"show_hidden": True, "show_dot_entries": True}, "List all entries including . and .."),
    ("-C", {"grid": True, "horizontal": False, "long_format": False}, "Multi-column output, sorted down columns."),
    ("-c", {"time_field": TimeField.CHANGED}, "Use status change time."),
    ("-d", {"list_directories": True, "recursive": False}, "List directories themselves, not their contents."),
    ("-F", {"classify": True}, "Append a type indicator to names."),
    ("-f", {"sort_mode": SortMode.UNORDERED}, "Do not sort."),
    ("-h", {"human_readable": True}, "Human-readable sizes (with -l or -s)."),
    ("-i", {"print_inode": True}, "Print inode numbers."),
    ("-k", {"human_readable": False, "block_size": 1024}, "Count blocks in kilobytes (with -s)."),
    ("-l", {"long_format": True}, "Long format."),
    ("-n", {"numeric_ids": True, "long_format": True}, "Long format with numeric owner and group ids."),
    ("-q", {"raw_names": False}, "Replace non-printable name characters with '?'."),
    ("-R", {"recursive": True}, "List subdirectories recursively."),
    ("-r", {"reverse": True}, "Reverse the sort order."),
    ("-S", {"sort_mode": SortMode.SIZE}, "Sort by size, largest first."),
    ("-s", {"print_blocks": True}, "Print allocated blocks."),
    ("-t", {"sort_mode": SortMode.TIME}, "Sort by time, newest first."),
    ("-u", {"time_field": TimeField.ACCESSED}, "Use last access time."),
    ("-w", {"raw_names": True}, "Print non-printable name characters as-is."),
    ("-x", {"grid": True, "horizontal": True, "long_format": False}, "Multi-column output, sorted across rows."),
    ("-1", {"grid": False, "long_format": False}, "One entry per line."),
)


def build_parser(defaults: Mapping[str, object]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List directory contents in columns or long format.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    for flag, updates, help_text in _FLAGS:
        parser.add_argument(flag, action=_FlagAction, updates=updates, help=help_text)
    parser.add_argument("paths", nargs="*", help="Files or directories. Defaults to the current directory.")
    parser.set_defaults(**defaults)
    return parser


def initial_settings(is_tty: bool, environ: Mapping[str, str] | None = None) -> dict[str, object]:
    """Option values before any flag is applied."""
    defaults = load_listing_defaults(environ)
    is_superuser = hasattr(os, "getuid") and os.getuid() == 0
    return {
        "sort_mode": SortMode.NAME,
        "time_field": TimeField.MODIFIED,
        "reverse": False,
        "print_inode": False,
        "print_blocks": False,
        "classify": defaults.classify,
        "list_directories": False,
        "numeric_ids": False,
        "long_format": False,
        "human_readable": defaults.human_readable,
        "raw_names": not is_tty,
        "grid": is_tty,
        "horizontal": False,
        "show_hidden": defaults.show_hidden or is_superuser,
        "show_dot_entries": False,
        "recursive": False,
        "block_size": defaults.block_size,
    }


def parse_options(
    argv: Sequence[str],
    is_tty: bool,
    environ: Mapping[str, str] | None = None,
    stdout_fd: int = 1,
) -> tuple[ListingOptions, list[str]]:
    """Parse ``argv`` into options plus the operand list (``["."]`` when empty)."""
    settings = initial_settings(is_tty, environ)
    namespace = vars(build_parser(settings).parse_args(list(argv)))
    operands = namespace.pop("paths") or ["."]
    width = output_width(environ, stdout_fd) if namespace["grid"] else 0
    options = ListingOptions(output_width=width, **namespace)
    return options, operands


def _stdout_fd(out: TextIO) -> int:
    try:
        return out.fileno()
    except (AttributeError, OSError, ValueError):
        return 1


def main(
    argv: Sequence[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """List the operands in ``argv`` and return the exit status.

    ``out``/``err`` default to the process streams; names that are not valid
    in the filesystem encoding are written back byte-for-byte.
    """
    if out is None:
        out = sys.stdout
        out.reconfigure(errors="surrogateescape")
    args = sys.argv[1:] if argv is None else argv
    options, operands = parse_options(args, out.isatty(), environ, _stdout_fd(out))

    handler = configure_logging(PROG, err)
    diagnostics = Diagnostics()
    try:
        return list_paths(operands, options, out, diagnostics)
    except FatalTraversalError as exc:
        out.flush()
        diagnostics.fatal(f"cannot continue listing: {exc}")
        return EXIT_FAILURE
    finally:
        out.flush()
        logger.removeHandler(handler)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
