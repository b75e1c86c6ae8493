"""
Main module for nwn.

Contains the main function and argument parsing for the nwn command-line interface.
"""

import argparse
import sys

from argparse_formatter import FlexiFormatter

from ._version import __version__
from .core import ExitStatus, check_dependencies
from .processing import ProcessOptions, walk_path


def create_parser():
    """Create and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog="nwn",
        usage="%(prog)s [flags] [path ...]",
        description="nwn: strip trailing whitespace from the ends of lines",
        formatter_class=FlexiFormatter,
        epilog="""
Exit status is 0 when nothing needed changing, 1 when at least one file had
(or, without -w, would have had) trailing whitespace removed, and 2 when any
error occurred.

Image files are detected from their content and skipped.
""",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-w",
        "--write",
        action="store_true",
        default=False,
        help="Write result to (source) file instead of stdout",
    )
    parser.add_argument(
        "-d",
        "--diff",
        action="store_true",
        default=False,
        help="Display diffs instead of rewriting files (requires the diff command)",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Files or directories to process; directories are walked recursively",
    )

    return parser


def warn_missing_dependencies():
    """Warn up front when diff mode cannot work; each file still reports its own error."""
    deps = check_dependencies()
    missing = [tool for tool, available in deps.items() if not available]
    if missing:
        print(
            f"nwn: warning: {', '.join(missing)} not found on PATH, diffs cannot be shown",
            file=sys.stderr,
        )
    return missing


def run(paths, options, out):
    """Process every path in order and return the combined exit status."""
    status = ExitStatus.CLEAN
    for path in paths:
        status = status.escalate(walk_path(path, options, out))
    return status


def main(sysargs=None):
    """Entry point for the nwn CLI."""
    if sysargs is None:
        sysargs = sys.argv[1:]

    parser = create_parser()

    try:
        args = parser.parse_args(sysargs)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 0
        return code

    options = ProcessOptions(write=args.write, diff=args.diff)
    if options.diff and args.paths:
        warn_missing_dependencies()

    out = sys.stdout.buffer
    sys.stdout.flush()
    try:
        status = run(args.paths, options, out)
    finally:
        out.flush()
    return int(status)


if __name__ == "__main__":
    sys.exit(main())
