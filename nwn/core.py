"""
Core utilities for nwn.

Contains the exit status accumulator, error reporting and the exception
hierarchy shared by the processing modules.
"""

import enum
import shutil
import sys

from .constants import DIFF_COMMAND


class ExitStatus(enum.IntEnum):
    """Process exit status, ordered by precedence."""

    CLEAN = 0
    CHANGED = 1
    ERROR = 2

    def escalate(self, other):
        """
        Combine two statuses, keeping the more severe one.

        Args:
            other (ExitStatus): Status produced by a later step

        Returns:
            ExitStatus: ``ERROR`` over ``CHANGED`` over ``CLEAN``
        """
        return ExitStatus(max(self, other))


def check_dependencies():
    """
    Check if the external tools used by diff mode are available.

    Returns:
        dict: Dictionary of tool availability
    """
    return {DIFF_COMMAND: shutil.which(DIFF_COMMAND) is not None}


def format_error(exc):
    """Render an exception as a one-line message."""
    if isinstance(exc, OSError) and exc.strerror:
        if exc.filename is not None:
            return f"{exc.filename}: {exc.strerror}"
        return exc.strerror
    message = str(exc)
    tip = getattr(exc, "tip", None)
    if tip:
        message = f"{message} ({tip})"
    return message


def report(exc):
    """
    Print an error to standard error.

    Returns:
        ExitStatus: always ``ExitStatus.ERROR`` so callers can escalate
    """
    print(f"nwn: {format_error(exc)}", file=sys.stderr)
    return ExitStatus.ERROR


class NwnError(Exception):
    """Base exception class for nwn."""

    pass


class DependencyError(NwnError):
    """Raised when a required external tool is missing."""

    def __init__(self, message, *, tip=None):
        super().__init__(message)
        self.tip = tip


class ProcessingError(NwnError):
    """Raised when processing a single file fails."""

    pass


class DiffError(ProcessingError):
    """Raised when the diff command fails."""

    pass


class DiffFormatError(DiffError):
    """Raised when the diff command produces output we cannot relabel."""

    pass
