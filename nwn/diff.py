"""
Unified diff rendering through the system ``diff`` command.

Both sides of the change are written to temporary files, compared with
``diff -u`` and the temporary names in the header are swapped for the
file's own name.
"""

from __future__ import annotations

import os
import subprocess
import tempfile

from .constants import DIFF_COMMAND, ORIG_SUFFIX, TEMP_PREFIX
from .core import DependencyError, DiffError, DiffFormatError


def to_slash(filename: str) -> str:
    """Return ``filename`` with forward slashes on every platform."""
    return filename.replace(os.sep, "/")


def write_temp_file(data: bytes, prefix: str = TEMP_PREFIX) -> str:
    """Write ``data`` to a new temporary file and return its path."""
    handle = tempfile.NamedTemporaryFile(prefix=prefix, delete=False)
    try:
        with handle:
            handle.write(data)
    except OSError:
        os.remove(handle.name)
        raise
    return handle.name


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def replace_temp_filename(diff: bytes, filename: str) -> bytes:
    """Relabel the two header lines of ``diff`` with ``filename``.

    ``--- /tmp/nwnab12\t2024-01-01 10:00:00.000000000 +0000`` becomes
    ``--- path/to/file.orig\t2024-01-01 10:00:00.000000000 +0000`` and
    the ``+++`` line gets the bare name. Anything after the last tab of a
    header line is kept.
    """
    parts = diff.split(b"\n", 2)
    if len(parts) < 3:
        raise DiffFormatError(f"got unexpected diff for {filename}")

    stamps = []
    for header in parts[:2]:
        index = header.rfind(b"\t")
        stamps.append(header[index:] if index != -1 else b"")

    label = os.fsencode(to_slash(filename))
    parts[0] = b"--- " + label + ORIG_SUFFIX.encode() + stamps[0]
    parts[1] = b"+++ " + label + stamps[1]
    return b"\n".join(parts)


def unified_diff(original: bytes, modified: bytes, filename: str) -> bytes:
    """
    Produce a unified diff between two byte strings.

    Args:
        original (bytes): Content before normalization
        modified (bytes): Content after normalization
        filename (str): Name used to label the diff headers

    Returns:
        bytes: ``diff -u`` output with relabelled headers

    Raises:
        DependencyError: If the diff command is not installed
        DiffError: If diff fails without producing output
        DiffFormatError: If the output lacks the two header lines
    """
    orig_path = write_temp_file(original)
    try:
        new_path = write_temp_file(modified)
        try:
            cmd = [DIFF_COMMAND, "-u", orig_path, new_path]
            try:
                result = subprocess.run(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    check=False,
                )
            except FileNotFoundError as exc:
                raise DependencyError(
                    f"'{DIFF_COMMAND}' command not found",
                    tip="install GNU diffutils or add diff to PATH",
                ) from exc
        finally:
            _remove_quietly(new_path)
    finally:
        _remove_quietly(orig_path)

    # diff exits 1 when the files differ; output is what matters.
    if not result.stdout and result.returncode != 0:
        raise DiffError(f"{DIFF_COMMAND} exited with status {result.returncode}")
    return replace_temp_filename(result.stdout, filename)
