"""
File processing and path walking for nwn.

Each file is read once, checked for an image header, normalized and then
printed, rewritten or diffed depending on the options. The walker turns
per-file failures into reported errors and folds every outcome into a
single ``ExitStatus``.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional

from .constants import ORIG_SUFFIX
from .core import ExitStatus, NwnError, ProcessingError, format_error, report
from .diff import to_slash, unified_diff
from .images import is_image
from .normalize import strip_trailing_whitespace


@dataclass(frozen=True)
class ProcessOptions:
    write: bool = False
    diff: bool = False

    @property
    def prints_content(self) -> bool:
        return not self.write and not self.diff


def _file_mode(filename: str) -> Optional[int]:
    try:
        return stat.S_IMODE(os.stat(filename).st_mode)
    except OSError:
        return None


def write_file(filename: str, data: bytes) -> None:
    """Overwrite ``filename`` with ``data``, keeping its permission bits."""
    mode = _file_mode(filename)
    with open(filename, "wb") as handle:
        handle.write(data)
    if mode is not None:
        os.chmod(filename, mode)


def process_file(filename: str, options: ProcessOptions, out: BinaryIO) -> ExitStatus:
    """
    Normalize a single file.

    Args:
        filename (str): File to process
        options (ProcessOptions): Write and diff switches
        out (BinaryIO): Stream receiving content, diffs and notices

    Returns:
        ExitStatus: ``CHANGED`` if the file had trailing whitespace,
        otherwise ``CLEAN``

    Raises:
        OSError: If the file cannot be read or rewritten
        ProcessingError: If the diff cannot be produced
    """
    with open(filename, "rb") as handle:
        src = handle.read()

    if is_image(src):
        out.write(b"skip image file " + os.fsencode(filename) + b"\n")
        return ExitStatus.CLEAN

    ret = strip_trailing_whitespace(src)
    status = ExitStatus.CLEAN

    if ret != src:
        status = ExitStatus.CHANGED

        if options.write:
            write_file(filename, ret)

        if options.diff:
            try:
                data = unified_diff(src, ret, filename)
            except NwnError as exc:
                raise ProcessingError(f"failed to diff: {format_error(exc)}") from exc
            label = os.fsencode(to_slash(filename))
            out.write(b"diff -u " + label + ORIG_SUFFIX.encode() + b" " + label + b"\n")
            out.write(data)

    if options.prints_content:
        out.write(ret)

    return status


def iter_files(
    directory: Path, onerror: Callable[[OSError], None]
) -> Iterator[Path]:
    """Yield files below ``directory`` depth first, in name order.

    Symlinked directories are not followed. Dangling symlinks are yielded
    so opening them reports the problem; FIFOs, sockets and devices are
    skipped.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        onerror(exc)
        return

    for entry in entries:
        try:
            is_link = entry.is_symlink()
            if entry.is_dir() and not is_link:
                walk_into = True
            elif entry.is_file() or (is_link and not entry.exists()):
                walk_into = False
            else:
                continue
        except OSError as exc:
            onerror(exc)
            continue

        if walk_into:
            yield from iter_files(entry, onerror)
        else:
            yield entry


def _process_reported(filename: str, options: ProcessOptions, out: BinaryIO) -> ExitStatus:
    try:
        return process_file(filename, options, out)
    except (OSError, NwnError) as exc:
        return report(exc)


def walk_path(path: str, options: ProcessOptions, out: BinaryIO) -> ExitStatus:
    """
    Process a path given on the command line.

    Directories are walked recursively; errors for individual entries are
    reported and the walk continues.

    Returns:
        ExitStatus: The most severe status seen below ``path``
    """
    try:
        info = os.stat(path)
    except OSError as exc:
        return report(exc)

    if not stat.S_ISDIR(info.st_mode):
        return _process_reported(path, options, out)

    status = ExitStatus.CLEAN

    def onerror(exc: OSError) -> None:
        nonlocal status
        status = status.escalate(report(exc))

    for entry in iter_files(Path(path), onerror):
        status = status.escalate(_process_reported(str(entry), options, out))
    return status
