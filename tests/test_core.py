"""Tests for nwn.core module."""

import errno
from unittest.mock import patch

import pytest

from nwn.core import (
    DependencyError,
    DiffError,
    DiffFormatError,
    ExitStatus,
    NwnError,
    ProcessingError,
    check_dependencies,
    format_error,
    report,
)


class TestExitStatus:
    """Test the exit status accumulator."""

    @pytest.mark.parametrize(
        "current, new, expected",
        [
            (ExitStatus.CLEAN, ExitStatus.CLEAN, ExitStatus.CLEAN),
            (ExitStatus.CLEAN, ExitStatus.CHANGED, ExitStatus.CHANGED),
            (ExitStatus.CLEAN, ExitStatus.ERROR, ExitStatus.ERROR),
            (ExitStatus.CHANGED, ExitStatus.ERROR, ExitStatus.ERROR),
            (ExitStatus.ERROR, ExitStatus.CHANGED, ExitStatus.ERROR),
            (ExitStatus.CHANGED, ExitStatus.CLEAN, ExitStatus.CHANGED),
        ],
    )
    def test_escalate_never_decreases(self, current, new, expected):
        assert current.escalate(new) is expected

    def test_values_match_exit_codes(self):
        assert [int(s) for s in ExitStatus] == [0, 1, 2]


class TestCheckDependencies:
    """Test check_dependencies function."""

    @patch("shutil.which")
    def test_diff_available(self, mock_which):
        mock_which.return_value = "/usr/bin/diff"
        assert check_dependencies() == {"diff": True}

    @patch("shutil.which")
    def test_diff_missing(self, mock_which):
        mock_which.return_value = None
        assert check_dependencies() == {"diff": False}


class TestFormatError:
    def test_oserror_uses_filename_and_strerror(self):
        exc = FileNotFoundError(errno.ENOENT, "No such file or directory", "missing.txt")
        assert format_error(exc) == "missing.txt: No such file or directory"

    def test_oserror_without_filename(self):
        exc = OSError(errno.EIO, "Input/output error")
        assert format_error(exc) == "Input/output error"

    def test_dependency_error_includes_tip(self):
        exc = DependencyError("diff not found", tip="install it")
        assert format_error(exc) == "diff not found (install it)"

    def test_plain_error(self):
        assert format_error(ProcessingError("boom")) == "boom"


def test_report_prints_to_stderr(capsys):
    status = report(ProcessingError("failed to diff: nope"))
    captured = capsys.readouterr()
    assert status is ExitStatus.ERROR
    assert captured.out == ""
    assert captured.err == "nwn: failed to diff: nope\n"


def test_exception_hierarchy():
    assert issubclass(DependencyError, NwnError)
    assert issubclass(ProcessingError, NwnError)
    assert issubclass(DiffError, ProcessingError)
    assert issubclass(DiffFormatError, DiffError)
