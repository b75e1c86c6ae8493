"""
nwn: strip trailing whitespace from text files.

Walks files and directories, removes spaces and tabs that sit right before
a newline, and prints the result, rewrites the file in place, or shows a
unified diff of the change. Image files are detected and skipped.
"""

from ._version import __version__

from .main import main  # noqa: F401

__all__ = ["__version__", "main"]
