"""Version information for the nwn package."""

from __future__ import annotations

try:  # Python 3.8+
    from importlib import metadata
except ImportError:  # pragma: no cover -- fallback for very old Pythons
    import importlib_metadata as metadata  # type: ignore

# NOTE: keep this fallback in step with the version in pyproject.toml.
_FALLBACK_VERSION = "0.1.0"

try:
    __version__ = metadata.version("nwn")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = _FALLBACK_VERSION

__all__ = ["__version__"]
