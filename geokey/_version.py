"""
Exposes the version of geokey
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Fallback for a source checkout without installed metadata; reads the VERSION
    file at the repository root.
    """
    version_file = Path(__file__).resolve().parents[1] / "VERSION"
    try:
        return version_file.read_text(encoding="utf-8").strip()
    except OSError:
        return None


try:
    __version__ = version("geokey")
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ["__version__"]
