"""
Exposes the version of geomaggrid
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """Reads the repo-root VERSION file when running from a source tree without installed metadata"""
    try:
        return (Path(__file__).resolve().parents[1] / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return None


try:
    __version__ = version("geomaggrid")
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ["__version__"]
