"""Helpers for locating runtime asset files."""

from __future__ import annotations

from pathlib import Path

_PACKAGE_ASSETS_DIR = Path(__file__).resolve().parent / "assets"

DEFAULT_ART_FILE = "piece_art.txt"


def assets_dir() -> Path:
    """Return the root directory for runtime assets."""
    return _PACKAGE_ASSETS_DIR


def asset_path(*parts: str) -> Path:
    """Build an absolute path inside the runtime assets directory."""
    return assets_dir().joinpath(*parts)


def default_art_path() -> Path:
    """Path of the bundled board art."""
    return asset_path(DEFAULT_ART_FILE)
