"""Centralized path resolution for package resources.

Provides a single source of truth for locating the resources directory,
whether running from a source checkout or installed via pip.
"""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["get_resources_dir"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Checks, in order:
    1. scream_id/resources/ next to this package (source tree and pip install)
    2. sys.prefix/share/scream_id/resources/ (data-files style installs)

    Returns:
        Path to the resources directory.

    Raises:
        FileNotFoundError: If resources directory cannot be found.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    # paths.py is at scream_id/utils/paths.py -> parent.parent = scream_id/
    candidate = Path(__file__).resolve().parent.parent / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    candidate = Path(sys.prefix) / "share" / "scream_id" / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    raise FileNotFoundError(
        "Could not locate resources directory. "
        "Searched: scream_id/resources/, sys.prefix/share/scream_id/resources/"
    )
