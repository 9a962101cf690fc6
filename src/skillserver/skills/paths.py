"""
Path and name helpers shared by the scanner and the cache.
"""

from __future__ import annotations

import os as _os


def resolve_home_path(path: str) -> str:
    """
    Expand a leading ``~`` (alone or as ``~/rest``) to the home directory.

    Any other path, including ``~user`` forms, is returned untouched, so
    resolving an already-absolute path is a no-op.
    """
    if path == "~":
        return _os.path.expanduser("~")
    if path.startswith("~/"):
        return _os.path.join(_os.path.expanduser("~"), path[2:])
    return path


def resolve_root_path(path: str) -> str:
    """Expand ``~`` and make the result absolute against the current directory."""
    return _os.path.abspath(resolve_home_path(path))


def normalize_skill_name(name: str) -> str:
    """Normalize a skill name for case-insensitive lookup."""
    return name.strip().lower()
