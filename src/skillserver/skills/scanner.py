"""
Directory scanning for skill documents.

Two strategies are available for a root directory:

- Shallow: every immediate subdirectory is probed for a SKILL.md file.
  Used for the built-in roots.
- Recursive: the whole subtree is walked, and any directory holding a
  SKILL.md file directly is loaded as a skill. The walk keeps descending
  below skill directories to find nested skills. Used for custom roots
  when recursive scanning is enabled.

Both return skills in directory-listing order, with load failures
already filtered out by the loader.
"""

from __future__ import annotations

import asyncio as _asyncio
import dataclasses as _dataclasses
import logging as _logging
import os as _os
import pathlib as _pathlib

import skillserver.constants as constants
import skillserver.skills.loader as loader
import skillserver.skills.skill as skill_module
import skillserver.skills.types as types

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True)
class DirectoryEntry:
    """One listing entry with its file-type checks already done."""

    path: _pathlib.Path
    name: str
    is_dir: bool
    """Directory, following symlinks."""
    is_real_dir: bool
    """Directory that is not a symlink."""
    is_file: bool


def _read_directory(path: _pathlib.Path) -> list[DirectoryEntry]:
    with _os.scandir(path) as entries:
        return [
            DirectoryEntry(
                path=_pathlib.Path(entry.path),
                name=entry.name,
                is_dir=_is_directory(entry, follow_symlinks=True),
                is_real_dir=_is_directory(entry, follow_symlinks=False),
                is_file=_is_file(entry),
            )
            for entry in entries
        ]


async def _list_directory(path: _pathlib.Path) -> list[DirectoryEntry]:
    """List a directory and stat its entries in a worker thread."""
    return await _asyncio.to_thread(_read_directory, path)


def _is_directory(entry: _os.DirEntry[str], *, follow_symlinks: bool) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def _is_file(entry: _os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _log_found(skill: skill_module.Skill) -> None:
    _logger.info("Found skill: %s (%s)", skill.name, skill.source.value)


async def scan_skill_directory(
    directory: _pathlib.Path,
    source: types.SkillSource,
    location: types.SkillLocation,
) -> list[skill_module.Skill]:
    """
    Scan one level deep: load ``<directory>/<subdir>/SKILL.md`` for each subdir.

    Non-directory entries are ignored. Symlinked skill directories are
    followed. A missing root yields an empty list without logging.

    Args:
        directory: Absolute path of the root to scan.
        source: Source tag for discovered skills.
        location: Location tag for discovered skills.

    Returns:
        Skills found, in directory-listing order.
    """
    skills: list[skill_module.Skill] = []

    try:
        entries = await _list_directory(directory)
    except FileNotFoundError:
        return skills
    except PermissionError:
        _logger.warning("Permission denied scanning directory: %s", directory)
        return skills
    except OSError as e:
        _logger.error("Error scanning directory %s: %s", directory, e)
        return skills

    for entry in entries:
        if not entry.is_dir:
            continue

        skill_dir = entry.path
        skill = await loader.load_skill_file(
            skill_dir / constants.SKILL_FILENAME,
            skill_dir,
            source,
            location,
        )
        if skill is not None:
            skills.append(skill)
            _log_found(skill)

    return skills


async def scan_skill_directory_recursive(
    directory: _pathlib.Path,
    source: types.SkillSource,
    location: types.SkillLocation,
) -> list[skill_module.Skill]:
    """
    Walk the whole subtree of ``directory`` looking for SKILL.md files.

    The walk is a depth-first pre-order traversal driven by an explicit
    stack, visiting children in listing order. Symlinked directories are
    not descended into. Directories that vanish or cannot be listed are
    skipped without logging.

    Args:
        directory: Absolute path of the root to walk.
        source: Source tag for discovered skills.
        location: Location tag for discovered skills.

    Returns:
        Skills found, in traversal order.
    """
    skills: list[skill_module.Skill] = []
    stack: list[_pathlib.Path] = [directory]

    while stack:
        current = stack.pop()

        try:
            entries = await _list_directory(current)
        except (FileNotFoundError, NotADirectoryError, PermissionError):
            continue
        except OSError as e:
            _logger.error("Error scanning directory %s: %s", current, e)
            continue

        has_skill_file = any(
            entry.name == constants.SKILL_FILENAME and entry.is_file
            for entry in entries
        )
        if has_skill_file:
            skill = await loader.load_skill_file(
                current / constants.SKILL_FILENAME,
                current,
                source,
                location,
            )
            if skill is not None:
                skills.append(skill)
                _log_found(skill)

        subdirs = [entry.path for entry in entries if entry.is_real_dir]
        # Reversed so the first listed subdirectory is popped next
        stack.extend(reversed(subdirs))

    return skills
