"""
Loading a single SKILL.md candidate from disk.

The loader never raises. Each candidate ends up as one of:
- a Skill record
- None, logged (permission denied, bad frontmatter, other I/O error)
- None, silent (file does not exist)
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib

import aiofiles as _aiofiles

import skillserver.skills.skill as skill_module
import skillserver.skills.types as types

_logger = _logging.getLogger(__name__)


async def _read_text(file_path: _pathlib.Path) -> str:
    async with _aiofiles.open(file_path, encoding="utf-8") as f:
        return await f.read()


async def load_skill_file(
    file_path: _pathlib.Path,
    base_directory: _pathlib.Path,
    source: types.SkillSource,
    location: types.SkillLocation,
) -> skill_module.Skill | None:
    """
    Load a skill document from disk.

    Args:
        file_path: Absolute path to the SKILL.md file.
        base_directory: Directory to record as the skill's base.
        source: Source tag to stamp onto the skill.
        location: Location tag to stamp onto the skill.

    Returns:
        Skill instance, or None if the file is absent or unusable.
    """
    try:
        content = await _read_text(file_path)
    except (FileNotFoundError, NotADirectoryError):
        # Probing a directory that is not a skill
        return None
    except PermissionError:
        _logger.warning("Permission denied reading skill file: %s", file_path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        _logger.error("Error loading skill file %s: %s", file_path, e)
        return None

    try:
        frontmatter, _ = skill_module.parse_skill_markdown(content)
    except skill_module.SkillParseError as e:
        _logger.warning(
            "Skill at %s has malformed frontmatter or missing required fields "
            "(name, description): %s",
            file_path,
            e,
        )
        return None

    return skill_module.build_skill(
        frontmatter,
        content,
        file_path=file_path,
        base_directory=base_directory,
        source=source,
        location=location,
    )
