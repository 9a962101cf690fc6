"""
In-memory cache of discovered skills, keyed by normalized name.
"""

from __future__ import annotations

import skillserver.skills.paths as paths
import skillserver.skills.skill as skill_module


class SkillCache:
    """
    Name-keyed skill store.

    Lookups are case-insensitive and ignore surrounding whitespace, so
    "PDF", "pdf" and " pdf " all address the same entry. The cache does
    no I/O; the discovery pass fills it.
    """

    def __init__(self) -> None:
        self._skills: dict[str, skill_module.Skill] = {}

    def set(self, skill: skill_module.Skill) -> None:
        """Add or replace a skill under its normalized name."""
        self._skills[skill.key] = skill

    def get(self, name: str) -> skill_module.Skill | None:
        """Get a skill by name, or None if not cached."""
        return self._skills.get(paths.normalize_skill_name(name))

    def has(self, name: str) -> bool:
        """Check whether a skill with this name is cached."""
        return paths.normalize_skill_name(name) in self._skills

    def delete(self, name: str) -> None:
        """Remove a skill if present."""
        self._skills.pop(paths.normalize_skill_name(name), None)

    def clear(self) -> None:
        """Remove all skills."""
        self._skills.clear()

    def get_all_skills(self) -> list[skill_module.Skill]:
        """Return every cached skill."""
        return list(self._skills.values())

    def size(self) -> int:
        """Return the number of cached skills."""
        return len(self._skills)

    def replace_with(self, other: SkillCache) -> None:
        """
        Take over the contents of another cache in a single step.

        Readers see either the old contents or the new ones, never a
        partially filled cache. ``other`` must not be used afterwards.
        """
        self._skills = other._skills
        other._skills = {}
