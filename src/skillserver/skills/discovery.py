"""
Skill discovery across prioritized roots.

Roots are scanned in priority order (first match wins):
1. ./.agent/skills   - project-local, agent-neutral
2. ./.claude/skills  - project-local, Claude-specific
3. ~/.agent/skills   - per-user, agent-neutral
4. ~/.claude/skills  - per-user, Claude-specific
5. Extra directories supplied at startup, in the order given

A skill whose normalized name was already produced by an earlier root
is discarded.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import skillserver.skills.cache as cache_module
import skillserver.skills.paths as paths
import skillserver.skills.scanner as scanner
import skillserver.skills.skill as skill_module
import skillserver.skills.types as types

_logger = _logging.getLogger(__name__)

DEFAULT_SKILL_ROOTS: tuple[types.SkillRoot, ...] = (
    types.SkillRoot("./.agent/skills", types.SkillSource.PROJECT_UNIVERSAL, "project"),
    types.SkillRoot("./.claude/skills", types.SkillSource.PROJECT_CLAUDE, "project"),
    types.SkillRoot("~/.agent/skills", types.SkillSource.GLOBAL_UNIVERSAL, "global"),
    types.SkillRoot("~/.claude/skills", types.SkillSource.GLOBAL_CLAUDE, "global"),
)
"""Built-in roots in priority order."""


def get_custom_skill_roots(directories: _typing.Iterable[str]) -> list[types.SkillRoot]:
    """Wrap operator-supplied directories as custom roots, keeping their order."""
    return [
        types.SkillRoot(directory, types.SkillSource.CUSTOM, "global")
        for directory in directories
    ]


def get_skill_roots(
    extra_dirs: _typing.Iterable[str] | None = None,
    *,
    include_defaults: bool = True,
) -> list[types.SkillRoot]:
    """
    Get all skill roots in priority order.

    Args:
        extra_dirs: Additional directories, appended after the built-ins.
        include_defaults: Whether to include the four built-in roots.

    Returns:
        Roots from highest to lowest priority.
    """
    roots = list(DEFAULT_SKILL_ROOTS) if include_defaults else []
    if extra_dirs:
        roots.extend(get_custom_skill_roots(extra_dirs))
    return roots


def _describe_origin(skill: skill_module.Skill) -> str:
    if skill.source is types.SkillSource.CUSTOM:
        return f"{skill.source.value} ({skill.base_directory})"
    return skill.source.value


class SkillDiscovery:
    """
    Scans the configured roots and fills a SkillCache.

    Each pass builds a fresh cache off to the side and swaps it into the
    live cache once every root has been merged. Readers never observe an
    empty or half-built cache, and a pass that fails part-way leaves the
    previous contents in place.
    """

    def __init__(
        self,
        roots: _typing.Sequence[types.SkillRoot] | None = None,
        *,
        recursive_custom: bool = False,
    ) -> None:
        """
        Initialize skill discovery.

        Args:
            roots: Roots in priority order. Defaults to the built-in roots.
            recursive_custom: Walk custom roots recursively instead of
                one level deep.
        """
        self._roots = list(roots) if roots is not None else list(DEFAULT_SKILL_ROOTS)
        self._recursive_custom = recursive_custom

    @property
    def roots(self) -> list[types.SkillRoot]:
        """Roots in priority order."""
        return list(self._roots)

    @property
    def recursive_custom(self) -> bool:
        """Whether custom roots are walked recursively."""
        return self._recursive_custom

    async def scan_root(self, root: types.SkillRoot) -> list[skill_module.Skill]:
        """Scan a single root with the strategy appropriate for it."""
        directory = _pathlib.Path(paths.resolve_root_path(root.path))
        _logger.debug("Scanning %s (%s)", root.path, directory)

        if root.is_custom and self._recursive_custom:
            return await scanner.scan_skill_directory_recursive(
                directory, root.source, root.location
            )
        return await scanner.scan_skill_directory(directory, root.source, root.location)

    async def scan_all(self, cache: cache_module.SkillCache) -> int:
        """
        Rebuild the cache from every root.

        Roots are processed strictly in order; all merge decisions for one
        root complete before the next root is scanned.

        Args:
            cache: Live cache to replace.

        Returns:
            Number of skills in the cache after the pass.
        """
        staging = cache_module.SkillCache()
        _logger.info("Scanning skill directories...")

        for root in self._roots:
            for skill in await self.scan_root(root):
                existing = staging.get(skill.name)
                if existing is None:
                    staging.set(skill)
                    continue
                _logger.info(
                    "Skipping duplicate skill '%s' from %s (already loaded from %s)",
                    skill.name,
                    _describe_origin(skill),
                    _describe_origin(existing),
                )

        cache.replace_with(staging)
        total = cache.size()
        _logger.info("Skills discovered: %d", total)
        return total
