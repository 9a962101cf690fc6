"""
Provenance types for discovered skills.

Every skill records which configured root produced it (its source) and
whether that root is project-local or user-global (its location).
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing

SkillLocation = _typing.Literal["project", "global"]
"""Whether a skill came from a project-local or a user-global root."""


class SkillSource(_enum.Enum):
    """
    Which configured root a skill was discovered under.

    The four built-in roots form a closed set; every operator-supplied
    root shares the CUSTOM tag and is told apart by its path.
    """

    PROJECT_UNIVERSAL = "project-universal"
    """./.agent/skills - project-local, agent-neutral."""

    PROJECT_CLAUDE = "project-claude"
    """./.claude/skills - project-local, Claude-specific."""

    GLOBAL_UNIVERSAL = "global-universal"
    """~/.agent/skills - per-user, agent-neutral."""

    GLOBAL_CLAUDE = "global-claude"
    """~/.claude/skills - per-user, Claude-specific."""

    CUSTOM = "custom"
    """Extra directory supplied by the operator at startup."""


@_dataclasses.dataclass(frozen=True)
class SkillRoot:
    """One configured top-level directory searched for skills."""

    path: str
    """Configured path, possibly relative or starting with ``~``."""

    source: SkillSource
    """Source tag stamped onto skills found under this root."""

    location: SkillLocation
    """Location tag stamped onto skills found under this root."""

    @property
    def is_custom(self) -> bool:
        """Whether this root was supplied by the operator."""
        return self.source is SkillSource.CUSTOM
