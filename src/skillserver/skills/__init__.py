"""
Skill discovery and caching for Skillserver.

Skills are directories holding a SKILL.md file: YAML frontmatter with a
name and description, followed by free-form instructions. They are
discovered from (in priority order, first match wins):
1. ./.agent/skills/  - Project, agent-neutral
2. ./.claude/skills/ - Project, Claude-specific
3. ~/.agent/skills/  - User, agent-neutral
4. ~/.claude/skills/ - User, Claude-specific
5. Extra directories passed at startup

The cache is rebuilt from disk on every refresh; nothing is persisted.
"""

from skillserver.skills.cache import SkillCache
from skillserver.skills.discovery import (
    DEFAULT_SKILL_ROOTS,
    SkillDiscovery,
    get_custom_skill_roots,
    get_skill_roots,
)
from skillserver.skills.loader import load_skill_file
from skillserver.skills.paths import normalize_skill_name, resolve_home_path
from skillserver.skills.refresh import SkillRefresher
from skillserver.skills.scanner import (
    scan_skill_directory,
    scan_skill_directory_recursive,
)
from skillserver.skills.skill import (
    FieldTypeError,
    MalformedFrontmatterError,
    MissingFieldError,
    MissingFrontmatterError,
    Skill,
    SkillFrontmatter,
    SkillParseError,
    parse_skill_frontmatter,
    parse_skill_markdown,
)
from skillserver.skills.types import SkillLocation, SkillRoot, SkillSource

__all__ = [
    # Core
    "Skill",
    "SkillFrontmatter",
    "SkillLocation",
    "SkillRoot",
    "SkillSource",
    # Parsing
    "FieldTypeError",
    "MalformedFrontmatterError",
    "MissingFieldError",
    "MissingFrontmatterError",
    "SkillParseError",
    "parse_skill_frontmatter",
    "parse_skill_markdown",
    # Loading and scanning
    "load_skill_file",
    "normalize_skill_name",
    "resolve_home_path",
    "scan_skill_directory",
    "scan_skill_directory_recursive",
    # Discovery and cache
    "DEFAULT_SKILL_ROOTS",
    "SkillCache",
    "SkillDiscovery",
    "SkillRefresher",
    "get_custom_skill_roots",
    "get_skill_roots",
]
