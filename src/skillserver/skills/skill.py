"""
Skill definition and SKILL.md frontmatter parsing.

Skills are defined by a SKILL.md file with YAML frontmatter.
The frontmatter carries the name and description; the whole document,
frontmatter included, is served verbatim when the skill is requested.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import datetime as _datetime
import pathlib as _pathlib
import re as _re
import typing as _typing

import pydantic as _pydantic
import yaml as _yaml

import skillserver.skills.paths as paths
import skillserver.skills.types as types

# Opening delimiter on the first line, closing delimiter alone on a later line
_FRONTMATTER_RE = _re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?(.*)\Z",
    _re.DOTALL | _re.MULTILINE,
)


class SkillParseError(ValueError):
    """Raised when a SKILL.md document has unusable frontmatter."""

    pass


class MissingFrontmatterError(SkillParseError):
    """The document does not start with a delimited metadata block."""

    pass


class MalformedFrontmatterError(SkillParseError):
    """The metadata block is not valid YAML or is not a mapping."""

    pass


class MissingFieldError(SkillParseError):
    """A required field is absent or empty."""

    pass


class FieldTypeError(SkillParseError):
    """A required field is present but is not a string."""

    pass


class SkillFrontmatter(_pydantic.BaseModel):
    """
    Frontmatter parsed from a SKILL.md file.

    Only ``name`` and ``description`` are required. Any other keys are
    accepted and kept as extra fields, but nothing downstream reads them.
    """

    model_config = _pydantic.ConfigDict(extra="allow", frozen=True)

    name: _pydantic.StrictStr = _pydantic.Field(
        ...,
        min_length=1,
        description="Skill name used for lookup (matched case-insensitively)",
    )

    description: _pydantic.StrictStr = _pydantic.Field(
        ...,
        min_length=1,
        description="What the skill does and when to use it",
    )

    @property
    def extra_fields(self) -> dict[str, _typing.Any]:
        """Header fields other than name and description."""
        return dict(self.model_extra or {})


@_dataclasses.dataclass(frozen=True)
class Skill:
    """
    A skill loaded from disk.

    Records are never mutated; every refresh builds new ones.
    """

    name: str
    """Skill name from frontmatter."""

    description: str
    """Skill description from frontmatter."""

    base_directory: _pathlib.Path
    """Absolute path to the directory holding SKILL.md."""

    file_path: _pathlib.Path
    """Absolute path to SKILL.md itself."""

    content: str
    """Raw document text, frontmatter included."""

    last_loaded: _datetime.datetime
    """When the scan that produced this record read the file."""

    source: types.SkillSource
    """Which configured root the skill was found under."""

    location: types.SkillLocation
    """Whether that root is project-local or user-global."""

    @property
    def key(self) -> str:
        """Normalized name used as the cache key."""
        return paths.normalize_skill_name(self.name)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "base_directory": str(self.base_directory),
            "file_path": str(self.file_path),
            "last_loaded": self.last_loaded.isoformat(),
            "source": self.source.value,
            "location": self.location,
        }


def _error_from_validation(error: _pydantic.ValidationError) -> SkillParseError:
    """Classify a pydantic validation failure as missing-field or wrong-type."""
    details = error.errors()
    fields = sorted({str(d["loc"][0]) for d in details if d["loc"]})
    # An empty YAML value loads as None and counts as missing, not mistyped
    missing = sorted(
        {
            str(d["loc"][0])
            for d in details
            if d["loc"]
            and (d["type"] in ("missing", "string_too_short") or d.get("input") is None)
        }
    )
    if missing:
        return MissingFieldError(
            f"Missing required frontmatter field(s): {', '.join(missing)}"
        )
    return FieldTypeError(
        f"Frontmatter field(s) must be strings: {', '.join(fields)}"
    )


def parse_skill_markdown(content: str) -> tuple[SkillFrontmatter, str]:
    """
    Parse a SKILL.md document into frontmatter and body.

    Args:
        content: Raw markdown content.

    Returns:
        Tuple of (frontmatter, body).

    Raises:
        MissingFrontmatterError: No ``---`` delimited block at the top.
        MalformedFrontmatterError: Block is not a YAML mapping.
        MissingFieldError: ``name`` or ``description`` absent or empty.
        FieldTypeError: ``name`` or ``description`` not a string.
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        raise MissingFrontmatterError("SKILL.md must start with YAML frontmatter (---)")

    frontmatter_yaml = match.group(1)
    body = match.group(2)

    try:
        data = _yaml.safe_load(frontmatter_yaml)
    except _yaml.YAMLError as e:
        raise MalformedFrontmatterError(f"Invalid YAML in frontmatter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedFrontmatterError("Frontmatter must be a YAML mapping")

    # Non-string keys cannot name a required field; drop them before validation
    data = {k: v for k, v in data.items() if isinstance(k, str)}

    try:
        frontmatter = SkillFrontmatter.model_validate(data)
    except _pydantic.ValidationError as e:
        raise _error_from_validation(e) from e

    return frontmatter, body


def parse_skill_frontmatter(content: str) -> SkillFrontmatter | None:
    """
    Parse and validate frontmatter, returning None for any bad document.

    Use parse_skill_markdown when the reason for rejection matters.
    """
    try:
        frontmatter, _ = parse_skill_markdown(content)
    except SkillParseError:
        return None
    return frontmatter


def build_skill(
    frontmatter: SkillFrontmatter,
    content: str,
    file_path: _pathlib.Path,
    base_directory: _pathlib.Path,
    source: types.SkillSource,
    location: types.SkillLocation,
) -> Skill:
    """Create a Skill record stamped with the current time."""
    return Skill(
        name=frontmatter.name,
        description=frontmatter.description,
        base_directory=base_directory,
        file_path=file_path,
        content=content,
        last_loaded=_datetime.datetime.now(_datetime.timezone.utc),
        source=source,
        location=location,
    )

