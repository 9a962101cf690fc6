"""
Request validation for the skill tool.
"""

from __future__ import annotations

import typing as _typing

import pydantic as _pydantic

COMMAND_DESCRIPTION = 'The skill name (no arguments). E.g., "pdf" or "xlsx"'


class SkillToolInput(_pydantic.BaseModel):
    """Arguments accepted by the skill tool."""

    model_config = _pydantic.ConfigDict(extra="forbid", frozen=True)

    command: _pydantic.StrictStr = _pydantic.Field(
        ...,
        min_length=1,
        description=COMMAND_DESCRIPTION,
    )


SKILL_TOOL_INPUT_SCHEMA: dict[str, _typing.Any] = {
    "type": "object",
    "properties": {
        "command": {
            "type": "string",
            "minLength": 1,
            "description": COMMAND_DESCRIPTION,
        },
    },
    "required": ["command"],
    "additionalProperties": False,
}
"""JSON schema advertised to clients for the skill tool."""
