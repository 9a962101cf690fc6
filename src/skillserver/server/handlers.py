"""
Transport-independent request handling.

The MCP wiring in server.app delegates here, so lookups and listings can
be exercised without a client connection. Handlers only read the cache;
they never trigger a scan.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import pydantic as _pydantic

import skillserver.constants as constants
import skillserver.server.formatting as formatting
import skillserver.server.schemas as schemas
import skillserver.skills.cache as cache_module

_logger = _logging.getLogger(__name__)


class InvalidSkillRequestError(ValueError):
    """Raised when a tool call is malformed, as opposed to not found."""

    pass


def describe_skill_tool(cache: cache_module.SkillCache) -> dict[str, _typing.Any]:
    """Return name, description and input schema of the skill tool."""
    return {
        "name": constants.SKILL_TOOL_NAME,
        "description": formatting.generate_tool_description(cache.get_all_skills()),
        "inputSchema": schemas.SKILL_TOOL_INPUT_SCHEMA,
    }


def parse_skill_request(arguments: _typing.Mapping[str, _typing.Any] | None) -> schemas.SkillToolInput:
    """
    Validate skill tool arguments.

    Raises:
        InvalidSkillRequestError: Arguments are missing, empty, of the
            wrong type, or include unknown keys.
    """
    try:
        return schemas.SkillToolInput.model_validate(dict(arguments or {}))
    except _pydantic.ValidationError as e:
        raise InvalidSkillRequestError(f"Invalid input: {e}") from e


def handle_skill_call(
    cache: cache_module.SkillCache,
    tool_name: str,
    arguments: _typing.Mapping[str, _typing.Any] | None,
) -> str:
    """
    Handle a call to the skill tool.

    Args:
        cache: Cache to read from.
        tool_name: Name of the tool the client invoked.
        arguments: Raw tool arguments.

    Returns:
        The skill document with a short header, or a not-found listing
        of every cached skill.

    Raises:
        InvalidSkillRequestError: Unknown tool or malformed arguments.
    """
    if tool_name != constants.SKILL_TOOL_NAME:
        raise InvalidSkillRequestError(f"Unknown tool: {tool_name}")

    request = parse_skill_request(arguments)
    skill = cache.get(request.command)

    if skill is None:
        _logger.info("Skill not found: %s", request.command)
        return formatting.format_skill_not_found(request.command, cache.get_all_skills())

    _logger.info("Loading skill: %s", skill.name)
    return formatting.format_skill_content(skill)
