"""Tests for the MCP server wiring."""

import datetime as _datetime
import importlib.metadata as _metadata
import pathlib as _pathlib
import typing as _typing

import mcp.server.lowlevel as _mcp_server
import mcp.types as _mcp_types
import pytest as _pytest

import skillserver.constants as constants
import skillserver.server.app as app
import skillserver.skills.cache as cache_module
import skillserver.skills.skill as skill_module
import skillserver.skills.types as types


def _skill(name: str) -> skill_module.Skill:
    base = _pathlib.Path("/skills") / name
    return skill_module.Skill(
        name=name,
        description=f"{name} helper",
        base_directory=base,
        file_path=base / "SKILL.md",
        content=f"---\nname: {name}\ndescription: {name} helper\n---\n",
        last_loaded=_datetime.datetime.now(_datetime.timezone.utc),
        source=types.SkillSource.GLOBAL_CLAUDE,
        location="global",
    )


async def _call(
    server: _mcp_server.Server, name: str, arguments: dict[str, _typing.Any]
) -> _mcp_types.CallToolResult:
    handler = server.request_handlers[_mcp_types.CallToolRequest]
    request = _mcp_types.CallToolRequest(
        method="tools/call",
        params=_mcp_types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


class TestCreateServer:
    """Tests for create_server."""

    def test_server_name(self, cache: cache_module.SkillCache) -> None:
        """The server identifies itself with the fixed name."""
        server = app.create_server(cache)
        assert server.name == constants.SERVER_NAME

    def test_registers_tool_handlers(self, cache: cache_module.SkillCache) -> None:
        """Both list-tools and call-tool requests are handled."""
        server = app.create_server(cache)
        assert _mcp_types.ListToolsRequest in server.request_handlers
        assert _mcp_types.CallToolRequest in server.request_handlers

    @_pytest.mark.asyncio
    async def test_list_tools_reflects_current_cache(self, cache: cache_module.SkillCache) -> None:
        """The advertised description is built from the cache at request time."""
        server = app.create_server(cache)
        handler = server.request_handlers[_mcp_types.ListToolsRequest]

        cache.set(_skill("git"))
        result = await handler(_mcp_types.ListToolsRequest(method="tools/list"))

        tools = result.root.tools
        assert [t.name for t in tools] == ["skill"]
        assert "<name>git</name>" in (tools[0].description or "")

    @_pytest.mark.parametrize(
        "arguments",
        [
            {"command": ""},
            {},
            {"command": "git", "extra": True},
            {"command": 7},
        ],
    )
    @_pytest.mark.asyncio
    async def test_malformed_call_is_an_error_result(
        self, cache: cache_module.SkillCache, arguments: dict[str, object]
    ) -> None:
        """Bad arguments come back flagged as errors instead of crashing."""
        cache.set(_skill("git"))
        result = await _call(app.create_server(cache), "skill", arguments)

        assert result.isError is True

    @_pytest.mark.asyncio
    async def test_unknown_tool_is_an_error_result(self, cache: cache_module.SkillCache) -> None:
        """Only the skill tool can be called."""
        result = await _call(app.create_server(cache), "bash", {"command": "ls"})

        assert result.isError is True
        assert "Unknown tool: bash" in result.content[0].text

    @_pytest.mark.asyncio
    async def test_unknown_skill_is_a_normal_result(self, cache: cache_module.SkillCache) -> None:
        """A lookup miss lists the catalog and is not an error."""
        cache.set(_skill("git"))
        result = await _call(app.create_server(cache), "skill", {"command": "docx"})

        assert not result.isError
        assert result.content[0].text.startswith("Skill 'docx' not found.")
        assert "- git: git helper" in result.content[0].text

    @_pytest.mark.asyncio
    async def test_found_skill_returns_document(self, cache: cache_module.SkillCache) -> None:
        """A hit returns the header lines followed by the raw document."""
        cache.set(_skill("git"))
        result = await _call(app.create_server(cache), "skill", {"command": "GIT"})

        assert not result.isError
        assert result.content[0].text == (
            "Loading: git\nBase directory: /skills/git\n\n"
            "---\nname: git\ndescription: git helper\n---\n"
        )


class TestMcpCompatibility:
    """Tests pinning the low-level server API the app is written against."""

    def test_installed_sdk_is_1x(self) -> None:
        """The decorator-based handler registration exists only in mcp 1.x."""
        major = int(_metadata.version("mcp").split(".")[0])
        assert major == 1
        assert callable(getattr(_mcp_server.Server, "list_tools", None))
        assert callable(getattr(_mcp_server.Server, "call_tool", None))
