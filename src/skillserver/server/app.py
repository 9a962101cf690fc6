"""
MCP server wiring.

Exposes a single ``skill`` tool over stdio. Listing tools returns a
description rebuilt from the cache; calling the tool returns the
requested skill document. Both read from the cache only.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import mcp.server.lowlevel as _mcp_server
import mcp.server.stdio as _mcp_stdio
import mcp.types as _mcp_types

import skillserver
import skillserver.constants as constants
import skillserver.server.handlers as handlers
import skillserver.skills.cache as cache_module
import skillserver.skills.discovery as discovery
import skillserver.skills.refresh as refresh
import skillserver.skills.types as types

_logger = _logging.getLogger(__name__)


def create_server(cache: cache_module.SkillCache) -> _mcp_server.Server:
    """
    Build an MCP server answering from ``cache``.

    Args:
        cache: Live skill cache, filled and refreshed elsewhere.

    Returns:
        Configured low-level MCP server, not yet connected.
    """
    server = _mcp_server.Server(
        constants.SERVER_NAME,
        version=skillserver.__version__,
    )

    @server.list_tools()
    async def _list_tools() -> list[_mcp_types.Tool]:
        tool = handlers.describe_skill_tool(cache)
        return [
            _mcp_types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
        ]

    @server.call_tool()
    async def _call_tool(
        name: str, arguments: dict[str, _typing.Any] | None
    ) -> list[_mcp_types.TextContent]:
        # InvalidSkillRequestError propagates; the SDK turns it into an error result
        text = handlers.handle_skill_call(cache, name, arguments)
        return [_mcp_types.TextContent(type="text", text=text)]

    return server


async def serve(
    roots: _typing.Sequence[types.SkillRoot],
    *,
    recursive_custom: bool = False,
    refresh_interval: float = constants.DEFAULT_REFRESH_INTERVAL_SECONDS,
) -> None:
    """
    Run the skills server over stdio until the client disconnects.

    The initial scan completes before the transport is opened, and the
    periodic refresh runs for as long as the server does.

    Args:
        roots: Skill roots in priority order.
        recursive_custom: Walk custom roots recursively.
        refresh_interval: Seconds between refresh passes.
    """
    _logger.info("%s v%s starting...", constants.SERVER_NAME, skillserver.__version__)

    cache = cache_module.SkillCache()
    skill_discovery = discovery.SkillDiscovery(roots, recursive_custom=recursive_custom)
    await skill_discovery.scan_all(cache)

    server = create_server(cache)
    refresher = refresh.SkillRefresher(skill_discovery, cache, refresh_interval)
    refresher.start()

    try:
        async with _mcp_stdio.stdio_server() as (read_stream, write_stream):
            _logger.info("Server connected and ready")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await refresher.stop()
