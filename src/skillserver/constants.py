"""
Shared constants for Skillserver.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

SERVER_NAME = "skills-mcp-server"
"""Name reported to MCP clients during initialization."""

SKILL_TOOL_NAME = "skill"
"""Name of the single tool exposed by the server."""

SKILL_FILENAME = "SKILL.md"
"""Fixed filename of a skill document inside its directory."""

DEFAULT_REFRESH_INTERVAL_SECONDS = 30.0
"""Delay between the end of one refresh and the start of the next."""

DEFAULT_LOG_LEVEL = "INFO"
"""Default level for the stderr log handler."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
"""Format for log records written to stderr."""
