"""
MCP server surface for Skillserver.
"""

from skillserver.server.app import create_server, serve
from skillserver.server.handlers import (
    InvalidSkillRequestError,
    describe_skill_tool,
    handle_skill_call,
    parse_skill_request,
)

__all__ = [
    "InvalidSkillRequestError",
    "create_server",
    "describe_skill_tool",
    "handle_skill_call",
    "parse_skill_request",
    "serve",
]
