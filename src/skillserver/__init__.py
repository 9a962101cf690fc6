"""
Skillserver - skill catalog server for AI agents.

Discovers SKILL.md documents across prioritized directories, keeps them
in an in-memory cache, and serves them by name over MCP.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("skillserver")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Skillserver Contributors"

__all__ = ["__version__", "__version_info__"]
