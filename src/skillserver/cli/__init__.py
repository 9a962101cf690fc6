"""
CLI module for Skillserver.

Provides the command-line interface using Click.
"""

from skillserver.cli.main import cli, main

__all__ = ["main", "cli"]
