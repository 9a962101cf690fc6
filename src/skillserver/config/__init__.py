"""
Configuration module for Skillserver.

Uses pydantic-settings for environment variable loading.
"""

from skillserver.config.settings import Settings

__all__ = ["Settings"]
