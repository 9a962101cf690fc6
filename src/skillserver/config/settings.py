"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with SKILLSERVER_ prefix
3. .env file named by SKILLSERVER_ENV_FILE (if set and present)

Extra skill directories use the platform path separator:
  SKILLSERVER_SKILL_PATH=/opt/skills:/srv/team-skills
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import skillserver.constants as constants


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit SKILLSERVER_ENV_FILE is honored. A stdio server is
    spawned by its client from an arbitrary working directory, so a
    stray .env in that directory is never picked up implicitly.
    """
    if env_file := _os.environ.get("SKILLSERVER_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    Skillserver configuration settings.

    All settings can be overridden via environment variables with
    SKILLSERVER_ prefix, e.g. SKILLSERVER_RECURSIVE_SCAN=true.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="SKILLSERVER_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    skill_path: str = _pydantic.Field(
        default="",
        description="Extra skill directories, separated by os.pathsep",
    )

    recursive_scan: bool = _pydantic.Field(
        default=False,
        description="Walk extra skill directories recursively",
    )

    refresh_interval: float = _pydantic.Field(
        default=constants.DEFAULT_REFRESH_INTERVAL_SECONDS,
        gt=0,
        description="Seconds between skill cache refreshes",
    )

    log_level: str = _pydantic.Field(
        default=constants.DEFAULT_LOG_LEVEL,
        description="Log level for stderr output",
    )

    @_pydantic.field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(_logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    @property
    def extra_skill_dirs(self) -> list[str]:
        """Extra skill directories in configured order, blanks dropped."""
        return [
            part.strip()
            for part in self.skill_path.split(_os.pathsep)
            if part.strip()
        ]

    def merge_skill_dirs(self, directories: _typing.Iterable[str]) -> list[str]:
        """Command-line directories first, then those from the environment."""
        return [*directories, *self.extra_skill_dirs]
