"""
Shared pytest fixtures for Skillserver tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import skillserver.skills as skills

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "SKILLSERVER_SKILL_PATH",
    "SKILLSERVER_RECURSIVE_SCAN",
    "SKILLSERVER_REFRESH_INTERVAL",
    "SKILLSERVER_LOG_LEVEL",
    "SKILLSERVER_ENV_FILE",
]


# =============================================================================
# Skill Helpers
# =============================================================================


def write_skill(
    skill_dir: _pathlib.Path,
    name: str,
    description: str = "Test skill",
    body: str | None = None,
) -> _pathlib.Path:
    """Create ``skill_dir/SKILL.md`` and return the file path."""
    skill_dir.mkdir(parents=True, exist_ok=True)
    if body is None:
        body = f"# {name}\n\nInstructions for {name}.\n"
    skill_file = skill_dir / "SKILL.md"
    skill_file.write_text(
        f"---\nname: {name}\ndescription: {description}\n---\n\n{body}",
        encoding="utf-8",
    )
    return skill_file


@_pytest.fixture
def make_skill() -> _typing.Callable[..., _pathlib.Path]:
    """Factory fixture wrapping write_skill."""
    return write_skill


# =============================================================================
# Environment Isolation
# =============================================================================


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Remove SKILLSERVER_* variables so the real environment never leaks in."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)


@_pytest.fixture
def isolated_dirs(
    tmp_path: _pathlib.Path,
    monkeypatch: _pytest.MonkeyPatch,
) -> dict[str, _pathlib.Path]:
    """
    Point HOME and the working directory at empty temporary directories.

    The built-in roots then resolve under tmp_path, so tests control
    exactly which skills exist. Returns the four built-in root paths
    plus ``home`` and ``project``.
    """
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    return {
        "home": home,
        "project": project,
        "project_universal": project / ".agent" / "skills",
        "project_claude": project / ".claude" / "skills",
        "global_universal": home / ".agent" / "skills",
        "global_claude": home / ".claude" / "skills",
    }


@_pytest.fixture
def cache() -> skills.SkillCache:
    """Empty skill cache."""
    return skills.SkillCache()

