"""
Main CLI entry point for Skillserver.

Provides the command-line interface using Click:
- ``serve`` (alias ``mcp``) runs the MCP server over stdio
- ``list`` scans once and prints what was found
"""

import asyncio as _asyncio
import json as _json
import logging as _logging
import typing as _typing

import click as _click
import pydantic as _pydantic

import skillserver
import skillserver.config as config
import skillserver.constants as constants
import skillserver.server.app as app
import skillserver.skills as skills

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_F = _typing.TypeVar("_F", bound=_typing.Callable[..., _typing.Any])


def _run_async(coro: _typing.Coroutine[_typing.Any, _typing.Any, _typing.Any]) -> _typing.Any:
    """Run an async coroutine synchronously."""
    return _asyncio.run(coro)


def _configure_logging(level: str) -> None:
    """Send log records to stderr; stdout belongs to the stdio transport."""
    _logging.basicConfig(level=level, format=constants.LOG_FORMAT)


def _build_settings(**overrides: _typing.Any) -> config.Settings:
    """Create Settings, letting explicit command-line values win."""
    given = {key: value for key, value in overrides.items() if value is not None}
    try:
        return config.Settings(**given)
    except _pydantic.ValidationError as e:
        raise _click.UsageError(str(e)) from None


def _skill_root_options(func: _F) -> _F:
    """Options shared by every command that scans skill roots."""
    func = _click.option(
        "--log-level",
        type=str,
        default=None,
        help="Log level for stderr output (default: INFO)",
    )(func)
    func = _click.option(
        "--recursive/--no-recursive",
        "recursive",
        default=None,
        help="Walk extra skill directories recursively",
    )(func)
    func = _click.option(
        "--skills-dir",
        "skills_dirs",
        multiple=True,
        type=_click.Path(file_okay=False),
        help="Extra skill directory, lower priority than the built-ins (repeatable)",
    )(func)
    return func


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(skillserver.__version__, "-v", "--version", prog_name="skillserver")
def cli() -> None:
    """Skillserver - serve SKILL.md skills to AI agents over MCP."""


@cli.command()
@_skill_root_options
@_click.option(
    "--refresh-interval",
    type=float,
    default=None,
    help="Seconds between skill rescans (default: 30)",
)
def serve(
    skills_dirs: tuple[str, ...],
    recursive: bool | None,
    log_level: str | None,
    refresh_interval: float | None,
) -> None:
    """Run the skills MCP server over stdio."""
    settings = _build_settings(
        recursive_scan=recursive,
        log_level=log_level,
        refresh_interval=refresh_interval,
    )
    _configure_logging(settings.log_level)

    roots = skills.get_skill_roots(settings.merge_skill_dirs(skills_dirs))
    try:
        _run_async(
            app.serve(
                roots,
                recursive_custom=settings.recursive_scan,
                refresh_interval=settings.refresh_interval,
            )
        )
    except KeyboardInterrupt:
        pass
    except Exception as e:
        _logger.critical("Fatal error: %s", e, exc_info=True)
        raise SystemExit(1) from None


# Name used by existing MCP client configurations
cli.add_command(serve, name="mcp")


@cli.command(name="list")
@_skill_root_options
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
def list_cmd(
    skills_dirs: tuple[str, ...],
    recursive: bool | None,
    log_level: str | None,
    json_output: bool,
) -> None:
    """Scan skill directories once and list what was found."""
    settings = _build_settings(recursive_scan=recursive, log_level=log_level)
    # Quieter than serve unless a level was asked for
    if "log_level" in settings.model_fields_set:
        _configure_logging(settings.log_level)
    else:
        _configure_logging("WARNING")

    roots = skills.get_skill_roots(settings.merge_skill_dirs(skills_dirs))
    cache = skills.SkillCache()
    skill_discovery = skills.SkillDiscovery(roots, recursive_custom=settings.recursive_scan)
    _run_async(skill_discovery.scan_all(cache))

    found = sorted(cache.get_all_skills(), key=lambda s: s.key)

    if json_output:
        _click.echo(_json.dumps([s.to_dict() for s in found], indent=2))
        return

    if not found:
        _click.echo("No skills found.")
        return

    _click.echo(f"Skills ({len(found)}):")
    for s in found:
        _click.echo(f"  {s.name} [{s.source.value}, {s.location}]")
        _click.echo(f"    {s.description}")


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="skillserver")


if __name__ == "__main__":
    main()
