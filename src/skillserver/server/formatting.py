"""
Text rendering for tool descriptions and lookup results.

The tool description is rebuilt on every listing request so that it
always reflects the latest scan.
"""

from __future__ import annotations

import typing as _typing

import skillserver.skills.skill as skill_module

_TOOL_DESCRIPTION_TEMPLATE = """Execute a skill within the main conversation

<skills_instructions>
When users ask you to perform tasks, check if any of the available skills below can help complete the task more effectively. Skills provide specialized capabilities and domain knowledge.

How to use skills:
- Invoke skills using this tool with the skill name only (no arguments)
- When you invoke a skill, you will see <command-message>The "{{name}}" skill is loading</command-message>
- The skill's prompt will expand and provide detailed instructions on how to complete the task
- Examples:
  - command: "pdf" - invoke the pdf skill
  - command: "xlsx" - invoke the xlsx skill
  - command: "ms-office-suite:pdf" - invoke using fully qualified name

Important:
- Only use skills listed in <available_skills> below
- Do not invoke a skill that is already running
- Do not use this tool for built-in CLI commands (like /help, /clear, etc.)
</skills_instructions>

<available_skills>
{skills}
</available_skills>"""


def format_skill_entry(skill: skill_module.Skill) -> str:
    """Render one skill for the available-skills catalog."""
    return (
        "<skill>\n"
        f"<name>{skill.name}</name>\n"
        f"<description>{skill.description}</description>\n"
        f"<location>{skill.location}</location>\n"
        "</skill>"
    )


def generate_tool_description(skills: _typing.Iterable[skill_module.Skill]) -> str:
    """Build the skill tool description, embedding the current catalog."""
    catalog = "\n".join(format_skill_entry(skill) for skill in skills)
    return _TOOL_DESCRIPTION_TEMPLATE.format(skills=catalog)


def format_skill_content(skill: skill_module.Skill) -> str:
    """Render a found skill: header lines followed by the raw document."""
    return (
        f"Loading: {skill.name}\n"
        f"Base directory: {skill.base_directory}\n"
        "\n"
        f"{skill.content}"
    )


def format_skill_not_found(
    requested_name: str,
    available: _typing.Iterable[skill_module.Skill],
) -> str:
    """Render the not-found response listing every cached skill."""
    skills_list = "\n".join(f"- {s.name}: {s.description}" for s in available)
    return (
        f"Skill '{requested_name}' not found.\n"
        "\n"
        "Available skills:\n"
        f"{skills_list}\n"
        "\n"
        "Use the exact skill name (case-insensitive) to load a skill."
    )
