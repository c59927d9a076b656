"""
use_skill tool for model access to skills.

Resolves a (possibly namespaced) skill identifier against the project,
personal and superpowers roots and returns the skill document with a short
header naming its supporting-files directory.
"""

from __future__ import annotations

import typing as _typing

import superpowers.constants as constants
import superpowers.skills.loader as loader
import superpowers.tools.base as base


class UseSkillTool(base.Tool):
    """
    Load a skill's guidance into the conversation.

    - use_skill(skill_name="brainstorming") → project, personal, then superpowers
    - use_skill(skill_name="project:deploy") → project skills only
    - use_skill(skill_name="superpowers:brainstorming") → bundled library only
    """

    def __init__(self, skill_loader: loader.SkillLoader) -> None:
        """
        Initialize the use_skill tool.

        Args:
            skill_loader: Loader bound to the configured skill roots.
        """
        self._loader = skill_loader

    @property
    def name(self) -> str:
        return constants.USE_SKILL_TOOL

    @property
    def description(self) -> str:
        return (
            "Load and read a specific skill to guide your work. Skills contain "
            "proven workflows, mandatory processes, and expert techniques."
        )

    @property
    def requires_permission(self) -> bool:
        return False  # Read-only

    @property
    def input_schema(self) -> dict[str, _typing.Any]:
        return {
            "type": "object",
            "properties": {
                "skill_name": {
                    "type": "string",
                    "description": (
                        'Name of the skill to load (e.g., "superpowers:brainstorming", '
                        '"my-custom-skill", or "project:my-skill")'
                    ),
                },
            },
            "required": ["skill_name"],
        }

    async def execute(
        self,
        input: dict[str, _typing.Any],
    ) -> base.ToolResult:
        """
        Execute the use_skill tool.

        Args:
            input: Tool input with skill_name.

        Returns:
            ToolResult with the rendered skill, or a not-found error.

        Raises:
            OSError: If the resolved skill file cannot be read.
        """
        skill_name = self._require_input(input, "skill_name", label="skill name")
        if isinstance(skill_name, base.ToolResult):
            return skill_name

        try:
            skill = self._loader.load(skill_name)
        except loader.SkillNotFoundError as e:
            return base.ToolResult(
                success=False,
                output="",
                error=(
                    f"{e}\n\n"
                    f"Use the {constants.FIND_SKILLS_COMMAND} command to see available skills."
                ),
            )

        return base.ToolResult(
            success=True,
            output=skill.render(skill_name),
        )
