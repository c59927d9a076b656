"""
Bootstrap payload composition.

The bootstrap is the orientation skill's body plus a tool-name translation
table, wrapped in a sentinel tag the model treats as high priority. It is
injected at session start (full form) and again before compaction (compact
form, to keep the repeated token cost down).
"""

from __future__ import annotations

import pathlib as _pathlib

import superpowers.constants as constants
import superpowers.skills.frontmatter as frontmatter
import superpowers.skills.locator as locator


def _full_tool_mapping(personal_dir: _pathlib.Path) -> str:
    return f"""**Tool Mapping for pi coding agent:**
When skills reference tools you don't have, substitute pi equivalents:
- `TodoWrite` → `update_plan` or custom todo tool
- `Task` tool with subagents → Use pi's extension system or manual task breakdown
- `Skill` tool → `{constants.USE_SKILL_TOOL}` custom tool (registered by this extension)
- `Read`, `Write`, `Edit`, `Bash` → Your native tools

**Skills naming (priority order):**
- Project skills: `project:skill-name` (in {constants.PROJECT_SKILLS_SUBDIR}/)
- Personal skills: `skill-name` (in {personal_dir}/)
- Superpowers skills: `superpowers:skill-name`
- Project skills override personal, which override superpowers when names match"""


_COMPACT_TOOL_MAPPING = f"""**Tool Mapping:** TodoWrite->update_plan, Task->subagent, Skill->{constants.USE_SKILL_TOOL}

**Skills naming (priority order):** project: > personal > superpowers:"""


class BootstrapComposer:
    """
    Builds the bootstrap payload from the current disk state.

    The orientation skill is looked up in the personal and superpowers roots
    only; project skills never supply it.
    """

    def __init__(
        self,
        skill_locator: locator.SkillLocator,
        *,
        orientation_skill: str = constants.ORIENTATION_SKILL,
    ) -> None:
        """
        Initialize the composer.

        Args:
            skill_locator: Locator for the configured roots. A copy without
                the project root is used for the lookup.
            orientation_skill: Identifier of the orientation skill.
        """
        self._locator = skill_locator.without_project()
        self._orientation_skill = orientation_skill

    @property
    def orientation_skill(self) -> str:
        return self._orientation_skill

    def _preamble(self) -> str:
        return (
            "You have superpowers.\n\n"
            f"**IMPORTANT: The {self._orientation_skill} skill content is included "
            "below. It is ALREADY LOADED - you are currently following it. "
            f'Do NOT use the {constants.USE_SKILL_TOOL} tool to load "{self._orientation_skill}" '
            f"- that would be redundant. Use {constants.USE_SKILL_TOOL} only for OTHER skills.**"
        )

    def compose(self, compact: bool = False) -> str | None:
        """
        Build the bootstrap payload.

        Args:
            compact: Use the terse tool mapping instead of the full one.

        Returns:
            The payload, or None when the orientation skill is not installed.

        Raises:
            OSError: If the orientation skill exists but cannot be read.
        """
        resolved = self._locator.resolve(self._orientation_skill)
        if resolved is None:
            return None

        content = frontmatter.strip_metadata(
            resolved.skill_file.read_text(encoding="utf-8")
        )

        if compact:
            tool_mapping = _COMPACT_TOOL_MAPPING
        else:
            tool_mapping = _full_tool_mapping(self._locator.roots.personal)

        tag = constants.BOOTSTRAP_TAG
        return f"""<{tag}>
{self._preamble()}

{content}

{tool_mapping}
</{tag}>"""
