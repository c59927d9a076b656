"""
Skill loading for tool consumption.

Resolves an identifier, reads the skill document, and renders it with a
short header so the model knows where supporting files live.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import pathlib as _pathlib
import typing as _typing

import superpowers.skills.frontmatter as frontmatter
import superpowers.skills.locator as locator
import superpowers.skills.types as types

HEADER_RULE = "# " + "=" * 44


class SkillNotFoundError(LookupError):
    """Raised when an identifier matches no skill root."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f'Skill "{identifier}" not found.')


@_dataclasses.dataclass(frozen=True)
class LoadedSkill:
    """A resolved skill together with its parsed document."""

    resolved: types.ResolvedSkill
    metadata: types.SkillMetadata
    body: str

    @property
    def directory(self) -> _pathlib.Path:
        """Directory holding the skill's supporting files."""
        return self.resolved.directory

    def render(self, requested_name: str) -> str:
        """
        Render the skill for the model.

        Args:
            requested_name: Identifier as the caller gave it; used as the
                title when the document has no name.
        """
        header = "\n".join(
            [
                f"# {self.metadata.name or requested_name}",
                f"# {self.metadata.description or ''}",
                f"# Supporting tools and docs are in {self.directory}",
                HEADER_RULE,
            ]
        )
        return f"{header}\n\n{self.body}"

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.metadata.name,
            "description": self.metadata.description,
            "path": str(self.directory),
            "skill_file": str(self.resolved.skill_file),
            "source": self.resolved.source_type.value,
            "skill_path": self.resolved.skill_path,
        }


def read_skill(resolved: types.ResolvedSkill) -> LoadedSkill:
    """
    Read and parse a resolved skill's document.

    Raises:
        OSError: If the file cannot be read.
    """
    content = resolved.skill_file.read_text(encoding="utf-8")
    return LoadedSkill(
        resolved=resolved,
        metadata=frontmatter.parse_metadata(content),
        body=frontmatter.strip_metadata(content),
    )


class SkillLoader:
    """Loads skills by identifier through a locator."""

    def __init__(self, skill_locator: locator.SkillLocator) -> None:
        self._locator = skill_locator

    def load(self, identifier: str) -> LoadedSkill:
        """
        Resolve and read a skill.

        Raises:
            SkillNotFoundError: If no root has the skill.
            OSError: If the skill file cannot be read.
        """
        resolved = self._locator.resolve(identifier)
        if resolved is None:
            raise SkillNotFoundError(identifier)
        return read_skill(resolved)
