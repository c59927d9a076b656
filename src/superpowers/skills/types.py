"""
Value types shared by the skill locator, catalog scanner and loader.

All types are immutable. None of them are cached between calls: every
lookup re-reads the filesystem so catalog changes are visible without
a restart.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic


class SourceType(str, _enum.Enum):
    """Which skill root a skill was found in."""

    PROJECT = "project"
    """Project-local skills (<cwd>/.pi/skills)."""

    PERSONAL = "personal"
    """Personal skills (<config_dir>/skills)."""

    SUPERPOWERS = "superpowers"
    """The bundled superpowers library."""

    @property
    def namespace(self) -> str:
        """Prefix used when displaying a skill from this source."""
        if self is SourceType.PERSONAL:
            return ""
        return f"{self.value}:"


class SkillMetadata(_pydantic.BaseModel):
    """
    Metadata extracted from a skill document's header block.

    Fields missing from the header stay None.
    """

    model_config = _pydantic.ConfigDict(frozen=True)

    name: str | None = None
    description: str | None = None


@_dataclasses.dataclass(frozen=True)
class SkillRoot:
    """A directory searched for skills, tagged with its source."""

    path: _pathlib.Path
    source_type: SourceType


@_dataclasses.dataclass(frozen=True)
class SkillRoots:
    """
    The three skill roots, resolved once at startup.

    Iteration yields them in priority order (project, personal,
    superpowers).
    """

    project: _pathlib.Path
    personal: _pathlib.Path
    superpowers: _pathlib.Path

    def get(self, source_type: SourceType) -> SkillRoot:
        """Get the root for a source type."""
        path: _pathlib.Path = getattr(self, source_type.value)
        return SkillRoot(path=path, source_type=source_type)

    def __iter__(self) -> _typing.Iterator[SkillRoot]:
        for source_type in SourceType:
            yield self.get(source_type)


@_dataclasses.dataclass(frozen=True)
class ResolvedSkill:
    """Result of a successful skill lookup."""

    skill_file: _pathlib.Path
    """Absolute path to the skill's SKILL.md."""

    source_type: SourceType
    """Root the skill was found in."""

    skill_path: str
    """Identifier used to find it, with the namespace stripped."""

    @property
    def directory(self) -> _pathlib.Path:
        """Skill directory (holds supporting files)."""
        return self.skill_file.parent


@_dataclasses.dataclass(frozen=True)
class SkillListing:
    """One entry of a catalog scan."""

    name: str
    path: _pathlib.Path
    description: str | None
    source_type: SourceType

    @property
    def qualified_name(self) -> str:
        """Name as the user would type it (e.g. 'superpowers:brainstorming')."""
        return f"{self.source_type.namespace}{self.name}"

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "qualified_name": self.qualified_name,
            "path": str(self.path),
            "description": self.description,
            "source": self.source_type.value,
        }
