"""
Skill resolution across the layered skill roots.

Identifiers are resolved against an ordered list of per-root lookups; the
first root that has the skill wins, so more local definitions shadow more
global ones of the same name:

    brainstorming               project -> personal -> superpowers
    project:brainstorming       project only
    superpowers:brainstorming   superpowers only

Nested identifiers such as ``testing/tdd`` map directly onto nested
directories below a root.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib

import superpowers.constants as constants
import superpowers.skills.types as types

_logger = _logging.getLogger(__name__)

_NAMESPACES: tuple[tuple[str, types.SourceType], ...] = (
    (constants.PROJECT_NAMESPACE, types.SourceType.PROJECT),
    (constants.SUPERPOWERS_NAMESPACE, types.SourceType.SUPERPOWERS),
)


def parse_identifier(identifier: str) -> tuple[types.SourceType | None, str]:
    """
    Split an identifier into its forced source and bare skill path.

    Surrounding whitespace is ignored. The first namespace prefix decides the
    forced source; any further leading prefixes are stripped too, so
    stripping is idempotent.

    Returns:
        Tuple of (forced source or None, skill path).
    """
    name = identifier.strip()
    forced: types.SourceType | None = None

    stripped = True
    while stripped:
        stripped = False
        for prefix, source_type in _NAMESPACES:
            if name.startswith(prefix):
                if forced is None:
                    forced = source_type
                name = name[len(prefix) :].strip()
                stripped = True
                break

    return forced, name


def strip_namespace(identifier: str) -> str:
    """Return the identifier without any namespace prefix."""
    return parse_identifier(identifier)[1]


def _is_valid_skill_path(skill_path: str) -> bool:
    """Reject empty paths and paths that would leave the root."""
    if not skill_path:
        return False
    pure = _pathlib.PurePosixPath(skill_path)
    if pure.is_absolute() or _pathlib.PurePath(skill_path).is_absolute():
        return False
    return ".." not in pure.parts


class RootLookup:
    """Looks a skill path up in a single root."""

    def __init__(self, root: types.SkillRoot) -> None:
        self._root = root

    @property
    def source_type(self) -> types.SourceType:
        return self._root.source_type

    @property
    def root(self) -> _pathlib.Path:
        return self._root.path

    def __call__(self, skill_path: str) -> types.ResolvedSkill | None:
        # A missing root simply has no skill file
        skill_file = self._root.path / skill_path / constants.SKILL_FILE_NAME
        try:
            exists = skill_file.is_file()
        except (OSError, ValueError) as e:
            _logger.debug("Cannot check %s: %s", skill_file, e)
            return None
        if not exists:
            return None
        return types.ResolvedSkill(
            skill_file=skill_file.absolute(),
            source_type=self._root.source_type,
            skill_path=skill_path,
        )

    def __repr__(self) -> str:
        return f"RootLookup({self._root.source_type.value}, {str(self._root.path)!r})"


class SkillLocator:
    """
    Resolves skill identifiers against the layered roots.

    The precedence rule lives entirely in ``lookups_for``: it returns the
    ordered lookups to try for a given identifier namespace.
    """

    def __init__(
        self,
        roots: types.SkillRoots,
        *,
        include_project: bool = True,
    ) -> None:
        """
        Initialize the locator.

        Args:
            roots: The resolved skill roots.
            include_project: Whether the project root takes part in lookups.
                The bootstrap uses a locator without it so project skills
                never replace the orientation document.
        """
        self._roots = roots
        self._include_project = include_project

    @property
    def roots(self) -> types.SkillRoots:
        return self._roots

    def without_project(self) -> SkillLocator:
        """Get a locator that never consults the project root."""
        return SkillLocator(self._roots, include_project=False)

    def lookups_for(self, forced: types.SourceType | None) -> list[RootLookup]:
        """
        Get the ordered lookups for an identifier namespace.

        Args:
            forced: Source forced by a namespace prefix, or None.

        Returns:
            Lookups to try, highest priority first.
        """
        if forced is not None:
            sources = [forced]
        else:
            sources = list(types.SourceType)

        if not self._include_project:
            sources = [s for s in sources if s is not types.SourceType.PROJECT]

        return [RootLookup(self._roots.get(source)) for source in sources]

    def resolve(self, identifier: str) -> types.ResolvedSkill | None:
        """
        Resolve an identifier to the highest priority matching skill.

        Args:
            identifier: Skill identifier, optionally namespaced.

        Returns:
            The resolved skill, or None if no root has it.
        """
        forced, skill_path = parse_identifier(identifier)
        if not _is_valid_skill_path(skill_path):
            _logger.debug("Ignoring invalid skill identifier %r", identifier)
            return None

        for lookup in self.lookups_for(forced):
            resolved = lookup(skill_path)
            if resolved is not None:
                return resolved

        return None


def resolve(
    identifier: str,
    roots: types.SkillRoots,
) -> types.ResolvedSkill | None:
    """
    Resolve an identifier with the standard precedence.

    Args:
        identifier: Skill identifier, optionally namespaced.
        roots: The skill roots to search.

    Returns:
        The resolved skill, or None if not found.
    """
    return SkillLocator(roots).resolve(identifier)
