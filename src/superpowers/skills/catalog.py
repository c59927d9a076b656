"""
Catalog scanning for skill listings.

Walks a skill root up to a bounded depth and lists every skill directory
found. A directory is a skill when it directly contains SKILL.md; skill
directories are not descended into, so their scripts/ or references/
subdirectories never produce nested skills.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import superpowers.constants as constants
import superpowers.skills.frontmatter as frontmatter
import superpowers.skills.types as types

_logger = _logging.getLogger(__name__)


def _child_directories(directory: _pathlib.Path) -> list[_pathlib.Path]:
    """List subdirectories in lexicographic order; unreadable -> none."""
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        _logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []
    return [entry for entry in entries if entry.is_dir()]


def _make_listing(
    skill_dir: _pathlib.Path,
    source_type: types.SourceType,
) -> types.SkillListing:
    skill_file = skill_dir / constants.SKILL_FILE_NAME
    try:
        metadata = frontmatter.extract_metadata(skill_file)
    except (OSError, UnicodeDecodeError) as e:
        _logger.warning("Could not read skill metadata from %s: %s", skill_file, e)
        metadata = types.SkillMetadata()

    return types.SkillListing(
        name=metadata.name or skill_dir.name,
        path=skill_dir,
        description=metadata.description,
        source_type=source_type,
    )


def iter_skill_dirs(
    root_dir: _pathlib.Path,
    max_depth: int = constants.DEFAULT_SCAN_DEPTH,
) -> _typing.Iterator[_pathlib.Path]:
    """
    Yield skill directories below a root, depth first.

    A directory ``k`` levels below ``root_dir`` is examined only when
    ``k <= max_depth``. Children are visited in lexicographic order.
    """
    if not root_dir.is_dir():
        return

    def walk(directory: _pathlib.Path, depth: int) -> _typing.Iterator[_pathlib.Path]:
        for child in _child_directories(directory):
            if (child / constants.SKILL_FILE_NAME).is_file():
                yield child
            elif depth < max_depth:
                yield from walk(child, depth + 1)

    if max_depth >= 1:
        yield from walk(root_dir, 1)


def scan(
    root_dir: _pathlib.Path,
    source_type: types.SourceType,
    max_depth: int = constants.DEFAULT_SCAN_DEPTH,
) -> list[types.SkillListing]:
    """
    List all skills below a root.

    Args:
        root_dir: Root directory to scan. A missing root yields no skills.
        source_type: Source annotation for every listing.
        max_depth: Deepest level below the root that is examined.

    Returns:
        Listings in traversal order.
    """
    return [
        _make_listing(skill_dir, source_type)
        for skill_dir in iter_skill_dirs(root_dir, max_depth)
    ]


def scan_roots(
    roots: _typing.Iterable[types.SkillRoot],
    max_depth: int = constants.DEFAULT_SCAN_DEPTH,
) -> list[types.SkillListing]:
    """
    Scan several roots and concatenate the results in root order.

    Skills present in more than one root appear once per root; nothing is
    deduplicated.
    """
    listings: list[types.SkillListing] = []
    for root in roots:
        listings.extend(scan(root.path, root.source_type, max_depth))
    return listings
