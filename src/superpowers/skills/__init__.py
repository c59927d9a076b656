"""
Skill layering for superpowers.

Skills are directories containing a SKILL.md document. They are looked up
in three roots, highest priority first:
1. Project skills - <cwd>/.pi/skills/ (``project:`` namespace)
2. Personal skills - <config_dir>/skills/ (no namespace)
3. Superpowers skills - the bundled library (``superpowers:`` namespace)

A skill in a higher priority root shadows one of the same name below it.
"""

from superpowers.skills.bootstrap import BootstrapComposer
from superpowers.skills.catalog import iter_skill_dirs, scan, scan_roots
from superpowers.skills.frontmatter import (
    extract_metadata,
    parse_metadata,
    split_frontmatter,
    strip_metadata,
)
from superpowers.skills.loader import (
    LoadedSkill,
    SkillLoader,
    SkillNotFoundError,
    read_skill,
)
from superpowers.skills.locator import (
    RootLookup,
    SkillLocator,
    parse_identifier,
    resolve,
    strip_namespace,
)
from superpowers.skills.types import (
    ResolvedSkill,
    SkillListing,
    SkillMetadata,
    SkillRoot,
    SkillRoots,
    SourceType,
)
from superpowers.skills.updates import has_updates

__all__ = [
    # Types
    "ResolvedSkill",
    "SkillListing",
    "SkillMetadata",
    "SkillRoot",
    "SkillRoots",
    "SourceType",
    # Header parsing
    "extract_metadata",
    "parse_metadata",
    "split_frontmatter",
    "strip_metadata",
    # Resolution
    "RootLookup",
    "SkillLocator",
    "parse_identifier",
    "resolve",
    "strip_namespace",
    # Catalog
    "iter_skill_dirs",
    "scan",
    "scan_roots",
    # Loading
    "LoadedSkill",
    "SkillLoader",
    "SkillNotFoundError",
    "read_skill",
    # Bootstrap and updates
    "BootstrapComposer",
    "has_updates",
]
