"""
Host commands: skill listing and update check.

Commands return a Notification; the host decides how to display it.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import pathlib as _pathlib
import typing as _typing

import superpowers.constants as constants
import superpowers.skills.catalog as catalog
import superpowers.skills.types as types
import superpowers.skills.updates as updates

NotificationLevel = _typing.Literal["info", "warning", "error"]


@_dataclasses.dataclass(frozen=True)
class Notification:
    """User-facing message produced by a command."""

    message: str
    level: NotificationLevel = "info"


@_dataclasses.dataclass(frozen=True)
class Command:
    """A named command the host exposes to the user."""

    name: str
    description: str
    handler: _typing.Callable[[], _typing.Awaitable[Notification]]

    async def run(self) -> Notification:
        return await self.handler()


def format_listings(listings: _typing.Sequence[types.SkillListing]) -> str:
    """
    Format catalog listings for display.

    Each skill shows its qualified name, its description (if any) and its
    directory, in the order given.
    """
    lines = ["Available skills:", ""]
    for listing in listings:
        lines.append(listing.qualified_name)
        if listing.description:
            lines.append(f"  {listing.description}")
        lines.append(f"  Directory: {listing.path}")
        lines.append("")
    return "\n".join(lines)


def find_skills(
    roots: types.SkillRoots,
    max_depth: int = constants.DEFAULT_SCAN_DEPTH,
) -> Notification:
    """List every skill in every root, highest priority root first."""
    listings = catalog.scan_roots(roots, max_depth)
    if not listings:
        return Notification(
            f"No skills found. Install superpowers skills to {roots.superpowers}/ "
            f"or add personal skills to {roots.personal}/"
        )
    return Notification(format_listings(listings))


def check_for_updates(repo_dir: _pathlib.Path) -> Notification:
    """Report whether the superpowers checkout has upstream changes."""
    if updates.has_updates(repo_dir):
        return Notification(
            "⚠️  Superpowers update available!\n"
            f"To update, run: cd {repo_dir} && git pull",
            level="warning",
        )
    return Notification("✓ Superpowers is up to date")
