"""
Host adapter for the superpowers skill core.

SuperpowersExtension wires the core (locator, catalog, bootstrap) to the
host's extension points: the use_skill tool, the find_skills and
superpowers_update commands, and the session_start / session_before_compact
lifecycle events. The core itself knows nothing about the host.
"""

from __future__ import annotations

import asyncio as _asyncio
import logging as _logging

import superpowers.commands as commands
import superpowers.config as config
import superpowers.constants as constants
import superpowers.hooks as hooks
import superpowers.skills as skills
import superpowers.tools as tools

_logger = _logging.getLogger(__name__)


class SuperpowersExtension:
    """
    The superpowers extension, bound to one set of settings.

    Directory roots are resolved once, when the extension is created.
    Everything else re-reads the filesystem on each call.
    """

    def __init__(self, settings: config.Settings) -> None:
        """
        Initialize the extension.

        Args:
            settings: Resolved settings (roots, scan depth, orientation skill).
        """
        self._settings = settings
        self._roots = settings.skill_roots()
        self._locator = skills.SkillLocator(self._roots)
        self._loader = skills.SkillLoader(self._locator)
        self._composer = skills.BootstrapComposer(
            self._locator,
            orientation_skill=settings.orientation_skill,
        )

    @classmethod
    def from_environment(cls) -> SuperpowersExtension:
        """Create an extension from environment and config-file settings."""
        return cls(config.Settings())

    @property
    def settings(self) -> config.Settings:
        return self._settings

    @property
    def roots(self) -> skills.SkillRoots:
        return self._roots

    @property
    def locator(self) -> skills.SkillLocator:
        return self._locator

    @property
    def loader(self) -> skills.SkillLoader:
        return self._loader

    # Core operations
    def bootstrap(self, compact: bool = False) -> str | None:
        """Build the bootstrap payload (None when the orientation skill is missing)."""
        return self._composer.compose(compact)

    def list_skills(self) -> list[skills.SkillListing]:
        """List skills in all roots, highest priority root first."""
        return skills.scan_roots(self._roots, self._settings.scan_depth)

    # Host extension points
    def tools(self) -> list[tools.Tool]:
        """Tools to register with the host."""
        return [tools.UseSkillTool(self._loader)]

    def commands(self) -> list[commands.Command]:
        """Commands to register with the host."""

        async def find_skills() -> commands.Notification:
            return commands.find_skills(self._roots, self._settings.scan_depth)

        async def check_updates() -> commands.Notification:
            # has_updates blocks on git; keep it off the event loop
            return await _asyncio.to_thread(
                commands.check_for_updates,
                self._settings.update_repo_dir,
            )

        return [
            commands.Command(
                name=constants.FIND_SKILLS_COMMAND,
                description=(
                    "List all available skills in the project, personal, "
                    "and superpowers skill libraries"
                ),
                handler=find_skills,
            ),
            commands.Command(
                name=constants.UPDATE_COMMAND,
                description="Check for superpowers updates",
                handler=check_updates,
            ),
        ]

    def install_hooks(self, manager: hooks.HookManager) -> None:
        """Register the bootstrap handlers with a hook manager."""
        manager.register(hooks.HookEvent.SESSION_START, self.on_session_start)
        manager.register(hooks.HookEvent.PRE_COMPACT, self.on_before_compact)

    async def on_session_start(self, context: hooks.HookContext) -> hooks.HookResult:
        """Inject the full bootstrap when a session starts."""
        return self._inject_bootstrap(compact=False)

    async def on_before_compact(self, context: hooks.HookContext) -> hooks.HookResult:
        """Re-inject the compact bootstrap before the context is compacted."""
        return self._inject_bootstrap(compact=True)

    def _inject_bootstrap(self, *, compact: bool) -> hooks.HookResult:
        try:
            payload = self._composer.compose(compact)
        except (OSError, UnicodeDecodeError) as e:
            kind = "compact bootstrap" if compact else "superpowers bootstrap"
            _logger.warning("Failed to inject %s: %s", kind, e)
            return hooks.HookResult.continue_()

        if payload is None:
            _logger.debug("Orientation skill not found; nothing to inject")
            return hooks.HookResult.continue_()
        return hooks.HookResult.inject(payload)
