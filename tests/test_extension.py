"""
Tests for the host adapter.

Tests verify that:
- the extension registers one tool and two commands under the host's names
- session start injects the full bootstrap and compaction the compact one
- a missing or unreadable orientation skill never breaks the session
"""

import logging as _logging
import pathlib as _pathlib
import threading as _threading
import unittest.mock as _mock

import pytest as _pytest

import superpowers.config as config
import superpowers.extension as extension
import superpowers.hooks as hooks
import superpowers.skills.updates as updates
import tests.conftest as conftest

ORIENTATION_BODY = "# Using Superpowers\n\nCheck skills first.\n"


@_pytest.fixture
def settings(isolated_env, tmp_path: _pathlib.Path) -> config.Settings:
    with isolated_env:
        return config.Settings(
            config_dir=tmp_path / "config",
            project_root=tmp_path / "project",
            superpowers_dir=tmp_path / "superpowers" / "skills",
        )


@_pytest.fixture
def ext(settings: config.Settings) -> extension.SuperpowersExtension:
    return extension.SuperpowersExtension(settings)


def _context(tmp_path: _pathlib.Path, event: hooks.HookEvent) -> hooks.HookContext:
    return hooks.HookContext(event=event, session_id="session", cwd=tmp_path)


class TestRegistration:
    """Tests for the extension's host surface."""

    def test_roots_follow_settings(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
    ) -> None:
        assert ext.roots.project == tmp_path / "project" / ".pi" / "skills"
        assert ext.roots.personal == tmp_path / "config" / "skills"
        assert ext.roots.superpowers == tmp_path / "superpowers" / "skills"

    def test_tools(self, ext: extension.SuperpowersExtension) -> None:
        assert [tool.name for tool in ext.tools()] == ["use_skill"]

    def test_commands(self, ext: extension.SuperpowersExtension) -> None:
        assert [command.name for command in ext.commands()] == [
            "find_skills",
            "superpowers_update",
        ]

    def test_install_hooks(self, ext: extension.SuperpowersExtension) -> None:
        manager = hooks.HookManager()
        ext.install_hooks(manager)
        assert manager.has_hooks_for_event(hooks.HookEvent.SESSION_START)
        assert manager.has_hooks_for_event(hooks.HookEvent.PRE_COMPACT)


class TestCommandsThroughExtension:
    """Tests for commands bound to the extension's roots."""

    @_pytest.mark.asyncio
    async def test_find_skills(self, ext: extension.SuperpowersExtension) -> None:
        conftest.write_skill(ext.roots.superpowers, "brainstorming", name="brainstorming")

        find_skills = ext.commands()[0]
        notification = await find_skills.run()

        assert "superpowers:brainstorming" in notification.message

    @_pytest.mark.asyncio
    async def test_update_uses_library_parent(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
    ) -> None:
        """The update check runs against the checkout holding the library."""
        with _mock.patch.object(updates, "has_updates", return_value=False) as has_updates:
            notification = await ext.commands()[1].run()

        has_updates.assert_called_once_with(tmp_path / "superpowers")
        assert notification.message == "✓ Superpowers is up to date"

    @_pytest.mark.asyncio
    async def test_update_runs_off_event_loop(
        self,
        ext: extension.SuperpowersExtension,
    ) -> None:
        """The blocking git check runs in a worker thread and is awaited."""
        loop_thread = _threading.get_ident()
        check_threads: list[int] = []

        def has_updates(repo_dir: _pathlib.Path) -> bool:
            check_threads.append(_threading.get_ident())
            return True

        with _mock.patch.object(updates, "has_updates", side_effect=has_updates):
            notification = await ext.commands()[1].run()

        assert len(check_threads) == 1
        assert check_threads[0] != loop_thread
        assert notification.level == "warning"

    def test_list_skills(self, ext: extension.SuperpowersExtension) -> None:
        conftest.write_skill(ext.roots.personal, "mine")
        assert [listing.qualified_name for listing in ext.list_skills()] == ["mine"]


class TestBootstrapHooks:
    """Tests for the lifecycle handlers."""

    @_pytest.mark.asyncio
    async def test_session_start_injects_full_bootstrap(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
    ) -> None:
        conftest.write_skill(ext.roots.superpowers, "using-superpowers", body=ORIENTATION_BODY)
        manager = hooks.HookManager()
        ext.install_hooks(manager)

        event = hooks.HookEvent.SESSION_START
        result = await manager.dispatch(event, _context(tmp_path, event))

        assert result.inject_message == ext.bootstrap()
        assert result.inject_message is not None
        assert ORIENTATION_BODY in result.inject_message

    @_pytest.mark.asyncio
    async def test_before_compact_injects_compact_bootstrap(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
    ) -> None:
        conftest.write_skill(ext.roots.superpowers, "using-superpowers", body=ORIENTATION_BODY)

        result = await ext.on_before_compact(
            _context(tmp_path, hooks.HookEvent.PRE_COMPACT)
        )

        assert result.inject_message == ext.bootstrap(compact=True)
        assert result.inject_message != ext.bootstrap()

    @_pytest.mark.asyncio
    async def test_missing_orientation_skill_injects_nothing(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
    ) -> None:
        """No orientation skill: the session proceeds silently."""
        result = await ext.on_session_start(_context(tmp_path, hooks.HookEvent.SESSION_START))
        assert result.inject_message is None

    @_pytest.mark.asyncio
    async def test_project_orientation_skill_is_ignored(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
    ) -> None:
        conftest.write_skill(ext.roots.project, "using-superpowers", body=ORIENTATION_BODY)

        result = await ext.on_session_start(_context(tmp_path, hooks.HookEvent.SESSION_START))

        assert result.inject_message is None

    @_pytest.mark.asyncio
    async def test_read_failure_is_logged(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
        caplog: _pytest.LogCaptureFixture,
    ) -> None:
        """An unreadable orientation skill logs a warning and injects nothing."""
        conftest.write_skill(ext.roots.superpowers, "using-superpowers")

        with (
            _mock.patch.object(
                _pathlib.Path, "read_text", side_effect=PermissionError("denied")
            ),
            caplog.at_level(_logging.WARNING, logger="superpowers.extension"),
        ):
            result = await ext.on_session_start(
                _context(tmp_path, hooks.HookEvent.SESSION_START)
            )

        assert result.inject_message is None
        assert "Failed to inject superpowers bootstrap" in caplog.text

    @_pytest.mark.asyncio
    async def test_undecodable_orientation_skill_is_logged(
        self,
        ext: extension.SuperpowersExtension,
        tmp_path: _pathlib.Path,
        caplog: _pytest.LogCaptureFixture,
    ) -> None:
        """An orientation skill that is not UTF-8 is contained by the handler."""
        skill_dir = conftest.write_skill(ext.roots.superpowers, "using-superpowers")
        (skill_dir / "SKILL.md").write_bytes(b"# Title\n\xff\xfe broken\n")

        with caplog.at_level(_logging.WARNING, logger="superpowers.extension"):
            result = await ext.on_before_compact(
                _context(tmp_path, hooks.HookEvent.PRE_COMPACT)
            )

        assert result.inject_message is None
        assert "Failed to inject compact bootstrap" in caplog.text
