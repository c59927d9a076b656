"""
Shared pytest fixtures for superpowers tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import unittest.mock as _mock

import pytest as _pytest

import superpowers.skills.types as types

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "PI_CONFIG_DIR",
    "SUPERPOWERS_SCAN_DEPTH",
    "SUPERPOWERS_ORIENTATION_SKILL",
    "SUPERPOWERS_SUPERPOWERS_DIR",
    "SUPERPOWERS_REPO_DIR",
    "SUPERPOWERS_PROJECT_ROOT",
]


def write_skill(
    root: _pathlib.Path,
    skill_path: str,
    *,
    name: str | None = None,
    description: str | None = None,
    body: str = "# Skill\n\nInstructions.\n",
) -> _pathlib.Path:
    """
    Create a skill directory with a SKILL.md.

    A metadata block is written only when name or description is given.

    Returns:
        The skill directory.
    """
    skill_dir = root / skill_path
    skill_dir.mkdir(parents=True, exist_ok=True)

    header = ""
    if name is not None or description is not None:
        lines = ["---"]
        if name is not None:
            lines.append(f"name: {name}")
        if description is not None:
            lines.append(f"description: {description}")
        lines.append("---")
        header = "\n".join(lines) + "\n"

    (skill_dir / "SKILL.md").write_text(header + body, encoding="utf-8")
    return skill_dir


@_pytest.fixture
def skill_roots(tmp_path: _pathlib.Path) -> types.SkillRoots:
    """
    Three skill roots below tmp_path.

    The directories are not created; tests create the ones they need so
    missing roots are exercised too.
    """
    return types.SkillRoots(
        project=tmp_path / "project" / ".pi" / "skills",
        personal=tmp_path / "config" / "skills",
        superpowers=tmp_path / "superpowers-lib",
    )


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with superpowers-related keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)
