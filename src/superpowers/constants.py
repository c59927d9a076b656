"""
Shared constants for superpowers.

This module provides a single source of truth for values used across
the locator, scanner, bootstrap and host adapter.
"""

# Skill layout
SKILL_FILE_NAME = "SKILL.md"
"""Canonical content file inside every skill directory."""

PROJECT_SKILLS_SUBDIR = ".pi/skills"
"""Project skills location, relative to the project root."""

PERSONAL_SKILLS_SUBDIR = "skills"
"""Personal skills location, relative to the config directory."""

DEFAULT_CONFIG_DIR = "~/.pi/agent"
"""Config directory used when PI_CONFIG_DIR is not set."""

CONFIG_DIR_ENV_VAR = "PI_CONFIG_DIR"
"""Environment variable overriding the config directory."""

# Namespaces
PROJECT_NAMESPACE = "project:"
"""Identifier prefix restricting lookup to project skills."""

SUPERPOWERS_NAMESPACE = "superpowers:"
"""Identifier prefix restricting lookup to the bundled library."""

# Discovery
DEFAULT_SCAN_DEPTH = 3
"""How many directory levels below a root the catalog scanner examines."""

ORIENTATION_SKILL = "using-superpowers"
"""Skill whose body is injected as the session bootstrap."""

# Host-facing names
USE_SKILL_TOOL = "use_skill"
FIND_SKILLS_COMMAND = "find_skills"
UPDATE_COMMAND = "superpowers_update"

BOOTSTRAP_TAG = "EXTREMELY_IMPORTANT"
"""Sentinel tag wrapping the bootstrap payload."""

UPDATE_CHECK_TIMEOUT_SECONDS = 3.0
"""Upper bound on each git call made by the update check."""
