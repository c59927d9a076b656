"""
Configuration module for superpowers.

Uses pydantic-settings for environment variable and YAML loading.
"""

from superpowers.config.settings import (
    Settings,
    get_bundled_library_path,
    get_default_config_dir,
    get_personal_skills_path,
    get_project_skills_path,
)

__all__ = [
    "Settings",
    "get_bundled_library_path",
    "get_default_config_dir",
    "get_personal_skills_path",
    "get_project_skills_path",
]
