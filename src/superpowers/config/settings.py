"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables (PI_CONFIG_DIR, SUPERPOWERS_*)
3. YAML config file: <config_dir>/superpowers.yaml
4. Built-in defaults (lowest)

Settings are resolved once at startup; the skill core only ever sees the
resulting ``SkillRoots``.
"""

from __future__ import annotations

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import superpowers.constants as constants
import superpowers.skills.types as skill_types

CONFIG_FILE_NAME = "superpowers.yaml"


def get_default_config_dir() -> _pathlib.Path:
    """Get the config directory from PI_CONFIG_DIR or the default location."""
    env_dir = _os.environ.get(constants.CONFIG_DIR_ENV_VAR)
    return _pathlib.Path(env_dir or constants.DEFAULT_CONFIG_DIR).expanduser()


def get_bundled_library_path() -> _pathlib.Path:
    """Get the path to the superpowers skill library shipped with the package."""
    return _pathlib.Path(__file__).resolve().parent.parent / "library"


def get_project_skills_path(project_root: _pathlib.Path) -> _pathlib.Path:
    """Get the path to project-local skills."""
    return project_root / constants.PROJECT_SKILLS_SUBDIR


def get_personal_skills_path(config_dir: _pathlib.Path) -> _pathlib.Path:
    """Get the path to personal skills."""
    return config_dir / constants.PERSONAL_SKILLS_SUBDIR


class Settings(_pydantic_settings.BaseSettings):
    """
    Superpowers configuration settings.

    The config directory follows the host's PI_CONFIG_DIR variable; other
    fields can be set with a SUPERPOWERS_ prefix (e.g. SUPERPOWERS_SCAN_DEPTH=2)
    or in <config_dir>/superpowers.yaml.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="SUPERPOWERS_",
        populate_by_name=True,
        extra="ignore",
        validate_default=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) (highest)
        2. env_settings (PI_CONFIG_DIR, SUPERPOWERS_* env vars)
        3. yaml_settings (<config_dir>/superpowers.yaml)
        4. (defaults via Field definitions) (lowest)
        """
        yaml_file = get_default_config_dir() / CONFIG_FILE_NAME

        return (
            init_settings,
            env_settings,
            _pydantic_settings.YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
        )

    config_dir: _pathlib.Path = _pydantic.Field(
        default_factory=get_default_config_dir,
        validation_alias=_pydantic.AliasChoices(constants.CONFIG_DIR_ENV_VAR),
        description="Agent config directory (holds personal skills)",
    )

    project_root: _pathlib.Path = _pydantic.Field(
        default_factory=_pathlib.Path.cwd,
        description="Project root (holds .pi/skills)",
    )

    superpowers_dir: _pathlib.Path = _pydantic.Field(
        default_factory=get_bundled_library_path,
        description="Superpowers skill library directory",
    )

    repo_dir: _pathlib.Path | None = _pydantic.Field(
        default=None,
        description="Checkout queried by the update check (default: parent of superpowers_dir)",
    )

    scan_depth: int = _pydantic.Field(
        default=constants.DEFAULT_SCAN_DEPTH,
        ge=0,
        description="Directory levels below each root examined when listing skills",
    )

    orientation_skill: str = _pydantic.Field(
        default=constants.ORIENTATION_SKILL,
        min_length=1,
        description="Skill injected as the session bootstrap",
    )

    @_pydantic.field_validator("config_dir", mode="before")
    @classmethod
    def _empty_config_dir_uses_default(cls, value: _typing.Any) -> _typing.Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return constants.DEFAULT_CONFIG_DIR
        return value

    @_pydantic.field_validator("config_dir", "project_root", "superpowers_dir", "repo_dir")
    @classmethod
    def _expand_path(cls, value: _pathlib.Path | None) -> _pathlib.Path | None:
        if value is None:
            return None
        return value.expanduser().absolute()

    @property
    def project_skills_dir(self) -> _pathlib.Path:
        return get_project_skills_path(self.project_root)

    @property
    def personal_skills_dir(self) -> _pathlib.Path:
        return get_personal_skills_path(self.config_dir)

    @property
    def update_repo_dir(self) -> _pathlib.Path:
        """Checkout used by the update check."""
        if self.repo_dir is not None:
            return self.repo_dir
        return self.superpowers_dir.parent

    def skill_roots(self) -> skill_types.SkillRoots:
        """Get the skill roots for the core."""
        return skill_types.SkillRoots(
            project=self.project_skills_dir,
            personal=self.personal_skills_dir,
            superpowers=self.superpowers_dir,
        )
