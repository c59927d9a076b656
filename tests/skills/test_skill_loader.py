"""
Tests for loading and rendering skills.
"""

import pytest as _pytest

import superpowers.skills.loader as loader
import superpowers.skills.locator as locator
import superpowers.skills.types as types
import tests.conftest as conftest


@_pytest.fixture
def skill_loader(skill_roots: types.SkillRoots) -> loader.SkillLoader:
    return loader.SkillLoader(locator.SkillLocator(skill_roots))


class TestSkillLoader:
    """Tests for SkillLoader.load."""

    def test_load_strips_metadata(
        self,
        skill_roots: types.SkillRoots,
        skill_loader: loader.SkillLoader,
    ) -> None:
        """The body excludes the metadata block."""
        conftest.write_skill(
            skill_roots.superpowers,
            "brainstorming",
            name="brainstorming",
            description="Refine ideas",
            body="# Brainstorming\n\nAsk questions.\n",
        )

        loaded = skill_loader.load("brainstorming")

        assert loaded.metadata.name == "brainstorming"
        assert loaded.metadata.description == "Refine ideas"
        assert loaded.body == "# Brainstorming\n\nAsk questions.\n"
        assert loaded.directory == (skill_roots.superpowers / "brainstorming").absolute()

    def test_not_found_raises(self, skill_loader: loader.SkillLoader) -> None:
        """Unknown identifiers raise SkillNotFoundError with the identifier."""
        with _pytest.raises(loader.SkillNotFoundError) as exc_info:
            skill_loader.load("missing")

        assert exc_info.value.identifier == "missing"
        assert str(exc_info.value) == 'Skill "missing" not found.'

    def test_not_found_is_lookup_error(self, skill_loader: loader.SkillLoader) -> None:
        """Callers can catch the standard LookupError."""
        with _pytest.raises(LookupError):
            skill_loader.load("project:missing")


class TestRender:
    """Tests for LoadedSkill.render."""

    def test_header_layout(
        self,
        skill_roots: types.SkillRoots,
        skill_loader: loader.SkillLoader,
    ) -> None:
        """The header lists name, description, directory, then a rule."""
        conftest.write_skill(
            skill_roots.personal,
            "foo",
            name="Foo Skill",
            description="Does foo",
            body="Body text.\n",
        )

        text = skill_loader.load("foo").render("foo")
        directory = (skill_roots.personal / "foo").absolute()

        assert text == (
            "# Foo Skill\n"
            "# Does foo\n"
            f"# Supporting tools and docs are in {directory}\n"
            f"{loader.HEADER_RULE}\n"
            "\n"
            "Body text.\n"
        )

    def test_missing_name_uses_requested_identifier(
        self,
        skill_roots: types.SkillRoots,
        skill_loader: loader.SkillLoader,
    ) -> None:
        """Without metadata the title falls back to what was asked for."""
        conftest.write_skill(skill_roots.superpowers, "tdd", body="Test first.\n")

        lines = skill_loader.load("superpowers:tdd").render("superpowers:tdd").splitlines()

        assert lines[0] == "# superpowers:tdd"
        assert lines[1] == "# "
        assert lines[-1] == "Test first."

    def test_to_dict(
        self,
        skill_roots: types.SkillRoots,
        skill_loader: loader.SkillLoader,
    ) -> None:
        """Loaded skills serialize their location and source."""
        conftest.write_skill(skill_roots.project, "deploy", name="deploy")

        data = skill_loader.load("project:deploy").to_dict()

        assert data["name"] == "deploy"
        assert data["description"] is None
        assert data["source"] == "project"
        assert data["skill_path"] == "deploy"
        assert data["skill_file"].endswith("SKILL.md")
