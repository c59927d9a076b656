"""
Main CLI entry point for superpowers.

Provides a command-line view of the same operations the host extension
exposes: listing and loading skills, printing the bootstrap payload, and
checking for library updates.
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import click as _click

import superpowers
import superpowers.commands as commands
import superpowers.config as config
import superpowers.extension as extension
import superpowers.skills as skills

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _get_extension(ctx: _click.Context) -> extension.SuperpowersExtension:
    ext: extension.SuperpowersExtension = ctx.obj["extension"]
    return ext


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(superpowers.__version__, "-v", "--version", prog_name="superpowers")
@_click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@_click.option(
    "--project-root",
    type=_click.Path(file_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Project root for project skills (default: current directory)",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    verbose: bool,
    project_root: _pathlib.Path | None,
) -> None:
    """
    Superpowers - layered skill library for the pi coding agent.

    \b
    Examples:
        superpowers skills list                  # All skills, by priority
        superpowers skills show brainstorming    # Resolve and show a skill
        superpowers bootstrap --compact          # Print the compact bootstrap
        superpowers update                       # Check for library updates
    """
    if verbose:
        _logging.basicConfig(
            level=_logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    overrides: dict[str, _typing.Any] = {}
    if project_root is not None:
        overrides["project_root"] = project_root
    settings = config.Settings(**overrides)

    # Store settings in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["extension"] = extension.SuperpowersExtension(settings)


# =============================================================================
# Skill Commands
# =============================================================================


@cli.group(name="skills")
def skills_group() -> None:
    """Skill discovery commands."""
    pass


@skills_group.command(name="list")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.option(
    "--depth",
    type=_click.IntRange(min=0),
    default=None,
    help="Directory levels to scan below each root",
)
@_click.pass_context
def skills_list(ctx: _click.Context, json_output: bool, depth: int | None) -> None:
    """List all skills in the project, personal and superpowers roots."""
    ext = _get_extension(ctx)
    max_depth = ext.settings.scan_depth if depth is None else depth
    listings = skills.scan_roots(ext.roots, max_depth)

    if json_output:
        data = {
            "roots": {root.source_type.value: str(root.path) for root in ext.roots},
            "skill_count": len(listings),
            "skills": [listing.to_dict() for listing in listings],
        }
        _click.echo(_json.dumps(data, indent=2))
        return

    _click.echo("Skill Roots (priority order):")
    for root in ext.roots:
        exists = "✓" if root.path.is_dir() else "(not found)"
        _click.echo(f"  {root.source_type.value:<12} {root.path} {exists}")
    _click.echo()

    if not listings:
        _click.echo("No skills found.")
        return

    _click.echo(commands.format_listings(listings).rstrip())


@skills_group.command(name="show")
@_click.argument("name")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.option("--body", is_flag=True, help="Show the skill as use_skill returns it")
@_click.pass_context
def skills_show(ctx: _click.Context, name: str, json_output: bool, body: bool) -> None:
    """Resolve a skill identifier and show where it comes from."""
    ext = _get_extension(ctx)

    try:
        skill = ext.loader.load(name)
    except skills.SkillNotFoundError as e:
        if json_output:
            _click.echo(_json.dumps({"error": str(e)}))
        else:
            _click.echo(f"Error: {e}", err=True)
            _click.echo("Use 'superpowers skills list' to see available skills.", err=True)
        raise SystemExit(1) from None

    if json_output:
        data = skill.to_dict()
        if body:
            data["body"] = skill.body
        _click.echo(_json.dumps(data, indent=2))
        return

    if body:
        _click.echo(skill.render(name))
        return

    _click.echo(f"Skill: {skill.metadata.name or name}")
    _click.echo(f"  Description: {skill.metadata.description or '(none)'}")
    _click.echo(f"  Source: {skill.resolved.source_type.value}")
    _click.echo(f"  Directory: {skill.directory}")


# =============================================================================
# Bootstrap and Update Commands
# =============================================================================


@cli.command(name="bootstrap")
@_click.option("--compact", is_flag=True, help="Print the compact form")
@_click.pass_context
def bootstrap(ctx: _click.Context, compact: bool) -> None:
    """Print the bootstrap payload injected at session start."""
    ext = _get_extension(ctx)
    payload = ext.bootstrap(compact)
    if payload is None:
        _click.echo(
            f"Error: orientation skill '{ext.settings.orientation_skill}' not found",
            err=True,
        )
        raise SystemExit(1)
    _click.echo(payload)


@cli.command(name="update")
@_click.pass_context
def update(ctx: _click.Context) -> None:
    """Check whether the superpowers library has upstream updates."""
    ext = _get_extension(ctx)
    notification = commands.check_for_updates(ext.settings.update_repo_dir)
    _click.echo(notification.message)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="superpowers")


if __name__ == "__main__":
    main()
