"""
CLI command for adding a subcommand to a goman application.

Thin wrapper over ``gomanctl.core.use_cases.add_command``.
"""

from __future__ import annotations

import json
import sys

import click

from gomanctl.core.use_cases.add_command import DEFAULT_PARENT


@click.command("add")
@click.argument("name", required=False)
@click.option(
    "--package",
    "-t",
    "package_name",
    default="",
    help="Target package name (e.g. github.com/geego/gean).",
)
@click.option(
    "--parent",
    "-p",
    "parent_name",
    default=DEFAULT_PARENT,
    show_default=True,
    help="Variable name of parent command for this command.",
)
@click.option("--dry-run", is_flag=True, help="Print the file instead of writing it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def add(
    ctx: click.Context,
    name: str | None,
    package_name: str,
    parent_name: str,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Add a command to a goman application.

    Creates a new command, with a license header and the appropriate
    structure for a goman-based CLI application, and registers it to its
    parent (default rootCmd).

    If you want your command to be public, pass in the command name
    with an initial uppercase letter.

    Example: gomanctl add server -> resulting in a new cmd/server.go
    """
    from gomanctl.core.use_cases.add_command import add_command

    result = add_command(
        name,
        package_name=package_name or None,
        parent_name=parent_name,
        config_path=ctx.obj.get("config_path"),
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if dry_run:
        click.secho(f"# {result.cmd_path}", fg="cyan", err=True)
        click.echo(result.content, nl=False)
        return

    click.echo(f"{result.cmd_name} created at {result.cmd_path}")
