"""
gomanctl — CLI entrypoint.

Usage:
    python -m gomanctl.main --help
    python -m gomanctl.main add my-server
    python -m gomanctl.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from gomanctl.core.observability.logging_config import setup_logging

from gomanctl import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gomanctl")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to goman.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """gomanctl — scaffold commands for goman applications."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(debug=debug, verbose=verbose, quiet=quiet)


@cli.group()
def config() -> None:
    """Scaffold configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate goman.yml configuration."""
    from gomanctl.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.settings is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File:    {result.config_path}")
        click.echo(f"   Author:  {result.settings.author or '(none)'}")
        click.echo(f"   License: {result.license_name}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings and not ctx.obj.get("quiet"):
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register sub-commands from gomanctl/ui/cli/ ──────────────────

from gomanctl.ui.cli.add import add

cli.add_command(add)
cli.add_command(add, name="command")


if __name__ == "__main__":
    cli()
