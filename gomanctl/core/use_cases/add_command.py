"""
Add-command use case — scaffold a new subcommand into a goman project.

Ties together settings loading, project resolution, name sanitizing
and the command generator.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from gomanctl.core.config.loader import ConfigError, find_settings_file, load_settings
from gomanctl.core.models.project import Project
from gomanctl.core.models.template import EmissionContext
from gomanctl.core.services.generators.command import copyright_line, emit, render_command
from gomanctl.core.services.naming import is_exported, validate_cmd_name
from gomanctl.core.services.project import new_project, new_project_from_path
from gomanctl.core.services.template_engine import TemplateError

logger = logging.getLogger(__name__)

DEFAULT_PARENT = "rootCmd"

# Letters, digits, dashes and underscores only
_RAW_NAME = re.compile(r"[A-Za-z0-9_-]+")


@dataclass
class AddCommandResult:
    """Result of the add-command use case."""

    cmd_name: str = ""
    cmd_path: Path | None = None
    project: Project | None = None
    dry_run: bool = False
    content: str = ""
    reason: str = ""
    error: str | None = None

    @property
    def exported(self) -> bool:
        return is_exported(self.cmd_name)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["cmd_name"] = self.cmd_name
        result["cmd_path"] = str(self.cmd_path) if self.cmd_path else None
        result["exported"] = self.exported
        result["dry_run"] = self.dry_run
        result["reason"] = self.reason
        if self.project:
            result["project"] = {
                "name": self.project.name,
                "root": str(self.project.abs_path),
                "license": self.project.license().name,
            }
        if self.dry_run:
            result["content"] = self.content
        return result


def add_command(
    name: str | None,
    *,
    package_name: str | None = None,
    parent_name: str = DEFAULT_PARENT,
    config_path: Path | None = None,
    cwd: Path | None = None,
    dry_run: bool = False,
) -> AddCommandResult:
    """Create ``<cmd_name>.go`` in the project's command directory.

    Args:
        name: Desired command name, e.g. ``my-server``.
        package_name: Import path of the target project under $GOPATH/src.
            When empty, the project containing ``cwd`` is used.
        parent_name: Go variable of the parent command.
        config_path: Path to goman.yml (None: search upward from ``cwd``).
        cwd: Working directory (default: the process's).
        dry_run: Render only, don't write.

    Returns:
        AddCommandResult; ``error`` is set on any failure.
    """
    result = AddCommandResult(dry_run=dry_run)

    if not name:
        result.error = "add needs a name for the command"
        return result

    if not name.isascii():
        result.error = f"Command name must be ASCII: {name!r}"
        return result

    if not _RAW_NAME.fullmatch(name):
        result.error = (
            f"Command name may only contain letters, digits, dashes and underscores: {name!r}"
        )
        return result

    try:
        if config_path is None:
            config_path = find_settings_file(cwd)
        settings = load_settings(config_path)

        if package_name:
            project = new_project(package_name, settings)
        else:
            project = new_project_from_path(cwd or Path.cwd(), settings)
    except ConfigError as e:
        result.error = str(e)
        return result
    except OSError as e:
        # Path.cwd() fails when the working directory was removed
        result.error = f"Cannot resolve working directory: {e}"
        return result

    result.project = project
    result.cmd_name = validate_cmd_name(name)
    if not result.cmd_name:
        result.error = f"Command name {name!r} has no identifier characters"
        return result

    result.cmd_path = project.cmd_path() / f"{result.cmd_name}.go"

    context = EmissionContext(
        identifier=result.cmd_name,
        parent_name=parent_name,
        package_name=project.name,
        license_header=project.license().header,
        copyright_line=copyright_line(settings),
    )

    try:
        if dry_run:
            generated = render_command(context, result.cmd_path)
        else:
            generated = emit(context, result.cmd_path)
    except TemplateError as e:
        result.error = f"Cannot render {result.cmd_path.name}: {e}"
        return result
    except OSError as e:
        result.error = str(e)
        return result

    result.content = generated.content
    result.reason = generated.reason
    if not dry_run:
        logger.info("%s created at %s", result.cmd_name, result.cmd_path)
    return result
