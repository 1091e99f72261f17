"""
Project resolver — locate the Go project a command is added to.

Two entry points, mirroring how ``add`` is invoked:

    new_project("github.com/acme/tool", settings)   # --package given
    new_project_from_path(Path.cwd(), settings)      # default

Both return a ``Project`` whose ``cmd_path()`` is where the new command
file goes and whose ``license()`` supplies the file header.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from gomanctl.core.config.loader import find_settings_file
from gomanctl.core.models.project import Project
from gomanctl.core.models.settings import Settings
from gomanctl.core.services.licenses import resolve_license

logger = logging.getLogger(__name__)

# Directory names recognised as the command directory of a project
CMD_DIR_NAMES = ("cmd", "cmds", "command", "commands")
DEFAULT_CMD_DIR = "cmd"


def gopath() -> Path:
    """First entry of $GOPATH, or ~/go when unset."""
    raw = os.environ.get("GOPATH", "")
    first = raw.split(os.pathsep)[0] if raw else ""
    if first:
        return Path(first).expanduser()
    return Path.home() / "go"


def find_cmd_dir(abs_path: Path) -> str:
    """Find the command directory of a project, relative to its root.

    Returns ``"."`` when ``abs_path`` itself is a command directory, the
    name of the first command-directory child otherwise, and ``"cmd"``
    when there is none (or the project does not exist yet).
    """
    if abs_path.name in CMD_DIR_NAMES:
        return "."

    if not abs_path.is_dir():
        return DEFAULT_CMD_DIR

    for child in sorted(abs_path.iterdir()):
        if child.is_dir() and child.name in CMD_DIR_NAMES:
            return child.name

    return DEFAULT_CMD_DIR


def _project_name(abs_path: Path) -> str:
    """Import path of a project living under $GOPATH/src, else ''."""
    src = (gopath() / "src").resolve()
    try:
        return abs_path.relative_to(src).as_posix()
    except ValueError:
        return ""


def new_project(name: str, settings: Settings) -> Project:
    """Resolve a project by import path under $GOPATH/src.

    Raises:
        ConfigError: If the configured license is unknown.
    """
    abs_path = (gopath() / "src" / name).resolve()
    project = Project(
        name=name,
        abs_path=abs_path,
        cmd_dir=find_cmd_dir(abs_path),
        project_license=resolve_license(settings),
    )
    logger.debug("Resolved project %s at %s", name, abs_path)
    return project


def new_project_from_path(path: Path, settings: Settings) -> Project:
    """Resolve the project containing ``path``.

    The root is the directory holding goman.yml when one exists above
    ``path``; otherwise ``path`` itself.

    Raises:
        ConfigError: If the configured license is unknown.
    """
    path = path.resolve()
    settings_file = find_settings_file(path)
    root = settings_file.parent if settings_file else path

    # Running from inside the command directory targets it directly
    if path.name in CMD_DIR_NAMES:
        root = path

    project = Project(
        name=_project_name(root),
        abs_path=root,
        cmd_dir=find_cmd_dir(root),
        project_license=resolve_license(settings),
    )
    logger.debug("Resolved project at %s (cmd dir: %s)", root, project.cmd_dir)
    return project
