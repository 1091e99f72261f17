"""
Project model — the Go project a command is scaffolded into.

Resolved either from an explicit package name (under GOPATH) or from
the working directory. The resolver lives in
``gomanctl.core.services.project``; this module only holds the data.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class License(BaseModel):
    """A license as far as scaffolding cares: a name and a file header."""

    name: str
    header: str = ""


class Project(BaseModel):
    """A resolved goman project.

    Attributes:
        name:     Import path of the project (empty when unknown).
        abs_path: Absolute project root.
        cmd_dir:  Command directory, relative to ``abs_path``.
    """

    name: str = ""
    abs_path: Path
    cmd_dir: str = "cmd"
    project_license: License

    def cmd_path(self) -> Path:
        """Absolute directory new command files are written to."""
        if self.cmd_dir in ("", "."):
            return self.abs_path
        return self.abs_path / self.cmd_dir

    def license(self) -> License:
        """License whose header goes on top of generated files."""
        return self.project_license
