"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A rendered Go source file, not yet written.

    Attributes:
        path:    Absolute target path.
        content: Full file content.
        package: Go package clause of the file.
        reason:  Why this file was generated.
    """

    path: Path
    content: str
    package: str
    reason: str = ""


class EmissionContext(BaseModel):
    """Everything a single command file needs besides its target path.

    Lives only for the duration of one emit call.
    """

    identifier: str
    parent_name: str = "rootCmd"
    package_name: str = ""
    license_header: str = ""
    copyright_line: str = ""
