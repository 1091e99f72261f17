"""
File writer — the only place generated files touch the disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_string_to_file(path: Path, contents: str) -> None:
    """Create ``path`` with ``contents``, making parent directories as needed.

    Raises:
        FileExistsError: If ``path`` already exists.  Generated files are
            never overwritten.
        OSError: If the directory or file cannot be created.
    """
    if path.exists():
        raise FileExistsError(f"{path} already exists")

    path.parent.mkdir(parents=True, exist_ok=True)

    # "x" mode: fail rather than clobber a file created since the check
    with path.open("x", encoding="utf-8") as fh:
        fh.write(contents)

    logger.info("Wrote %d bytes to %s", len(contents), path)
