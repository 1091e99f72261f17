"""
Logging setup for the gomanctl CLI.

The root command calls ``setup_logging()`` once with its verbosity
flags.  A flag beats ``GOMANCTL_LOG_LEVEL``; with neither, only warnings
and errors reach stderr.  ``GOMANCTL_LOG_FILE`` additionally copies records
to a file, at DEBUG unless ``GOMANCTL_LOG_FILE_LEVEL`` names another level.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LEVEL_ENV = "GOMANCTL_LOG_LEVEL"
FILE_ENV = "GOMANCTL_LOG_FILE"
FILE_LEVEL_ENV = "GOMANCTL_LOG_FILE_LEVEL"

_CONSOLE_FMT = "%(message)s"
_DETAIL_FMT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR

    env = os.environ if environ is None else environ
    name = env.get(LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    # getLevelName() returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Install the stderr handler (and optional file handler) on the root logger.

    Returns:
        The console level that was applied.
    """
    env = os.environ if environ is None else environ
    level = resolve_level(debug=debug, verbose=verbose, quiet=quiet, environ=env)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(_DETAIL_FMT if level <= logging.DEBUG else _CONSOLE_FMT)
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(level)

    log_file = env.get(FILE_ENV)
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        file_level = logging.getLevelName(env.get(FILE_LEVEL_ENV, "DEBUG").strip().upper())
        if not isinstance(file_level, int):
            file_level = logging.DEBUG
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_DETAIL_FMT))
        root.addHandler(fh)
        root.setLevel(min(level, file_level))

    logging.raiseExceptions = False
    return level
