"""
Configuration loader — reads goman.yml into a Settings model.

goman.yml is optional. When it is missing every setting falls back to
its default; when it is present it must be a valid YAML mapping.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from gomanctl.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "goman.yml"


class ConfigError(Exception):
    """Raised when goman.yml is invalid or unreadable."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for goman.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to goman.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate scaffold settings.

    Args:
        path: Explicit path to goman.yml. If None, no file is read and
            defaults are returned.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If an explicit file is missing or invalid.
    """
    if path is None:
        logger.debug("No %s given — using defaults", SETTINGS_FILE)
        return Settings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is a valid "use the defaults"
    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded settings from %s (license=%s)", path, settings.license or "default")
    return settings
