"""
Config check use case — validate goman.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gomanctl.core.config.loader import ConfigError, find_settings_file, load_settings
from gomanctl.core.models.settings import Settings
from gomanctl.core.services.licenses import resolve_license


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: Settings | None = None
    config_path: Path | None = None
    license_name: str = ""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "author": self.settings.author if self.settings else None,
            "license": self.license_name or None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate scaffold settings and report issues.

    Args:
        config_path: Optional explicit path to goman.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        try:
            config_path = find_settings_file()
        except OSError as e:
            result.errors.append(f"Cannot resolve working directory: {e}")
            return result
        if config_path is None:
            result.warnings.append("No goman.yml found. Built-in defaults apply.")

    result.config_path = config_path

    try:
        settings = load_settings(config_path)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    try:
        result.license_name = resolve_license(settings).name
    except ConfigError as e:
        result.errors.append(str(e))

    if not settings.author.strip():
        result.warnings.append("No author set. Generated files get an anonymous copyright line.")

    if settings.year and not settings.year.isdigit():
        result.warnings.append(f"Year '{settings.year}' is not a number.")

    result.valid = len(result.errors) == 0
    return result
