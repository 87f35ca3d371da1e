"""
Configuration loader — reads dart_exports.yml into ExportSettings.

The file is optional. When none is found the compiled-in defaults
apply, so a bare Flutter project needs no configuration at all.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from dart_exports.core.models.settings import ExportSettings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "dart_exports.yml"

_SETTINGS_KEYS = ("skip_folders", "skip_file_suffixes", "extension", "index_file")


class ConfigError(Exception):
    """Raised when the export configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for dart_exports.yml starting from the given directory, walking up.

    This lets ``generate lib/src/widgets`` pick up the settings kept at
    the package root.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to dart_exports.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> ExportSettings:
    """Load and validate export settings.

    Args:
        path: Explicit path to dart_exports.yml. If None, the defaults
            are returned.

    Returns:
        Validated ExportSettings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        logger.debug("No %s, using default settings", CONFIG_FILE)
        return ExportSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading export settings from %s", path)

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
        return ExportSettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under an "exports" key or be flat
    settings_data = data.get("exports", data) if "exports" in data else data
    if not isinstance(settings_data, dict):
        raise ConfigError(f"Expected 'exports' to be a mapping in {path}")

    unknown = sorted(set(settings_data) - set(_SETTINGS_KEYS))
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", path, ", ".join(unknown))

    try:
        settings = ExportSettings.model_validate(
            {k: v for k, v in settings_data.items() if k in _SETTINGS_KEYS}
        )
    except Exception as e:
        raise ConfigError(f"Invalid export configuration: {e}") from e

    logger.info(
        "Loaded settings from %s (%d skipped folders, %d skipped suffixes)",
        path,
        len(settings.skip_folders),
        len(settings.skip_file_suffixes),
    )
    return settings


def resolve_settings(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> tuple[ExportSettings, Path | None]:
    """Pick the config file (explicit, else discovered) and load it.

    Returns:
        (settings, config file used or None).
    """
    path = config_path or find_config_file(start_dir)
    return load_settings(path), path
