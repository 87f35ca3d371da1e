"""
Config check use case — validate dart_exports.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dart_exports.core.config.loader import ConfigError, find_config_file, load_settings
from dart_exports.core.models.settings import ExportSettings


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: ExportSettings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "settings": self.settings.model_dump() if self.settings else None,
        }


def check_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> ConfigCheckResult:
    """Validate export configuration and report issues.

    A missing config file is valid: the defaults apply.

    Args:
        config_path: Optional explicit path to dart_exports.yml.
        start_dir: Where to start searching when no path is given.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file(start_dir)
    result.config_path = config_path

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.settings = settings

    if config_path is None:
        result.warnings.append("No dart_exports.yml found, using defaults.")

    # Semantic checks
    if not settings.extension.startswith("."):
        result.errors.append(
            f"Extension must start with '.': {settings.extension!r}"
        )

    if not settings.index_file.endswith(settings.extension):
        result.warnings.append(
            f"Index file '{settings.index_file}' does not end with '{settings.extension}'."
        )

    if any("/" in name or "\\" in name for name in settings.skip_folders):
        result.warnings.append(
            "skip_folders entries are matched against single folder names; "
            "path separators never match."
        )

    if settings.extension in settings.skip_file_suffixes:
        result.warnings.append(
            f"Every '{settings.extension}' file is skipped; nothing will be exported."
        )

    dupes = {s for s in settings.skip_file_suffixes if settings.skip_file_suffixes.count(s) > 1}
    if dupes:
        result.warnings.append(f"Duplicate skip suffixes: {', '.join(sorted(dupes))}")

    result.valid = len(result.errors) == 0
    return result
