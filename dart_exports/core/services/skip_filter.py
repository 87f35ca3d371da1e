"""
Skip filter — names that never take part in barrel generation.

Applied to both folder and file names: hidden entries, generated
sources (``*.g.dart``) and the localization folder.
"""

from __future__ import annotations

from dart_exports.core.models.settings import HIDDEN_PREFIX, ExportSettings

_DEFAULT_SETTINGS = ExportSettings()


def should_skip(name: str, settings: ExportSettings | None = None) -> bool:
    """True if a file or folder name is excluded from exports."""
    settings = settings or _DEFAULT_SETTINGS
    if name.startswith(HIDDEN_PREFIX):
        return True
    if any(name.endswith(suffix) for suffix in settings.skip_file_suffixes):
        return True
    return name in settings.skip_folders
