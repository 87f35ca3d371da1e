"""
Export settings — the knobs that shape barrel generation.

Defaults match the stock Flutter layout: generated ``*.g.dart`` files
and the ``l10n`` folder are never exported. Loaded from
dart_exports.yml when one exists, otherwise the defaults apply.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_SKIP_FOLDERS = ("l10n",)
DEFAULT_SKIP_FILE_SUFFIXES = (".g.dart",)
DEFAULT_EXTENSION = ".dart"
DEFAULT_INDEX_FILE = "index.dart"
HIDDEN_PREFIX = "."


class ExportSettings(BaseModel):
    """Skip rules and file naming for one generation run."""

    skip_folders: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_FOLDERS))
    skip_file_suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKIP_FILE_SUFFIXES)
    )
    extension: str = DEFAULT_EXTENSION
    index_file: str = DEFAULT_INDEX_FILE

    def default_file_for(self, folder_name: str) -> str:
        """Aggregator filename named after its folder (``widgets.dart``)."""
        return f"{folder_name}{self.extension}"
