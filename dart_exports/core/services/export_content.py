"""
Barrel content — aggregator naming, candidate listing and export lines.

Everything here is a pure function of the on-disk state at call time.
Detection is line-pattern based: a file "is" an aggregator when it
contains at least one ``export '...';`` statement, and a file is a
fragment when it declares ``part of '...';``.

Read failures never propagate out of the heuristics; they count as
"no match" and are logged.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

from dart_exports.core.models.settings import ExportSettings
from dart_exports.core.services.skip_filter import should_skip

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = ExportSettings()

# Either quote style: export 'a.dart';  export "a.dart";
EXPORT_RE = re.compile(r"""export ['"](.*?)['"];""")

_PART_OF_TEMPLATE = r"""part of ['"].+{ext}['"];"""


def part_of_pattern(extension: str) -> re.Pattern[str]:
    """Part-of directive pointing at a file with the given extension."""
    return re.compile(_PART_OF_TEMPLATE.format(ext=re.escape(extension)), re.IGNORECASE)


PART_OF_RE = part_of_pattern(_DEFAULT_SETTINGS.extension)


# ═══════════════════════════════════════════════════════════════════
#  Content heuristics
# ═══════════════════════════════════════════════════════════════════


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading file %s: %s", path, e)
        return None


def is_aggregator_like(path: Path) -> bool:
    """True if the file contains at least one export statement."""
    content = _read_text(path)
    return content is not None and EXPORT_RE.search(content) is not None


def contains_part_of(path: Path, settings: ExportSettings | None = None) -> bool:
    """True if the file declares itself ``part of`` another library."""
    pattern = PART_OF_RE if settings is None else part_of_pattern(settings.extension)
    content = _read_text(path)
    return content is not None and pattern.search(content) is not None


# ═══════════════════════════════════════════════════════════════════
#  Aggregator naming
# ═══════════════════════════════════════════════════════════════════


def resolve_aggregator_name(folder: str | Path, settings: ExportSettings | None = None) -> str:
    """Filename that holds (or will hold) the aggregator for ``folder``.

    ``<folder>.dart`` unless that file exists with ordinary source in
    it, in which case ``index.dart``. Whether ``index.dart`` exists does
    not matter.
    """
    settings = settings or _DEFAULT_SETTINGS
    folder = Path(folder)
    default_name = settings.default_file_for(folder.name)
    default_path = folder / default_name

    if not default_path.exists():
        return default_name
    if is_aggregator_like(default_path):
        return default_name
    return settings.index_file


# ═══════════════════════════════════════════════════════════════════
#  Listing
# ═══════════════════════════════════════════════════════════════════


def list_subdirectories(folder: Path, settings: ExportSettings | None = None) -> list[Path]:
    """Direct, non-skipped subdirectories, sorted by name.

    Raises:
        OSError: If ``folder`` cannot be listed.
    """
    settings = settings or _DEFAULT_SETTINGS
    return sorted(
        (p for p in folder.iterdir() if p.is_dir() and not should_skip(p.name, settings)),
        key=lambda p: p.name,
    )


def list_candidate_files(folder: Path, settings: ExportSettings | None = None) -> list[str]:
    """Names of the source files directly inside ``folder`` to export.

    Excludes skipped names and both aggregator filenames, so a barrel
    never exports itself.

    Raises:
        OSError: If ``folder`` cannot be listed.
    """
    settings = settings or _DEFAULT_SETTINGS
    own_files = {settings.default_file_for(folder.name), settings.index_file}
    return sorted(
        p.name
        for p in folder.iterdir()
        if p.suffix == settings.extension
        and p.is_file()
        and not should_skip(p.name, settings)
        and p.name not in own_files
    )


# ═══════════════════════════════════════════════════════════════════
#  Content generation
# ═══════════════════════════════════════════════════════════════════


def generate_content(
    folder: str | Path,
    subfolders: Iterable[str | Path],
    files: Iterable[str],
    *,
    settings: ExportSettings | None = None,
    child_targets: Mapping[Path, str] | None = None,
) -> str:
    """Build the aggregator text for ``folder``.

    Args:
        folder: The directory the aggregator lives in.
        subfolders: Child directories, in output order.
        files: Local source filenames, in output order.
        settings: Naming rules (defaults when omitted).
        child_targets: Aggregator filename each child settled on during
            its own visit. Children missing from it are resolved from disk.

    Returns:
        Subfolder exports then file exports, one per line, no trailing
        newline.
    """
    folder = Path(folder)
    child_targets = child_targets or {}

    lines: list[str] = []
    for sub in subfolders:
        sub = Path(sub)
        rel_path = os.path.relpath(sub, folder).replace("\\", "/")
        export_file = child_targets.get(sub) or resolve_aggregator_name(sub, settings)
        lines.append(f"export '{rel_path}/{export_file}';")

    for name in files:
        if contains_part_of(folder / name, settings):
            logger.debug("Not exporting %s: part-of directive", folder / name)
            continue
        lines.append(f"export '{name}';")

    return "\n".join(lines)
