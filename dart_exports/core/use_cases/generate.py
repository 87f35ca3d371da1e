"""
Generate use case — run the barrel walk for one root directory.

Each call is one top-level operation: the Overwrite All choice from a
previous call never carries over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from dart_exports.core.models.exports import DirectoryOutcome
from dart_exports.core.models.settings import ExportSettings
from dart_exports.core.services.collaborator import Collaborator
from dart_exports.core.services.export_ops import ExportGenerator


@dataclass
class GenerateResult:
    """Outcome of one generation run."""

    root: Path
    root_exists: bool = False
    outcomes: list[DirectoryOutcome] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def written(self) -> int:
        return self._count("written")

    @property
    def skipped(self) -> int:
        return self._count("skipped") + self._count("dismissed")

    @property
    def empty(self) -> int:
        return self._count("empty")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def ok(self) -> bool:
        return self.root_exists and self.failed == 0

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "root": str(self.root),
            "root_exists": self.root_exists,
            "ok": self.ok,
            "counts": {
                "written": self.written,
                "skipped": self.skipped,
                "empty": self.empty,
                "failed": self.failed,
            },
            "directories": [o.model_dump() for o in self.outcomes],
        }


def generate_exports(
    root: Path,
    collaborator: Collaborator,
    settings: ExportSettings | None = None,
) -> GenerateResult:
    """Generate aggregator files for the tree rooted at ``root``.

    Args:
        root: Directory to start from. A missing path is a no-op.
        collaborator: Prompt and notification provider.
        settings: Skip rules and naming (defaults when omitted).

    Returns:
        GenerateResult with one outcome per visited directory.
    """
    result = GenerateResult(root=root, root_exists=root.is_dir())
    if not result.root_exists:
        return result

    generator = ExportGenerator(collaborator, settings)
    result.outcomes = generator.run(root)
    collaborator.notify_info(f"Exporter files created recursively in {root}")
    return result
