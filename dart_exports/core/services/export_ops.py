"""
Export generation — the recursive barrel walk.

For each directory the walk:

    1. drops skipped names (no recursion, parent won't reference it)
    2. picks the target: ``<dir>.dart``, or ``index.dart`` when the
       former holds ordinary source
    3. asks the collaborator before replacing an existing aggregator
       (Overwrite / Skip / Overwrite All)
    4. visits every child first, then writes its own exports

Skip prunes exactly one subtree. A failed listing or write aborts only
that directory; the walk carries on with its siblings and parents.
Nothing is transactional: files already written stay written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from dart_exports.core.models.exports import ConflictDecision, DirectoryOutcome
from dart_exports.core.models.settings import ExportSettings
from dart_exports.core.services.collaborator import Collaborator
from dart_exports.core.services.export_content import (
    generate_content,
    is_aggregator_like,
    list_candidate_files,
    list_subdirectories,
    resolve_aggregator_name,
)
from dart_exports.core.services.skip_filter import should_skip

logger = logging.getLogger(__name__)


@dataclass
class DecisionContext:
    """State shared by every directory of one top-level run.

    Attributes:
        overwrite_all: Set once the user answers "Overwrite All"; later
            conflicts resolve to Overwrite without prompting.
        visited: Resolved paths already entered (guards symlink loops).
    """

    overwrite_all: bool = False
    visited: set[Path] = field(default_factory=set)


class ExportGenerator:
    """Walks a tree and writes one aggregator per directory.

    Args:
        collaborator: Answers conflict prompts and shows messages.
        settings: Skip rules and naming (defaults when omitted).
    """

    def __init__(self, collaborator: Collaborator, settings: ExportSettings | None = None) -> None:
        self.collaborator = collaborator
        self.settings = settings or ExportSettings()
        self.outcomes: list[DirectoryOutcome] = []

    def run(self, root: Path) -> list[DirectoryOutcome]:
        """Generate aggregators for the tree rooted at ``root``.

        A missing root, one that is not a directory, or a filesystem root
        (no basename to name the aggregator after) is a no-op.
        """
        self.outcomes = []
        if not root.is_dir():
            logger.info("Nothing to do: %s is not a directory", root)
            return self.outcomes
        if not root.name:
            logger.info("Nothing to do: %s has no folder name", root)
            return self.outcomes

        self.create_exports(root, DecisionContext())
        return self.outcomes

    # ── Per-directory visit ─────────────────────────────────────

    def create_exports(self, folder: Path, context: DecisionContext) -> str | None:
        """Visit one directory.

        Returns:
            The aggregator filename the parent should reference, or None
            when the directory takes no part in the exports.
        """
        folder_name = folder.name
        if should_skip(folder_name, self.settings):
            logger.debug("Skipping %s", folder)
            return None

        real_path = folder.resolve()
        if real_path in context.visited:
            logger.warning("Already visited %s, not descending again", folder)
            return None
        context.visited.add(real_path)

        default_name = self.settings.default_file_for(folder_name)
        target_name = resolve_aggregator_name(folder, self.settings)
        if target_name != default_name:
            self._info(
                f"File '{default_name}' exists and is not an export file. "
                f"Using '{target_name}' instead."
            )
        target = folder / target_name

        decision = self._confirm_overwrite(folder, target, context)
        if decision is None:
            logger.info("No answer for %s, leaving it untouched", target)
            self._record(folder, target, "dismissed")
            return target_name
        if decision is ConflictDecision.SKIP:
            self._warning(f"Skipping folder '{folder_name}' as requested.")
            self._record(folder, target, "skipped")
            return target_name

        if not self._write_exports(folder, target, context):
            return None
        return target_name

    def _confirm_overwrite(
        self,
        folder: Path,
        target: Path,
        context: DecisionContext,
    ) -> ConflictDecision | None:
        """Decide whether ``target`` may be (re)written.

        Only an existing, aggregator-like target is a conflict. Anything
        else (absent, or ordinary source in index.dart) proceeds as
        Overwrite without asking.
        """
        if not target.exists() or not is_aggregator_like(target):
            return ConflictDecision.OVERWRITE
        if context.overwrite_all:
            logger.debug("Overwrite All in effect for %s", target)
            return ConflictDecision.OVERWRITE

        choice = self.collaborator.prompt_choice(
            f"Exporter file '{target.name}' already exists in {folder}. "
            "Do you want to overwrite it?",
            ConflictDecision.options(),
        )
        if choice is None:
            return None
        try:
            decision = ConflictDecision(choice)
        except ValueError:
            logger.warning("Unrecognised answer %r for %s", choice, target)
            return None

        if decision is ConflictDecision.OVERWRITE_ALL:
            context.overwrite_all = True
            return ConflictDecision.OVERWRITE
        return decision

    def _write_exports(self, folder: Path, target: Path, context: DecisionContext) -> bool:
        """Visit the children, then write this directory's aggregator.

        Returns:
            False when there is nothing to export, so no aggregator exists
            for the parent to reference. A failed write still returns True:
            the parent keeps pointing at the target.
        """
        try:
            subfolders = list_subdirectories(folder, self.settings)
        except OSError as e:
            self._fail(folder, target, e)
            return True

        # Children first: their decided names feed our export lines
        child_targets: dict[Path, str] = {}
        for sub in subfolders:
            name = self.create_exports(sub, context)
            if name is not None:
                child_targets[sub] = name

        try:
            files = list_candidate_files(folder, self.settings)
        except OSError as e:
            self._fail(folder, target, e)
            return True

        content = generate_content(
            folder,
            list(child_targets),
            files,
            settings=self.settings,
            child_targets=child_targets,
        )

        if not content:
            logger.info("Nothing to export in %s, no aggregator written", folder)
            self._record(folder, target, "empty")
            return False

        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            self._fail(folder, target, e)
            return True

        exports = len(content.splitlines())
        logger.info("Wrote %s (%d exports)", target, exports)
        self._record(folder, target, "written", exports=exports)
        return True

    # ── Reporting ───────────────────────────────────────────────

    def _record(self, folder: Path, target: Path, status: str, **extra) -> None:
        self.outcomes.append(
            DirectoryOutcome(path=str(folder), target=target.name, status=status, **extra)
        )

    def _fail(self, folder: Path, target: Path, error: OSError) -> None:
        logger.info("Write failed for %s: %s", folder, error)
        self.collaborator.notify_error(
            f"Failed to create exporter files in {folder}. Error: {error}"
        )
        self._record(folder, target, "failed", error=str(error))

    def _info(self, message: str) -> None:
        logger.debug(message)
        self.collaborator.notify_info(message)

    def _warning(self, message: str) -> None:
        logger.info(message)
        self.collaborator.notify_warning(message)
