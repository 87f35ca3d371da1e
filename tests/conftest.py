"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from dart_exports.core.services.collaborator import Collaborator


class ScriptedCollaborator(Collaborator):
    """Answers prompts from a fixed script and records every message."""

    def __init__(self, answers: Sequence[str | None] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def prompt_choice(self, message: str, options: Sequence[str]) -> str | None:
        self.prompts.append(message)
        assert self.answers, f"Unexpected prompt: {message}"
        return self.answers.pop(0)

    def notify_info(self, message: str) -> None:
        self.infos.append(message)

    def notify_warning(self, message: str) -> None:
        self.warnings.append(message)

    def notify_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def scripted() -> type[ScriptedCollaborator]:
    """The scripted collaborator class: ``scripted(["Skip", "Overwrite"])``."""
    return ScriptedCollaborator


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Build a directory tree under ``tmp_path/lib`` and return its root.

    Keys are paths relative to the root; a key ending in ``/`` creates
    an empty directory, anything else a file with the given content.
    """

    def _make(entries: dict[str, str]) -> Path:
        root = tmp_path / "lib"
        root.mkdir(exist_ok=True)
        for rel, content in entries.items():
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content, encoding="utf-8")
        return root

    return _make


def snapshot(root: Path) -> dict[str, str]:
    """Every file under ``root`` → its text, keyed by relative POSIX path."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, str]]:
    return snapshot
