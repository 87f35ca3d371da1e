"""
Export run models — conflict decisions and per-directory outcomes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel


class ConflictDecision(StrEnum):
    """Answers offered when an aggregator file already exists.

    The values double as the option labels shown to the user.
    """

    OVERWRITE = "Overwrite"
    SKIP = "Skip"
    OVERWRITE_ALL = "Overwrite All"

    @classmethod
    def options(cls) -> list[str]:
        return [d.value for d in cls]


class DirectoryOutcome(BaseModel):
    """What happened to one directory during a run.

    Statuses:
        written    — aggregator content written to ``target``.
        skipped    — user chose Skip; nothing below was touched.
        dismissed  — prompt closed without an answer; treated like skip,
                     but without the warning.
        empty      — nothing to export; no aggregator written and the
                     parent does not reference this directory.
        failed     — listing or writing failed; see ``error``.
    """

    path: str
    target: str
    status: Literal["written", "skipped", "dismissed", "empty", "failed"]
    exports: int = 0
    error: str | None = None
