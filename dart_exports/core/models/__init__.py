"""
Domain models — Pydantic types for export generation.

    from dart_exports.core.models import ExportSettings, ConflictDecision, DirectoryOutcome
"""

from dart_exports.core.models.exports import ConflictDecision, DirectoryOutcome
from dart_exports.core.models.settings import ExportSettings

__all__ = [
    # exports.py
    "ConflictDecision",
    "DirectoryOutcome",
    # settings.py
    "ExportSettings",
]
