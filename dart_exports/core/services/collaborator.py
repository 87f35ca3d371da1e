"""
Collaborator — the decision and notification seam of a generation run.

The walker never renders anything itself. It asks a collaborator to
pick one of a few options when an aggregator already exists, and
hands it info / warning / error messages to show.

Implementations:
    - ClickCollaborator (ui/cli/prompts.py) — interactive terminal
    - PolicyCollaborator (here) — answers every prompt the same way
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from dart_exports.core.models.exports import ConflictDecision

logger = logging.getLogger(__name__)


class Collaborator(ABC):
    """Abstract base for prompt + notification providers."""

    @abstractmethod
    def prompt_choice(self, message: str, options: Sequence[str]) -> str | None:
        """Ask the user to pick one of ``options``.

        Returns:
            The chosen option, or None if the prompt was dismissed.
        """

    @abstractmethod
    def notify_info(self, message: str) -> None:
        """Show an informational message."""

    @abstractmethod
    def notify_warning(self, message: str) -> None:
        """Show a warning."""

    @abstractmethod
    def notify_error(self, message: str) -> None:
        """Show an error."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class PolicyCollaborator(Collaborator):
    """Non-interactive collaborator with a fixed conflict decision.

    Notifications are collected in ``messages`` as ``(level, text)``
    pairs so callers can report them afterwards.
    """

    def __init__(self, decision: ConflictDecision = ConflictDecision.OVERWRITE) -> None:
        self.decision = decision
        self.messages: list[tuple[str, str]] = []

    def prompt_choice(self, message: str, options: Sequence[str]) -> str | None:
        logger.debug("Auto-answering %r with %s", message, self.decision.value)
        return self.decision.value

    def notify_info(self, message: str) -> None:
        self.messages.append(("info", message))

    def notify_warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def notify_error(self, message: str) -> None:
        self.messages.append(("error", message))
