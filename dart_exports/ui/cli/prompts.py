"""
Terminal collaborator — click prompts and coloured notifications.

Everything goes to stderr so ``generate --json`` keeps stdout clean.
"""

from __future__ import annotations

from collections.abc import Sequence

import click

from dart_exports.core.models.exports import ConflictDecision
from dart_exports.core.services.collaborator import Collaborator

# --on-conflict values → fixed decision (None = ask)
CONFLICT_POLICIES: dict[str, ConflictDecision | None] = {
    "ask": None,
    "overwrite": ConflictDecision.OVERWRITE,
    "skip": ConflictDecision.SKIP,
    "overwrite-all": ConflictDecision.OVERWRITE_ALL,
}


class ClickCollaborator(Collaborator):
    """Interactive collaborator for the command line.

    Args:
        quiet: Suppress info messages (warnings and errors still show).
    """

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet

    def prompt_choice(self, message: str, options: Sequence[str]) -> str | None:
        try:
            return click.prompt(
                click.style(message, fg="yellow"),
                type=click.Choice(list(options), case_sensitive=False),
                err=True,
            )
        except click.Abort:
            # Ctrl-C / EOF on the prompt: leave this directory alone
            click.echo(err=True)
            return None

    def notify_info(self, message: str) -> None:
        if not self.quiet:
            click.secho(f"ℹ️  {message}", fg="cyan", err=True)

    def notify_warning(self, message: str) -> None:
        click.secho(f"⚠️  {message}", fg="yellow", err=True)

    def notify_error(self, message: str) -> None:
        click.secho(f"❌ {message}", fg="red", err=True)


class EchoingPolicyCollaborator(ClickCollaborator):
    """Answers every prompt with a fixed decision, prints like ClickCollaborator."""

    def __init__(self, decision: ConflictDecision, quiet: bool = False) -> None:
        super().__init__(quiet=quiet)
        self.decision = decision

    def prompt_choice(self, message: str, options: Sequence[str]) -> str | None:
        return self.decision.value


def collaborator_for(policy: str, quiet: bool = False) -> Collaborator:
    """Build the collaborator matching an ``--on-conflict`` value."""
    decision = CONFLICT_POLICIES[policy]
    if decision is None:
        return ClickCollaborator(quiet=quiet)
    return EchoingPolicyCollaborator(decision, quiet=quiet)
