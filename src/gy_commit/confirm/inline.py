"""
Inline editing of the generated message.

The message is shown as an editable, pre-filled input line. Enter
commits whatever is on the line; Ctrl-C aborts. There is no separate
accept/reject question: leaving the line untouched is an accept.
"""

from __future__ import annotations

import logging

import click
import questionary

from gy_commit.confirm.base import Confirmation, ConfirmationStrategy, EmptyMessageError


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class InlineEditStrategy(ConfirmationStrategy):
    name = "inline"

    def resolve_final_message(self, generated: str) -> Confirmation:
        click.echo("Enter to commit • Ctrl-C to abort", err=True)
        # ask() returns None on Ctrl-C or EOF instead of raising.
        answer = questionary.text("", default=generated, qmark=">").ask()
        if answer is None:
            logger.debug("Inline edit aborted")
            return Confirmation.aborted()

        edited = answer.strip()
        if not edited:
            raise EmptyMessageError()
        if edited == generated:
            return Confirmation.accepted(edited)
        return Confirmation.edited(edited)
