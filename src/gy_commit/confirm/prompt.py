"""
Prompt-and-branch confirmation.

The generated message is printed and the operator answers
``[y]es / [e]dit / [n]o``. Answers are case-insensitive and may be
abbreviated to one letter; anything unrecognised counts as "no".
Choosing edit opens the message in an :class:`ExternalEditor`; if the
editor fails the generated message is used unchanged.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import click

from gy_commit.confirm.base import Confirmation, ConfirmationStrategy, EmptyMessageError
from gy_commit.confirm.editor import EditorError, ExternalEditor
from gy_commit.console import print_warning


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


ACCEPT = "accept"
EDIT = "edit"
REJECT = "reject"

_ANSWERS = {
    "y": ACCEPT,
    "yes": ACCEPT,
    "e": EDIT,
    "edit": EDIT,
    "n": REJECT,
    "no": REJECT,
}


def normalize_answer(answer: str) -> str:
    """Map a typed answer to :data:`ACCEPT`, :data:`EDIT` or :data:`REJECT`.

    >>> normalize_answer(" YES ")
    'accept'
    >>> normalize_answer("maybe")
    'reject'
    """
    return _ANSWERS.get(answer.strip().lower(), REJECT)


def _ask() -> str:
    return click.prompt(
        "Commit with this message? [y]es / [e]dit / [n]o",
        default="",
        show_default=False,
    )


class PromptStrategy(ConfirmationStrategy):
    name = "editor"

    def __init__(
        self,
        editor: Optional[ExternalEditor] = None,
        ask: Callable[[], str] = _ask,
    ) -> None:
        self.editor = editor if editor is not None else ExternalEditor()
        self.ask = ask

    def resolve_final_message(self, generated: str) -> Confirmation:
        click.echo(f"\n{generated}\n")
        choice = normalize_answer(self.ask())
        logger.debug("Operator chose %s", choice)

        if choice == ACCEPT:
            return Confirmation.accepted(generated)
        if choice == REJECT:
            return Confirmation.aborted()

        try:
            edited = self.editor.edit(generated)
        except EditorError as exc:
            print_warning(f"{exc}; using the generated message")
            return Confirmation.accepted(generated)
        if not edited:
            raise EmptyMessageError()
        return Confirmation.edited(edited)
