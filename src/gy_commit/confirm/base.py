"""
Shared types for resolving a generated message into a final one.

A :class:`ConfirmationStrategy` turns the generated message into a
:class:`Confirmation`. There are two strategies, chosen at start-up:

* :class:`~gy_commit.confirm.inline.InlineEditStrategy` edits the
  message in place on a single pre-filled input line.
* :class:`~gy_commit.confirm.prompt.PromptStrategy` asks yes/edit/no
  and opens an external editor for "edit".

Either way the result is terminal: accepted, edited (with concrete
text), or aborted.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class EmptyMessageError(Exception):
    """Raised when the operator leaves the commit message empty."""

    def __init__(self, message: str = "Commit message cannot be empty") -> None:
        super().__init__(message)


class ConfirmationOutcome(enum.Enum):
    ACCEPTED = "accepted"
    EDITED = "edited"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Confirmation:
    """Outcome of the confirmation step and the message to commit.

    ``message`` is ``None`` exactly when the outcome is ``ABORTED``.
    """

    outcome: ConfirmationOutcome
    message: Optional[str] = None

    @classmethod
    def accepted(cls, message: str) -> "Confirmation":
        return cls(ConfirmationOutcome.ACCEPTED, message)

    @classmethod
    def edited(cls, message: str) -> "Confirmation":
        return cls(ConfirmationOutcome.EDITED, message)

    @classmethod
    def aborted(cls) -> "Confirmation":
        return cls(ConfirmationOutcome.ABORTED)

    @property
    def should_commit(self) -> bool:
        return self.outcome is not ConfirmationOutcome.ABORTED


class ConfirmationStrategy(ABC):
    """Let the operator accept, edit or reject a generated message."""

    #: Value of ``--edit-mode`` that selects the strategy.
    name: str = ""

    @abstractmethod
    def resolve_final_message(self, generated: str) -> Confirmation:
        """Return the operator's decision about ``generated``.

        Raises
        ------
        EmptyMessageError
            If the operator edits the message down to nothing.
        """
