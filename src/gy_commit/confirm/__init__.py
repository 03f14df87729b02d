"""
Confirmation of generated commit messages.

Two interchangeable strategies are available through
:func:`get_strategy`: ``inline`` (edit on a pre-filled input line) and
``editor`` (yes/edit/no prompt with an external editor).
"""

from __future__ import annotations

from typing import Dict, Type

from .base import (  # noqa: F401
    Confirmation,
    ConfirmationOutcome,
    ConfirmationStrategy,
    EmptyMessageError,
)
from .editor import EditorError, ExternalEditor  # noqa: F401
from .inline import InlineEditStrategy
from .prompt import PromptStrategy


STRATEGIES: Dict[str, Type[ConfirmationStrategy]] = {
    InlineEditStrategy.name: InlineEditStrategy,
    PromptStrategy.name: PromptStrategy,
}


def get_strategy(name: str) -> ConfirmationStrategy:
    """Instantiate the strategy registered under ``name``.

    Raises
    ------
    KeyError
        If no strategy has that name.
    """
    return STRATEGIES[name]()
