"""
Commit message generation using an LLM.

This module provides the :class:`CommitMessageGenerator` class, which
sends a diff to the model (via :class:`AnthropicClient`) together with a
fixed system instruction and returns a single Conventional Commit
message such as ``feat: add foo``.
"""

from __future__ import annotations

import logging

from gy_commit.llm.anthropic_client import AnthropicClient


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


COMMIT_TYPES = ("feat", "fix", "refactor", "docs", "style", "test", "chore", "perf", "ci", "build")

MAX_OUTPUT_TOKENS = 256

SYSTEM_PROMPT = (
    "You are a git commit message generator. Given a git diff, produce a single "
    "conventional commit message (type: description). Use lowercase. Be concise. "
    "Output ONLY the commit message, nothing else. If the diff includes multiple "
    "logical changes, use the most significant one for the type. "
    f"Types: {', '.join(COMMIT_TYPES)}."
)


class CommitMessageGenerator:
    """Generate a commit message for a diff."""

    def __init__(self, client: AnthropicClient) -> None:
        self.client = client

    def generate(self, diff: str) -> str:
        """Return the model's commit message for ``diff``, trimmed.

        The result may be empty if the model replied with whitespace
        only; deciding what to do about that is left to the caller.

        Raises
        ------
        LLMError
            If the request fails or the service reports an error. The
            call is made exactly once; there is no retry.
        """
        logger.debug("Generating commit message for %d-line diff", len(diff.splitlines()))
        text = self.client.complete(SYSTEM_PROMPT, diff, MAX_OUTPUT_TOKENS)
        message = text.strip()
        logger.debug("Model returned: %r", message)
        return message
