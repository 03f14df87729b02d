"""
Language model integration for gy_commit.

This package contains the :class:`AnthropicClient` for talking to the
Anthropic Messages API and the :class:`CommitMessageGenerator` which
uses it to turn a diff into a commit message.
"""

from .anthropic_client import AnthropicClient, GenerationRequest, LLMError  # noqa: F401
from .commit_message_generator import CommitMessageGenerator  # noqa: F401
