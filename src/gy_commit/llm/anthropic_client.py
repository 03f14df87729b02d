"""
Client for the Anthropic Messages API.

This client wraps HTTP requests to ``/v1/messages``. Every failure
(connection problems, non-2xx responses, unparseable or empty bodies)
is raised as :class:`LLMError` with a message suitable for showing to
the operator. No timeout is applied to requests.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


API_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-haiku-4-5-20251001"

# Parameters of the cheap request used to check a freshly entered key.
VALIDATION_MAX_TOKENS = 10
VALIDATION_SYSTEM_PROMPT = "Reply with ok"
VALIDATION_USER_MESSAGE = "test"


class LLMError(Exception):
    """Raised when communication with the model service fails.

    ``status_code`` is set when the service answered with an HTTP
    error, and is ``None`` for transport or parsing failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class GenerationRequest:
    """A single Messages API request."""

    model: str
    max_tokens: int
    system: str
    messages: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def single_turn(cls, model: str, max_tokens: int, system: str, user_content: str) -> "GenerationRequest":
        return cls(
            model=model,
            max_tokens=max_tokens,
            system=system,
            messages=[{"role": "user", "content": user_content}],
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": self.messages,
            "system": self.system,
        }


def extract_error_message(body: str) -> Optional[str]:
    """Return ``error.message`` from an API error envelope, if present.

    >>> extract_error_message('{"error": {"message": "overloaded"}}')
    'overloaded'
    >>> extract_error_message("Bad Gateway") is None
    True
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) else None


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


@dataclass
class AnthropicClient:
    """Client for the Anthropic Messages API.

    Parameters
    ----------
    api_key : str
        Credential sent in the ``x-api-key`` header. It is never logged.
    model : str, optional
        Model identifier used by :meth:`complete`.
    base_url : str, optional
        Endpoint URL, overridable for tests or proxies.
    request_timeout : float, optional
        Timeout in seconds for HTTP requests. ``None`` (the default)
        waits indefinitely.
    """

    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = API_URL
    request_timeout: Optional[float] = None

    def _headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": API_VERSION,
            "content-type": "application/json",
        }

    def _post(self, request: GenerationRequest) -> requests.Response:
        logger.debug(
            "Sending request to %s (model=%s, max_tokens=%d, input=%d chars)",
            self.base_url,
            request.model,
            request.max_tokens,
            sum(len(m["content"]) for m in request.messages),
        )
        try:
            return requests.post(
                self.base_url,
                headers=self._headers(),
                json=request.to_payload(),
                timeout=self.request_timeout,
            )
        except requests.RequestException as exc:
            logger.debug("Failed to reach model service: %s", exc)
            raise LLMError(f"API request failed: {exc}") from exc

    def send(self, request: GenerationRequest) -> str:
        """Send ``request`` and return the first text segment of the reply.

        The text is returned untrimmed.

        Raises
        ------
        LLMError
            If the request fails, the service reports an error, or the
            response has no content.
        """
        response = self._post(request)
        if not _is_success(response):
            body = response.text
            logger.debug("Model service returned status %s: %s", response.status_code, body)
            message = extract_error_message(body)
            if message is not None:
                raise LLMError(f"API error: {message}", status_code=response.status_code)
            raise LLMError(
                f"API error ({response.status_code}): {body}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMError(f"Failed to parse response: {exc}") from exc

        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list):
            raise LLMError("Failed to parse response: missing 'content' list")
        if not content:
            raise LLMError("Empty response from API")

        first = content[0]
        text = first.get("text") if isinstance(first, dict) else None
        if not isinstance(text, str):
            raise LLMError("Failed to parse response: content has no text")
        return text

    def complete(self, system: str, user_content: str, max_tokens: int) -> str:
        """Run a one-turn conversation against :attr:`model`."""
        request = GenerationRequest.single_turn(self.model, max_tokens, system, user_content)
        return self.send(request)

    def validate_key(self) -> None:
        """Check that :attr:`api_key` is accepted by the service.

        A minimal request is sent to the default model regardless of
        :attr:`model`. On failure the raised :class:`LLMError` carries
        the service's own message when the error envelope parses, and a
        generic status message otherwise.
        """
        request = GenerationRequest.single_turn(
            DEFAULT_MODEL,
            VALIDATION_MAX_TOKENS,
            VALIDATION_SYSTEM_PROMPT,
            VALIDATION_USER_MESSAGE,
        )
        response = self._post(request)
        if _is_success(response):
            return
        message = extract_error_message(response.text)
        if message is None:
            message = f"API error ({response.status_code})"
        raise LLMError(message, status_code=response.status_code)
