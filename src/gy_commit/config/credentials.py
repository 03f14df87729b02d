"""
Resolution of the Anthropic API key.

The key is looked up in this order, first non-empty value wins:

1. the ``ANTHROPIC_API_KEY`` environment variable,
2. the ``anthropic_api_key`` field of the config file,
3. an interactive prompt.

A key typed at the prompt is validated against the service before it is
used, and only a validated key is written to the config file. The
prompt loop has no retry limit; the operator leaves it with Ctrl-C.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Mapping, Optional

import click

from gy_commit.config.loader import Config, ConfigError, ConfigStore
from gy_commit.console import print_warning
from gy_commit.llm.anthropic_client import AnthropicClient, LLMError


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"


def _prompt_for_key() -> str:
    return click.prompt(
        "Enter your Anthropic API key",
        default="",
        show_default=False,
        hide_input=True,
    )


class CredentialProvider:
    """Find or ask for a usable API key.

    Parameters
    ----------
    store : ConfigStore
        Where validated keys are loaded from and saved to.
    environ : Mapping[str, str], optional
        Environment to read ``ANTHROPIC_API_KEY`` from. Defaults to
        :data:`os.environ`.
    client_factory : callable, optional
        Builds the client used to validate a typed key. Defaults to
        :class:`AnthropicClient`.
    prompt : callable, optional
        Reads one line from the operator. Defaults to a hidden
        :func:`click.prompt`.
    """

    def __init__(
        self,
        store: ConfigStore,
        environ: Optional[Mapping[str, str]] = None,
        client_factory: Callable[[str], AnthropicClient] = AnthropicClient,
        prompt: Callable[[], str] = _prompt_for_key,
    ) -> None:
        self.store = store
        self.environ = os.environ if environ is None else environ
        self.client_factory = client_factory
        self.prompt = prompt

    def from_environment(self) -> Optional[str]:
        return self.environ.get(API_KEY_ENV_VAR) or None

    def from_config(self) -> Optional[str]:
        config = self.store.load()
        if config is None:
            return None
        return config.anthropic_api_key or None

    def get_api_key(self) -> str:
        """Return the first available key, prompting if there is none."""
        api_key = self.from_environment()
        if api_key:
            logger.debug("Using API key from %s", API_KEY_ENV_VAR)
            return api_key

        api_key = self.from_config()
        if api_key:
            logger.debug("Using API key from %s", self.store.path)
            return api_key

        logger.debug("No stored API key; prompting")
        return self.prompt_until_valid()

    def prompt_until_valid(self) -> str:
        """Ask for a key until one passes validation, then persist it."""
        while True:
            api_key = self.prompt().strip()
            if not api_key:
                click.echo("API key cannot be empty. Please try again.", err=True)
                continue

            click.echo("Validating API key...", nl=False)
            try:
                self.client_factory(api_key).validate_key()
            except LLMError as exc:
                click.echo(" Invalid!")
                click.echo(f"Error: {exc}", err=True)
                click.echo("Please try again with a valid API key.", err=True)
                continue

            click.echo(" Valid!")
            self._persist(api_key)
            return api_key

    def _persist(self, api_key: str) -> None:
        try:
            self.store.save(Config(anthropic_api_key=api_key))
        except ConfigError as exc:
            print_warning(str(exc))
            return
        click.echo(f"API key saved to {self.store.path}")
