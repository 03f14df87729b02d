"""
Command line interface for gy.

This module defines the ``main`` function used as the entry point of
the ``gy`` command. It resolves the API key, reads the staged diff,
asks the model for a commit message, lets the operator confirm or edit
it, and finally runs ``git commit``.

Exit codes: ``0`` after a successful commit, ``1`` on any failure
(including "nothing staged"), ``2`` for usage errors reported by click
and ``3`` when the operator aborts.
"""

from __future__ import annotations

import logging

import click

from gy_commit import __version__
from gy_commit.config.credentials import CredentialProvider
from gy_commit.config.loader import ConfigStore
from gy_commit.confirm import STRATEGIES, EmptyMessageError, get_strategy
from gy_commit.console import ProgressIndicator, print_error, print_warning
from gy_commit.llm.anthropic_client import DEFAULT_MODEL, AnthropicClient, LLMError
from gy_commit.llm.commit_message_generator import CommitMessageGenerator
from gy_commit.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_ABORTED = 3

EDIT_MODE_ENV_VAR = "GY_EDIT_MODE"


def fail(message: str) -> click.exceptions.Exit:
    """Report ``message`` on stderr and return the exit to raise."""
    print_error(message)
    return click.exceptions.Exit(EXIT_FAILURE)


def explain_unstaged_changes(client: GitClient, generator: CommitMessageGenerator) -> None:
    """Tell the operator what is unstaged when nothing is staged.

    A model summary of the unstaged diff is printed on stdout when it
    can be produced; generation failures are ignored here because the
    run is ending anyway.
    """
    try:
        unstaged = client.get_unstaged_diff()
    except GitError as exc:
        logger.debug("Could not read unstaged diff: %s", exc)
        unstaged = ""

    if not unstaged.strip():
        click.echo("Nothing staged. Use git add first.", err=True)
        return

    click.echo("No changes are staged. Here's what's unstaged:\n", err=True)
    try:
        summary = generator.generate(unstaged)
    except LLMError as exc:
        logger.debug("Could not summarise unstaged changes: %s", exc)
    else:
        if summary:
            click.echo(f"{summary}\n")
    click.echo("Use 'git add' to stage changes.", err=True)


@click.command()
@click.option(
    "--model",
    default=DEFAULT_MODEL,
    show_default=True,
    help="Model to use for generation.",
)
@click.option(
    "--edit-mode",
    type=click.Choice(sorted(STRATEGIES)),
    default="inline",
    show_default=True,
    envvar=EDIT_MODE_ENV_VAR,
    help="Edit the message on an inline prompt, or confirm it and use $EDITOR.",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="gy")
def main(model: str, edit_mode: str, verbose: bool) -> None:
    """AI-powered git commit message generator.

    Reads the staged diff, asks the model for a conventional commit
    message and commits with it once you confirm.
    """
    # force=True so repeated invocations (tests) get fresh handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    ctx = click.get_current_context(silent=True)

    try:
        api_key = CredentialProvider(ConfigStore()).get_api_key()
        generator = CommitMessageGenerator(AnthropicClient(api_key=api_key, model=model))
        client = GitClient()

        try:
            diff = client.get_staged_diff()
        except GitError as exc:
            raise fail(str(exc))

        if not diff.strip():
            explain_unstaged_changes(client, generator)
            raise click.exceptions.Exit(EXIT_FAILURE)

        try:
            with ProgressIndicator("Generating commit message"):
                message = generator.generate(diff)
        except LLMError as exc:
            raise fail(str(exc))

        if not message:
            raise fail("Failed to generate commit message.")

        try:
            confirmation = get_strategy(edit_mode).resolve_final_message(message)
        except EmptyMessageError as exc:
            raise fail(f"Error: {exc}")

        if not confirmation.should_commit:
            print_warning("Aborted.")
            raise click.exceptions.Exit(EXIT_ABORTED)

        logger.debug("Committing (%s)", confirmation.outcome.value)
        try:
            output = client.commit(confirmation.message)
        except GitError as exc:
            raise fail(f"git commit failed: {exc}")
        if output.strip():
            click.echo(output.rstrip())

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except (click.exceptions.Exit, click.exceptions.Abort):
        # Click handles its own exit/abort exceptions.
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_FAILURE)
