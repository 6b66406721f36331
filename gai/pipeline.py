"""Commit message pipeline: staged diff -> request -> API -> message -> commit."""

import logging

from .ai import OpenAIProvider, build_request, validate_response
from .git import GitCLI
from .validation import lint_git_commit_subject

logger = logging.getLogger(__name__)

MODE_HELP = "help"
MODE_GENERATE = "generate"
MODE_COMMIT = "commit"


def select_mode(generate=False, commit=False):
    """Commit mode wins when both flags are given; no flags means help."""
    if commit:
        return MODE_COMMIT
    if generate:
        return MODE_GENERATE
    return MODE_HELP


def generate_commit_message(settings, vcs=None, provider=None, on_request=None):
    """
    Produce a commit message for the staged changes.

    `vcs` and `provider` default to the real git executable and the OpenAI API.
    `on_request` is called right before the network call.
    """
    vcs = vcs or GitCLI()
    diff = vcs.staged_diff()

    request = build_request(settings.model, settings.temperature, diff)

    provider = provider or OpenAIProvider(settings.api_key)
    if on_request is not None:
        on_request()
    response = provider.complete(request)

    message = validate_response(response)
    try:
        lint_git_commit_subject(message)
    except ValueError as exc:
        logger.warning("Generated message is not a conventional commit: %s", exc)
    return message


def run(mode, settings, vcs=None, provider=None, on_request=None):
    """
    Run the pipeline for `mode` and return the message it produced.

    In commit mode the message is committed before it is returned. Help mode
    does nothing and returns None.
    """
    if mode == MODE_HELP:
        return None
    if mode not in (MODE_GENERATE, MODE_COMMIT):
        raise ValueError(f"Unknown mode: {mode}")

    vcs = vcs or GitCLI()
    message = generate_commit_message(
        settings, vcs=vcs, provider=provider, on_request=on_request
    )
    if mode == MODE_COMMIT:
        vcs.commit(message)
        logger.info("Committed staged changes")
    return message
