"""CLI command and entry point."""

import logging

import click

from .config import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    MAX_TEMPERATURE,
    MIN_TEMPERATURE,
    __version__,
    load_env_file,
    load_settings,
)
from .errors import GaiError, format_error_chain
from .pipeline import MODE_COMMIT, MODE_HELP, select_mode
from .ui import format_banner, format_committed_message, format_generated_message

logger = logging.getLogger(__name__)


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("-g", "--generate", is_flag=True, help="Generate a commit message from staged changes")
@click.option("-c", "--commit", is_flag=True, help="Generate and immediately commit with the message")
@click.option(
    "-m",
    "--model",
    default=DEFAULT_MODEL,
    show_default=True,
    help="Model to use",
)
@click.option(
    "-t",
    "--temperature",
    default=DEFAULT_TEMPERATURE,
    show_default=True,
    type=click.FloatRange(MIN_TEMPERATURE, MAX_TEMPERATURE),
    help="Temperature for generation",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(generate, commit, model, temperature, verbose):
    """Generate AI-powered git commit messages from your staged diff."""
    import gai

    configure_logging(verbose)

    mode = select_mode(generate=generate, commit=commit)
    if mode == MODE_HELP:
        click.echo(format_banner())
        return

    load_env_file()
    try:
        settings = load_settings(model=model, temperature=temperature)
        message = gai.run_pipeline(
            mode,
            settings,
            vcs=gai.GitCLI(),
            provider=gai.OpenAIProvider(settings.api_key),
            on_request=gai.display_spinning_animation,
        )
    except GaiError as exc:
        logger.debug("Pipeline failed", exc_info=True)
        raise click.ClickException(format_error_chain(exc)) from exc

    if mode == MODE_COMMIT:
        click.secho(format_committed_message(message), fg="green")
    else:
        click.echo(format_generated_message(message))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
