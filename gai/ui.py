"""Display utilities and UI helpers."""

import time

import click


def display_spinning_animation(message="Generating commit message..."):
    """Display a short spinning animation with a message on stderr."""
    animation = "|/-\\"
    spin_cycles = 12
    for i in range(spin_cycles):
        frame = animation[i % len(animation)]
        click.echo(f"\r{message} {frame}", nl=False, err=True)
        time.sleep(0.05)
    click.echo(f"\r{message}  ", err=True)


def format_generated_message(message):
    """Format a generated message together with a ready-to-run commit command."""
    return "\n".join(
        [
            "Generated commit message:",
            message,
            "",
            "To use this message:",
            f'git commit -m "{message}"',
        ]
    )


def format_committed_message(message):
    return f'Committed with message: "{message}"'


def format_banner():
    return "\n".join(
        [
            "gai - AI powered git commit messages",
            "Use --generate (-g) to create a commit message",
            "Use --commit (-c) to commit with the generated message",
            "",
            "Run 'gai --help' for more options",
        ]
    )
