"""Output utilities for CLI commands with clear intent.

user_output carries progress and diagnostics to stderr so that stdout holds only
the submission summary.
"""

import click


def user_output(message: str = "") -> None:
    """Print a progress or diagnostic line for the person at the terminal."""
    click.echo(message, err=True)


def success_mark() -> str:
    return click.style("✓", fg="green")
