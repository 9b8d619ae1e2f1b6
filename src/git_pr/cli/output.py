"""Output helpers separating human messages from machine-readable results.

Messages for the user go to stderr so stdout stays clean for values other
programs consume (the PR URL, config values).
"""

import click


def user_output(message: str = "") -> None:
    """Write a message for humans to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write a result to stdout."""
    click.echo(message)


def error_output(message: str) -> None:
    """Write an error message with a red ``Error:`` prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
