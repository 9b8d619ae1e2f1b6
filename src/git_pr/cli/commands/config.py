"""Inspect and persist git-pr settings."""

import click

from git_pr.cli.ensure import Ensure, handle_git_pr_errors
from git_pr.cli.output import machine_output, user_output
from git_pr.core.config import CONFIG_KEYS, write_config_value
from git_pr.core.context import GitPrContext


def _mask_token(token: str) -> str:
    """Show only the last four characters of a token."""
    if len(token) <= 4:
        return "****"
    return "*" * (len(token) - 4) + token[-4:]


def _display_value(key: str, value: str | None) -> str:
    if value is None:
        return "(not set)"
    if key == "token":
        return _mask_token(value)
    return value


@click.group("config")
def config_group() -> None:
    """Manage git-pr configuration."""


@config_group.command("keys")
def config_keys() -> None:
    """List all configuration keys with descriptions."""
    formatter = click.HelpFormatter()
    formatter.write_dl(list(CONFIG_KEYS.items()))
    user_output(formatter.getvalue().rstrip())


@config_group.command("show")
@click.pass_obj
def config_show(ctx: GitPrContext) -> None:
    """Print every setting, with the token masked."""
    user_output(click.style(f"Configuration ({ctx.config_path}):", bold=True))
    for key in CONFIG_KEYS:
        user_output(f"  {key}={_display_value(key, getattr(ctx.config, key))}")


@config_group.command("get")
@click.argument("key", metavar="KEY", type=click.Choice(list(CONFIG_KEYS)))
@click.pass_obj
def config_get(ctx: GitPrContext, key: str) -> None:
    """Print the value of KEY."""
    value = Ensure.not_none(getattr(ctx.config, key), f"'{key}' is not set")
    machine_output(value)


@config_group.command("set")
@click.argument("key", metavar="KEY", type=click.Choice(list(CONFIG_KEYS)))
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GitPrContext, key: str, value: str) -> None:
    """Store VALUE for KEY in the config file."""
    with handle_git_pr_errors():
        write_config_value(ctx.config_path, key, value)
    user_output(f"Set {key}={_display_value(key, value)} in {ctx.config_path}")


@config_group.command("path")
@click.pass_obj
def config_path(ctx: GitPrContext) -> None:
    """Print the location of the config file."""
    machine_output(str(ctx.config_path))
