import logging

import click

from git_pr.cli.commands.completion import completion_cmd
from git_pr.cli.commands.config import config_group
from git_pr.cli.commands.create_cmd import create_cmd
from git_pr.cli.commands.list_cmd import list_cmd
from git_pr.cli.commands.milestones_cmd import milestones_cmd
from git_pr.cli.ensure import handle_git_pr_errors
from git_pr.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-pr")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Open and inspect GitHub pull requests from local git branches."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        with handle_git_pr_errors():
            ctx.obj = create_context()


cli.add_command(completion_cmd)
cli.add_command(config_group)
cli.add_command(create_cmd)
cli.add_command(list_cmd)
cli.add_command(milestones_cmd)


def main() -> None:
    """CLI entry point used by the `git-pr` console script."""
    cli()
