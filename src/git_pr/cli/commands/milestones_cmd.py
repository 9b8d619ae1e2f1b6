"""List open milestones of a remote's repository."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_pr.cli.ensure import handle_git_pr_errors
from git_pr.cli.output import user_output
from git_pr.core.context import GitPrContext


def _format_due_on(due_on: str | None) -> str:
    """Trim an ISO 8601 timestamp to its date ("2024-03-01T08:00:00Z" -> "2024-03-01")."""
    if due_on is None:
        return ""
    return due_on.split("T", 1)[0]


@click.command("milestones")
@click.option(
    "--remote",
    "remote",
    metavar="ALIAS",
    default=None,
    help="Remote whose repository to query (default: configured default remote)",
)
@click.pass_obj
def milestones_cmd(ctx: GitPrContext, remote: str | None) -> None:
    """List open milestones."""
    remote_alias = remote if remote is not None else ctx.config.default_remote

    with handle_git_pr_errors():
        api = ctx.github_api()
        milestones_url = ctx.resolver.api_url(remote_alias, "milestones")
        milestones = api.list_open_milestones(milestones_url)

    if not milestones:
        user_output("No open milestones found.")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", no_wrap=True)
    table.add_column("title")
    table.add_column("open", justify="right")
    table.add_column("closed", justify="right")
    table.add_column("due", no_wrap=True)

    for milestone in milestones:
        table.add_row(
            f"[link={milestone.html_url}]{milestone.number}[/link]",
            escape(milestone.title),
            str(milestone.open_issues),
            str(milestone.closed_issues),
            _format_due_on(milestone.due_on),
        )

    console = Console(stderr=True, force_terminal=True)
    console.print(table)
