"""List open pull requests of a remote's repository."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_pr.cli.ensure import handle_git_pr_errors
from git_pr.cli.output import user_output
from git_pr.core.context import GitPrContext
from git_pr.github.types import PullRequestSummary


def _format_pr_number_cell(pr: PullRequestSummary) -> str:
    """Format PR number with a draft marker and a clickable link."""
    marker = "◯" if pr.is_draft else "●"
    return f"{marker} [link={pr.html_url}]#{pr.number}[/link]"


@click.command("list")
@click.option(
    "--remote",
    "remote",
    metavar="ALIAS",
    default=None,
    help="Remote whose repository to query (default: configured default remote)",
)
@click.pass_obj
def list_cmd(ctx: GitPrContext, remote: str | None) -> None:
    """List open pull requests.

    Shows number, head and base branches, author and title of the open pull
    requests in the repository REMOTE points at.
    """
    remote_alias = remote if remote is not None else ctx.config.default_remote

    with handle_git_pr_errors():
        api = ctx.github_api()
        pulls_url = ctx.resolver.api_url(remote_alias, "pulls")
        prs = api.list_open_pull_requests(pulls_url)

    if not prs:
        user_output("No open pull requests found.")
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("pr", no_wrap=True)
    table.add_column("head → base", no_wrap=True)
    table.add_column("author", no_wrap=True)
    table.add_column("title")

    for pr in prs:
        table.add_row(
            _format_pr_number_cell(pr),
            f"{escape(pr.head_label)} → {escape(pr.base_label)}",
            escape(pr.author or ""),
            escape(pr.title),
        )

    console = Console(stderr=True, force_terminal=True)
    console.print(table)
