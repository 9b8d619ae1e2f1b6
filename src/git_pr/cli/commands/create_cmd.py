"""Open a pull request from a head branch into a base branch."""

import click

from git_pr.cli.completions import complete_remote_branches
from git_pr.cli.ensure import handle_git_pr_errors
from git_pr.cli.output import machine_output, user_output
from git_pr.core.config import require_credentials
from git_pr.core.context import GitPrContext


@click.command("create")
@click.argument("base", metavar="BASE", shell_complete=complete_remote_branches)
@click.option(
    "--head",
    "head",
    metavar="HEAD",
    default=None,
    shell_complete=complete_remote_branches,
    help="Head branch as <remote>/<branch> (default: current branch on your account)",
)
@click.option("--merge", is_flag=True, help="Merge the pull request right after creating it")
@click.option(
    "--browse/--no-browse",
    default=True,
    help="Open the pull request in a browser (default: browse)",
)
@click.pass_obj
def create_cmd(ctx: GitPrContext, base: str, head: str | None, merge: bool, browse: bool) -> None:
    """Create a pull request into BASE.

    BASE and HEAD are written <remote>/<branch>; the remote's URL decides
    which GitHub account owns that side. A BASE without a remote prefix
    uses the configured default remote.

    Examples:

        # Ask upstream to pull the current branch from your fork
        git-pr create upstream/main

        # Explicit head, merged immediately
        git-pr create origin/main --head origin/release-1.2 --merge
    """
    with handle_git_pr_errors():
        require_credentials(ctx.config)
        request = ctx.pull_request_builder().build_create_request(base, head, merge)

        api = ctx.github_api()
        user_output(f"Creating pull request {request.payload.head} -> {request.payload.base}...")
        created = api.create_pull_request(request)
        user_output(click.style(f"✓ Created pull request #{created.number}", fg="green"))
        machine_output(created.html_url)

        if request.attempt_merge:
            outcome = api.merge_pull_request(request.endpoint_url, created.number)
            user_output(click.style(f"✓ {outcome.message or 'Merged'}", fg="green"))

    if browse:
        ctx.browser.launch(created.html_url)
