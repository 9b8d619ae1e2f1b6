"""Shell completion callbacks for command arguments."""

import logging

import click
from click.shell_completion import CompletionItem

from git_pr.core.context import GitPrContext, create_context
from git_pr.core.errors import GitPrError

logger = logging.getLogger(__name__)


def _context_for_completion(ctx: click.Context) -> GitPrContext:
    root = ctx.find_root()
    if isinstance(root.obj, GitPrContext):
        return root.obj
    # The root callback does not run during completion, so ctx.obj may be unset.
    return create_context()


def complete_remote_branches(
    ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete ``<remote>/<branch>`` names from the remote-tracking branches.

    Offers nothing when the context cannot be built, e.g. with a broken
    config file; the error surfaces on the next real invocation instead.
    """
    try:
        git_pr_ctx = _context_for_completion(ctx)
    except GitPrError as e:
        logger.debug("No completions: %s", e)
        return []
    branches = git_pr_ctx.git.list_remote_branches(git_pr_ctx.cwd)
    return [CompletionItem(branch) for branch in branches if branch.startswith(incomplete)]
