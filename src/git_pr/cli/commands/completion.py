"""Print shell completion scripts."""

import click
from click.shell_completion import get_completion_class

_PROG_NAME = "git-pr"
_COMPLETE_VAR = "_GIT_PR_COMPLETE"


@click.command("completion")
@click.argument("shell", type=click.Choice(["bash", "zsh", "fish"]))
@click.pass_context
def completion_cmd(ctx: click.Context, shell: str) -> None:
    """Print the completion script for SHELL.

    Examples:

        # bash, in ~/.bashrc
        eval "$(git-pr completion bash)"

        # fish
        git-pr completion fish > ~/.config/fish/completions/git-pr.fish
    """
    completion_class = get_completion_class(shell)
    assert completion_class is not None, f"click has no completion support for {shell}"
    completer = completion_class(ctx.find_root().command, {}, _PROG_NAME, _COMPLETE_VAR)
    click.echo(completer.source())
