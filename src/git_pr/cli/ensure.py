"""CLI precondition checks and error translation.

Domain code raises GitPrError subclasses; commands translate them into a
red ``Error:`` message and exit code 1 here, in one place.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from git_pr.cli.output import error_output
from git_pr.core.errors import GitPrError

T = TypeVar("T")


class Ensure:
    """Helpers that exit with a user-facing error when a check fails."""

    @staticmethod
    def not_none(value: T | None, message: str) -> T:
        """Return value, or exit with message if it is None.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            error_output(message)
            raise SystemExit(1)
        return value


@contextmanager
def handle_git_pr_errors() -> Iterator[None]:
    """Report any GitPrError raised in the block and exit with code 1."""
    try:
        yield
    except GitPrError as e:
        error_output(str(e))
        raise SystemExit(1) from e
