"""Abstract interface for the git queries git-pr depends on.

Only read operations are needed: remote URLs, reference verification, the
current branch, commit subjects and the remote-tracking branch list.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git read operations.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def get_remote_url(self, cwd: Path, remote: str) -> str | None:
        """Get the configured URL of a remote.

        Args:
            cwd: Working directory inside the repository
            remote: Remote name (e.g., "origin")

        Returns:
            The value of remote.<remote>.url, or None if not configured
        """
        ...

    @abstractmethod
    def verify_ref(self, cwd: Path, ref: str) -> bool:
        """Check whether a name resolves to a git reference.

        Accepts local branches, remote-tracking branches (``origin/main``)
        and anything else ``git rev-parse --verify`` understands.

        Args:
            cwd: Working directory inside the repository
            ref: Reference name to verify

        Returns:
            True if the reference exists
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name without the ``refs/heads/`` prefix, or None when
            HEAD is detached or cwd is not a repository
        """
        ...

    @abstractmethod
    def get_last_commit_subject(self, cwd: Path, ref: str) -> str | None:
        """Get the subject line of the newest commit on a reference.

        Returns:
            First line of the commit message, or None if ref does not resolve
        """
        ...

    @abstractmethod
    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List remote-tracking branches as ``<remote>/<branch>`` names.

        Returns an empty list when cwd is not a repository.
        """
        ...
