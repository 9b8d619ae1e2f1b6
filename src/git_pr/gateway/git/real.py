"""Production implementation of the Git gateway using subprocess."""

import logging
import subprocess
from pathlib import Path

from git_pr.gateway.git.abc import Git

logger = logging.getLogger(__name__)

_HEADS_PREFIX = "refs/heads/"


def _run_git(cmd: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    logger.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)
    return subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )


class RealGit(Git):
    """Real implementation of git queries using subprocess."""

    def get_remote_url(self, cwd: Path, remote: str) -> str | None:
        """Read remote.<remote>.url from git config."""
        result = _run_git(["git", "config", "--get", f"remote.{remote}.url"], cwd)
        if result.returncode != 0:
            return None
        url = result.stdout.strip()
        return url if url else None

    def verify_ref(self, cwd: Path, ref: str) -> bool:
        """Verify ref with git rev-parse --verify."""
        result = _run_git(["git", "rev-parse", "--verify", "--quiet", ref], cwd)
        return result.returncode == 0

    def get_current_branch(self, cwd: Path) -> str | None:
        """Read the symbolic HEAD ref and strip refs/heads/."""
        result = _run_git(["git", "symbolic-ref", "--quiet", "HEAD"], cwd)
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch.startswith(_HEADS_PREFIX):
            branch = branch[len(_HEADS_PREFIX) :]
        return branch if branch else None

    def get_last_commit_subject(self, cwd: Path, ref: str) -> str | None:
        """Get the first line of the newest commit message on ref."""
        result = _run_git(["git", "log", "-1", "--format=%s", ref, "--"], cwd)
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def list_remote_branches(self, cwd: Path) -> list[str]:
        """List remote-tracking branches, skipping symbolic <remote>/HEAD entries."""
        result = _run_git(
            ["git", "for-each-ref", "--format=%(refname:lstrip=2)", "refs/remotes"], cwd
        )
        if result.returncode != 0:
            return []
        return [
            line.strip()
            for line in result.stdout.strip().split("\n")
            if line.strip() and not line.strip().endswith("/HEAD")
        ]
