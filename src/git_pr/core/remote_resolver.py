"""Resolution of git remotes to GitHub owners and API endpoints."""

import logging
from dataclasses import dataclass
from pathlib import Path

from git_pr.core.errors import ConfigError
from git_pr.core.remote_url import api_base_url, parse_remote_url
from git_pr.gateway.git.abc import Git

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteRef:
    """A configured git remote and the GitHub repository it points at."""

    alias: str
    owner: str
    url: str
    host: str
    repo: str


class RemoteResolver:
    """Maps remote aliases to owners and REST endpoint URLs.

    Results depend only on the git configuration visible from cwd; nothing
    is cached, and no network calls are made.
    """

    def __init__(self, git: Git, cwd: Path) -> None:
        self._git = git
        self._cwd = cwd

    def resolve_remote(self, remote_alias: str) -> RemoteRef:
        """Look up and parse the URL configured for remote_alias.

        Raises:
            ConfigError: If the remote is not configured or its URL is not a
                recognized GitHub remote URL
        """
        url = self._git.get_remote_url(self._cwd, remote_alias)
        if url is None:
            raise ConfigError(f"Remote '{remote_alias}' is not configured")

        parsed = parse_remote_url(url)
        logger.debug(
            "Remote %s -> %s/%s on %s", remote_alias, parsed.owner, parsed.repo, parsed.host
        )
        return RemoteRef(
            alias=remote_alias,
            owner=parsed.owner,
            url=url,
            host=parsed.host,
            repo=parsed.repo,
        )

    def resolve_owner(self, remote_alias: str) -> str:
        """Return the GitHub account or organization that owns remote_alias."""
        return self.resolve_remote(remote_alias).owner

    def api_url(self, remote_alias: str, resource_path: str) -> str:
        """Build the REST URL of a repository resource.

        Example:
            With origin = git@github.com:alice/proj.git,
            api_url("origin", "pulls") is
            "https://api.github.com/repos/alice/proj/pulls".
        """
        remote = self.resolve_remote(remote_alias)
        path = resource_path.lstrip("/")
        return f"{api_base_url(remote.host)}/repos/{remote.owner}/{remote.repo}/{path}"
