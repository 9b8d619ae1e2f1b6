"""Parsing of git remote URLs into GitHub host, owner and repository.

Two URL shapes are accepted, matching what git itself supports for
remotes hosted on GitHub:

    scheme://[user[:password]@]host[:port]/owner/repo[.git]
    [user@]host:owner/repo[.git]

Examples:
    >>> parse_remote_url("git@github.com:alice/proj.git")
    ParsedRemoteUrl(host='github.com', owner='alice', repo='proj')
    >>> parse_remote_url("https://github.com/alice/proj.git")
    ParsedRemoteUrl(host='github.com', owner='alice', repo='proj')
"""

import re
from dataclasses import dataclass

from git_pr.core.errors import ConfigError

_SCHEME_URL_RE = re.compile(
    r"""
    ^(?P<scheme>[a-z][a-z0-9+.-]*)://     # https://, ssh://, git+ssh://
    (?:[^@/]+@)?                          # optional user[:password]@
    (?P<host>[^/:]+)                      # host
    (?::\d*)?                             # optional :port
    /(?P<path>.*)$
    """,
    re.VERBOSE | re.IGNORECASE,
)

_SCP_URL_RE = re.compile(
    r"""
    ^(?:[^@/:]+@)?                        # optional user@
    (?P<host>[^/:]+)                      # host
    :(?!//)(?P<path>.*)$                  # :path (but not scheme://)
    """,
    re.VERBOSE,
)

_GIT_SUFFIX = ".git"


@dataclass(frozen=True)
class ParsedRemoteUrl:
    """Host, owner and repository extracted from a remote URL."""

    host: str
    owner: str
    repo: str


def parse_remote_url(url: str) -> ParsedRemoteUrl:
    """Parse a git remote URL.

    The scheme and host prefix are stripped first, then the first path
    segment is taken as the owner and the last one, without its ``.git``
    suffix, as the repository.

    Args:
        url: Raw remote URL as configured in git

    Returns:
        ParsedRemoteUrl with host, owner and repo

    Raises:
        ConfigError: If the URL matches neither accepted shape or lacks an
            owner or repository segment
    """
    stripped = url.strip()
    match = _SCHEME_URL_RE.match(stripped) or _SCP_URL_RE.match(stripped)
    if match is None:
        raise ConfigError(f"Unrecognized remote URL '{url}'")

    host = match.group("host")
    segments = [segment for segment in match.group("path").split("/") if segment]
    if len(segments) < 2:
        raise ConfigError(f"Remote URL '{url}' does not name an owner and repository")

    owner = segments[0]
    repo = segments[-1]
    if repo.endswith(_GIT_SUFFIX):
        repo = repo[: -len(_GIT_SUFFIX)]
    if not repo:
        raise ConfigError(f"Remote URL '{url}' has an empty repository name")

    return ParsedRemoteUrl(host=host, owner=owner, repo=repo)


def api_base_url(host: str) -> str:
    """REST API root for a GitHub host (``github.com`` -> ``https://api.github.com``)."""
    return f"https://api.{host}"
