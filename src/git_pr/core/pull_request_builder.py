"""Construction of create-pull-request API calls from local branch state.

A pull request goes from a head branch to a base branch. Each side is given
on the command line as ``<remote>/<branch>``; the remote's URL decides which
GitHub account owns that side. The head may be omitted, in which case the
currently checked-out branch on the user's own account is used.

Everything here is validated before a request is produced, so a failure
never leaves a half-sent request behind.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from git_pr.core.config import GitPrConfig
from git_pr.core.errors import PreconditionError, RefNotFoundError, SameRefError
from git_pr.core.remote_resolver import RemoteResolver
from git_pr.gateway.git.abc import Git

logger = logging.getLogger(__name__)

_QUOTE_CHARS = str.maketrans("", "", "\"'")


@dataclass(frozen=True)
class BranchSpec:
    """One side of a pull request: where the branch lives and what it is called."""

    remote_alias: str
    owner_login: str
    branch_name: str

    @property
    def api_ref(self) -> str:
        """The ``owner:branch`` form used in the API payload."""
        return f"{self.owner_login}:{self.branch_name}"

    @property
    def display(self) -> str:
        return f"{self.owner_login}/{self.branch_name}"


@dataclass(frozen=True)
class PullRequestPayload:
    """JSON body of POST /repos/{owner}/{repo}/pulls."""

    title: str
    body: str
    head: str
    base: str

    def to_json(self) -> str:
        return json.dumps(asdict(self))


@dataclass(frozen=True)
class CreatePullRequestRequest:
    """A validated create call, ready to send."""

    endpoint_url: str
    payload: PullRequestPayload
    attempt_merge: bool


def strip_quotes(text: str) -> str:
    """Remove single and double quote characters from text."""
    return text.translate(_QUOTE_CHARS)


def compose_body(commit_subject: str, signature: str | None) -> str:
    """Fill the pull request body template.

    The body names the newest commit on the head branch and ends with the
    configured signature, if any.
    """
    body = f"Latest commit: {strip_quotes(commit_subject)}"
    if signature:
        body += f"\n\n{signature}"
    return body


class PullRequestBuilder:
    """Resolves base and head branch arguments into a create-pull-request call."""

    def __init__(
        self,
        *,
        git: Git,
        resolver: RemoteResolver,
        config: GitPrConfig,
        cwd: Path,
    ) -> None:
        self._git = git
        self._resolver = resolver
        self._config = config
        self._cwd = cwd

    def parse_branch_arg(self, arg: str) -> BranchSpec:
        """Split ``<remote>/<branch>`` and resolve the remote's owner.

        A token without ``/`` is a branch on the configured default remote.

        Raises:
            RefNotFoundError: If either part of the token is empty
            ConfigError: If the remote is not configured
        """
        if "/" in arg:
            remote_alias, branch_name = arg.split("/", 1)
        else:
            remote_alias, branch_name = self._config.default_remote, arg

        if not remote_alias or not branch_name:
            raise RefNotFoundError(arg)

        owner = self._resolver.resolve_owner(remote_alias)
        return BranchSpec(remote_alias=remote_alias, owner_login=owner, branch_name=branch_name)

    def resolve_branch_arg(self, arg: str) -> BranchSpec:
        """Parse a branch argument and verify it names an existing reference."""
        branch = self.parse_branch_arg(arg)
        if not self._git.verify_ref(self._cwd, arg):
            raise RefNotFoundError(arg)
        return branch

    def current_head(self) -> BranchSpec:
        """The checked-out branch, on the remote named after the configured login.

        Raises:
            PreconditionError: If no login is configured
            RefNotFoundError: If HEAD is detached
        """
        login = self._config.login
        if not login:
            raise PreconditionError(
                "No login configured; pass --head or run 'git-pr config set login <login>'"
            )
        branch = self._git.get_current_branch(self._cwd)
        if branch is None:
            raise RefNotFoundError("HEAD")
        return BranchSpec(remote_alias=login, owner_login=login, branch_name=branch)

    def _commit_subject(self, head: BranchSpec) -> str:
        remote_ref = f"{head.remote_alias}/{head.branch_name}"
        subject = self._git.get_last_commit_subject(self._cwd, remote_ref)
        if subject is None:
            logger.debug("No %s, reading subject from local %s", remote_ref, head.branch_name)
            subject = self._git.get_last_commit_subject(self._cwd, head.branch_name)
        return subject if subject is not None else ""

    def build_create_request(
        self, base_arg: str, head_arg: str | None, merge: bool
    ) -> CreatePullRequestRequest:
        """Build the POST request that opens a pull request from head into base.

        Args:
            base_arg: Base branch as ``<remote>/<branch>`` or bare ``<branch>``
            head_arg: Head branch in the same form, or None for the current branch
            merge: Whether the caller should merge the pull request once created

        Returns:
            CreatePullRequestRequest with endpoint, payload and merge flag

        Raises:
            ConfigError: If a remote is missing or has an unparseable URL
            RefNotFoundError: If a branch does not exist
            SameRefError: If base and head are the same owner/branch
            PreconditionError: If head is omitted and no login is configured
        """
        base = self.resolve_branch_arg(base_arg)
        head = self.current_head() if head_arg is None else self.resolve_branch_arg(head_arg)

        if (base.owner_login, base.branch_name) == (head.owner_login, head.branch_name):
            raise SameRefError(owner=base.owner_login, branch=base.branch_name)

        payload = PullRequestPayload(
            title=f"Pull request to {base.display} from {head.display}",
            body=compose_body(self._commit_subject(head), self._config.signature),
            head=head.api_ref,
            base=base.api_ref,
        )
        endpoint_url = self._resolver.api_url(base.remote_alias, "pulls")
        logger.debug("Built pull request %s -> %s at %s", head.api_ref, base.api_ref, endpoint_url)

        return CreatePullRequestRequest(
            endpoint_url=endpoint_url,
            payload=payload,
            attempt_merge=merge,
        )
