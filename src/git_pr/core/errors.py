"""Error types raised while resolving remotes and building pull requests.

Every failure a command can hit is a subclass of GitPrError so the CLI can
report it uniformly. Request-building errors (ConfigError, RefNotFoundError,
SameRefError, PreconditionError) are raised before any network call;
RequestError is the only one raised after talking to the API.
"""


class GitPrError(Exception):
    """Base class for all git-pr failures."""


class ConfigError(GitPrError):
    """A git remote is not configured or its URL cannot be parsed."""


class RefNotFoundError(GitPrError):
    """A branch argument does not resolve to a valid git reference."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"'{ref}' is not a valid git reference")
        self.ref = ref


class SameRefError(GitPrError):
    """Base and head resolve to the same owner/branch."""

    def __init__(self, *, owner: str, branch: str) -> None:
        super().__init__(
            f"Base and head are both {owner}/{branch}; "
            "a pull request cannot target its own branch"
        )
        self.owner = owner
        self.branch = branch


class RequestError(GitPrError):
    """The API reported an error, or the request could not be delivered.

    The message is the API's own error text, unmodified. ``status`` is None
    when the request never produced an HTTP response.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class PreconditionError(GitPrError):
    """Required account or token configuration is missing."""
