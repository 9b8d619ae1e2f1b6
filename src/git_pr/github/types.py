"""Types for GitHub REST API responses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreatedPullRequest:
    """A pull request returned by the create endpoint."""

    number: int
    html_url: str
    url: str


@dataclass(frozen=True)
class MergeOutcome:
    """Result of a successful merge call."""

    sha: str | None
    message: str


@dataclass(frozen=True)
class PullRequestSummary:
    """One row of the open pull request list."""

    number: int
    title: str
    head_label: str
    base_label: str
    author: str | None
    html_url: str
    is_draft: bool


@dataclass(frozen=True)
class Milestone:
    """One row of the open milestone list."""

    number: int
    title: str
    open_issues: int
    closed_issues: int
    due_on: str | None
    html_url: str
