"""Client for the handful of GitHub REST endpoints git-pr calls.

Each method sends exactly one request. There is no retry and no pagination:
list calls return the first page GitHub serves.
"""

import logging

from git_pr.core.pull_request_builder import CreatePullRequestRequest
from git_pr.gateway.http.abc import HttpClient
from git_pr.github.parsing import (
    parse_created_pull_request,
    parse_merge_outcome,
    parse_milestone_list,
    parse_pull_request_list,
)
from git_pr.github.types import CreatedPullRequest, MergeOutcome, Milestone, PullRequestSummary

logger = logging.getLogger(__name__)

USER_AGENT = "git-pr"


class GitHubApi:
    """Authenticated access to pull request and milestone endpoints."""

    def __init__(self, *, http: HttpClient, token: str) -> None:
        self._http = http
        self._token = token

    def _headers(self, *, with_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def create_pull_request(self, request: CreatePullRequestRequest) -> CreatedPullRequest:
        """POST the payload to the pulls endpoint.

        Raises:
            RequestError: With GitHub's message if the pull request was not created
        """
        response = self._http.send(
            "POST",
            request.endpoint_url,
            headers=self._headers(with_body=True),
            body=request.payload.to_json(),
        )
        created = parse_created_pull_request(response)
        logger.debug("Created pull request #%d", created.number)
        return created

    def merge_pull_request(self, pulls_url: str, number: int) -> MergeOutcome:
        """PUT {pulls_url}/{number}/merge.

        Raises:
            RequestError: With GitHub's message if the merge did not happen
        """
        response = self._http.send(
            "PUT",
            f"{pulls_url}/{number}/merge",
            headers=self._headers(with_body=True),
            body="{}",
        )
        return parse_merge_outcome(response)

    def list_open_pull_requests(self, pulls_url: str) -> list[PullRequestSummary]:
        """GET {pulls_url}?state=open."""
        response = self._http.send(
            "GET",
            f"{pulls_url}?state=open",
            headers=self._headers(with_body=False),
            body=None,
        )
        return parse_pull_request_list(response)

    def list_open_milestones(self, milestones_url: str) -> list[Milestone]:
        """GET {milestones_url}?state=open."""
        response = self._http.send(
            "GET",
            f"{milestones_url}?state=open",
            headers=self._headers(with_body=False),
            body=None,
        )
        return parse_milestone_list(response)
