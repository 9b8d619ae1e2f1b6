"""Parsing of GitHub REST API response bodies."""

import json
from typing import Any

from git_pr.core.errors import RequestError
from git_pr.gateway.http.types import HttpResponse
from git_pr.github.types import CreatedPullRequest, MergeOutcome, Milestone, PullRequestSummary


def extract_error_message(data: Any) -> str | None:
    """Get the API's own error text from a decoded response body.

    GitHub reports errors as ``{"message": ..., "errors": [{"message": ...}]}``.
    The top-level message comes first; detail messages are appended after a
    colon, joined by ``; ``.

    Returns:
        The error text, or None if the body carries no message field
    """
    if not isinstance(data, dict) or "message" not in data:
        return None

    message = str(data["message"])
    details = [
        str(error["message"])
        for error in data.get("errors") or []
        if isinstance(error, dict) and error.get("message")
    ]
    if details:
        message = f"{message}: {'; '.join(details)}"
    return message


def decode_response(response: HttpResponse) -> Any:
    """Decode a JSON response, raising RequestError for API errors.

    A non-2xx status is always an error. Its message is the API's message
    field when present, otherwise the raw body.

    Raises:
        RequestError: On a non-2xx status or an undecodable success body
    """
    try:
        data = json.loads(response.body) if response.body else None
    except json.JSONDecodeError as e:
        if not response.ok:
            raise RequestError(response.body, status=response.status) from e
        raise RequestError(
            f"Unexpected non-JSON response: {response.body[:200]}", status=response.status
        ) from e

    if not response.ok:
        message = extract_error_message(data)
        raise RequestError(message if message else response.body, status=response.status)
    return data


def _require_dict(data: Any, what: str, status: int) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise RequestError(f"Unexpected {what} response: {data!r}", status=status)
    return data


def _require_list(data: Any, what: str, status: int) -> list[Any]:
    if not isinstance(data, list):
        message = extract_error_message(data)
        raise RequestError(
            message if message else f"Unexpected {what} response: {data!r}", status=status
        )
    return data


def parse_created_pull_request(response: HttpResponse) -> CreatedPullRequest:
    """Parse the body of POST /repos/{owner}/{repo}/pulls."""
    data = _require_dict(decode_response(response), "create pull request", response.status)
    if "number" not in data or "html_url" not in data:
        message = extract_error_message(data)
        raise RequestError(
            message if message else f"Unexpected create pull request response: {data!r}",
            status=response.status,
        )
    return CreatedPullRequest(
        number=int(data["number"]),
        html_url=str(data["html_url"]),
        url=str(data.get("url", "")),
    )


def parse_merge_outcome(response: HttpResponse) -> MergeOutcome:
    """Parse the body of PUT /repos/{owner}/{repo}/pulls/{number}/merge.

    Raises:
        RequestError: If the API reports the pull request was not merged
    """
    data = _require_dict(decode_response(response), "merge", response.status)
    message = str(data.get("message", ""))
    if not data.get("merged"):
        raise RequestError(
            message if message else "Pull request was not merged", status=response.status
        )
    return MergeOutcome(sha=data.get("sha"), message=message)


def parse_pull_request_list(response: HttpResponse) -> list[PullRequestSummary]:
    """Parse the body of GET /repos/{owner}/{repo}/pulls."""
    items = _require_list(decode_response(response), "pull request list", response.status)
    return [
        PullRequestSummary(
            number=int(pr["number"]),
            title=str(pr.get("title") or ""),
            head_label=str((pr.get("head") or {}).get("label", "")),
            base_label=str((pr.get("base") or {}).get("label", "")),
            author=(pr.get("user") or {}).get("login"),
            html_url=str(pr.get("html_url", "")),
            is_draft=bool(pr.get("draft", False)),
        )
        for pr in items
    ]


def parse_milestone_list(response: HttpResponse) -> list[Milestone]:
    """Parse the body of GET /repos/{owner}/{repo}/milestones."""
    items = _require_list(decode_response(response), "milestone list", response.status)
    return [
        Milestone(
            number=int(milestone["number"]),
            title=str(milestone.get("title") or ""),
            open_issues=int(milestone.get("open_issues", 0)),
            closed_issues=int(milestone.get("closed_issues", 0)),
            due_on=milestone.get("due_on"),
            html_url=str(milestone.get("html_url", "")),
        )
        for milestone in items
    ]
