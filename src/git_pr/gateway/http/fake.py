"""Fake HTTP transport for testing."""

from dataclasses import dataclass

from git_pr.gateway.http.abc import HttpClient
from git_pr.gateway.http.types import HttpResponse


@dataclass(frozen=True)
class SentRequest:
    """Record of a send() call."""

    method: str
    url: str
    headers: dict[str, str]
    body: str | None


class FakeHttpClient(HttpClient):
    """In-memory fake that replays canned responses and records requests.

    Constructor Injection:
    ---------------------
    - responses: Mapping of (method, url) -> HttpResponse. A request with
      no configured response raises AssertionError, so an unexpected call
      fails the test loudly.

    Mutation Tracking:
    -----------------
    - requests: SentRequest records in call order
    """

    def __init__(self, *, responses: dict[tuple[str, str], HttpResponse] | None = None) -> None:
        self._responses = responses if responses is not None else {}
        self._requests: list[SentRequest] = []

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: str | None,
    ) -> HttpResponse:
        self._requests.append(SentRequest(method=method, url=url, headers=headers, body=body))
        response = self._responses.get((method, url))
        if response is None:
            raise AssertionError(f"FakeHttpClient has no response for {method} {url}")
        return response

    @property
    def requests(self) -> list[SentRequest]:
        """Read-only access to sent requests for test assertions."""
        return list(self._requests)
