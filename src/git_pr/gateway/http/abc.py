"""Abstract HTTP transport.

The GitHub API client only needs to send one request with a method, a fully
formed URL, headers and an optional JSON text body, and read back the status
and raw body text. Keeping the transport this narrow lets tests replace it
with an in-memory fake.
"""

from abc import ABC, abstractmethod

from git_pr.gateway.http.types import HttpResponse


class HttpClient(ABC):
    """Abstract interface for sending single HTTP requests."""

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: str | None,
    ) -> HttpResponse:
        """Send a request and return the response.

        Non-2xx responses are returned, not raised, so callers can read the
        error body.

        Args:
            method: HTTP method ("GET", "POST", "PUT")
            url: Fully formed request URL
            headers: Request headers
            body: Request body text, or None for no body

        Returns:
            HttpResponse with status code and body text

        Raises:
            RequestError: If no response could be obtained (DNS, connection,
                timeout)
        """
        ...
