"""Production HTTP transport built on urllib.request."""

import logging
import urllib.error
import urllib.request

from git_pr.core.errors import RequestError
from git_pr.gateway.http.abc import HttpClient
from git_pr.gateway.http.types import HttpResponse

logger = logging.getLogger(__name__)

# Seconds to wait for the API before giving up on a request.
_REQUEST_TIMEOUT = 30


def _read_error_body(error: urllib.error.HTTPError) -> str:
    """Body of an error response; empty when it cannot be read."""
    if error.fp is None:
        return ""
    try:
        return error.read().decode("utf-8", errors="replace")
    except OSError:
        logger.debug("Could not read body of HTTP %d response", error.code)
        return ""


class RealHttpClient(HttpClient):
    """Sends requests with urllib and returns every HTTP status as a response."""

    def __init__(self, *, timeout: float = _REQUEST_TIMEOUT) -> None:
        self._timeout = timeout

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: str | None,
    ) -> HttpResponse:
        data = body.encode("utf-8") if body is not None else None
        request = urllib.request.Request(url, data=data, headers=headers, method=method)
        logger.debug("%s %s", method, url)

        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                text = response.read().decode("utf-8", errors="replace")
                status = response.status
        except urllib.error.HTTPError as e:
            text = _read_error_body(e)
            status = e.code
        except urllib.error.URLError as e:
            raise RequestError(f"{method} {url} failed: {e.reason}") from e
        except TimeoutError as e:
            raise RequestError(f"{method} {url} timed out after {self._timeout}s") from e
        except OSError as e:
            raise RequestError(f"{method} {url} failed: {e}") from e

        logger.debug("%s %s -> %d", method, url, status)
        return HttpResponse(status=status, body=text)
