"""Value types shared by HTTP gateway implementations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw text body of an HTTP response."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
