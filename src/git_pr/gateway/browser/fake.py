"""Fake BrowserLauncher that records URLs instead of opening them."""

from git_pr.gateway.browser.abc import BrowserLauncher


class FakeBrowserLauncher(BrowserLauncher):
    """In-memory fake that captures URLs without opening a browser."""

    def __init__(self) -> None:
        self._launched_urls: list[str] = []

    def launch(self, url: str) -> None:
        self._launched_urls.append(url)

    @property
    def launched_urls(self) -> list[str]:
        """URLs passed to launch(), for test assertions."""
        return list(self._launched_urls)
