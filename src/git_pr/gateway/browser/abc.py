"""Browser launcher abstraction for testability.

Opening the created pull request goes through this interface so tests
never open browser windows.
"""

from abc import ABC, abstractmethod


class BrowserLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Open a URL in the default web browser.

        Args:
            url: The URL to open
        """
        ...
