"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from git_pr.core.config import GitPrConfig, default_config_path, load_config, require_credentials
from git_pr.core.pull_request_builder import PullRequestBuilder
from git_pr.core.remote_resolver import RemoteResolver
from git_pr.gateway.browser.abc import BrowserLauncher
from git_pr.gateway.browser.real import RealBrowserLauncher
from git_pr.gateway.git.abc import Git
from git_pr.gateway.git.real import RealGit
from git_pr.gateway.http.abc import HttpClient
from git_pr.gateway.http.real import RealHttpClient
from git_pr.github.api import GitHubApi


@dataclass(frozen=True)
class GitPrContext:
    """Immutable context holding all dependencies for git-pr commands.

    Created at the CLI entry point and passed to commands via click's
    ``obj``. Tests build one with fakes through ``for_test``.
    """

    git: Git
    http: HttpClient
    browser: BrowserLauncher
    config: GitPrConfig
    config_path: Path
    cwd: Path

    @property
    def resolver(self) -> RemoteResolver:
        return RemoteResolver(self.git, self.cwd)

    def pull_request_builder(self) -> PullRequestBuilder:
        return PullRequestBuilder(
            git=self.git,
            resolver=self.resolver,
            config=self.config,
            cwd=self.cwd,
        )

    def github_api(self) -> GitHubApi:
        """API client authenticated with the configured token.

        Raises:
            PreconditionError: If login or token is not configured
        """
        credentials = require_credentials(self.config)
        return GitHubApi(http=self.http, token=credentials.token)

    @staticmethod
    def for_test(
        *,
        git: Git | None = None,
        http: HttpClient | None = None,
        browser: BrowserLauncher | None = None,
        config: GitPrConfig | None = None,
        config_path: Path | None = None,
        cwd: Path | None = None,
    ) -> "GitPrContext":
        """Create a context from fakes, defaulting anything not supplied.

        Example:
            >>> git = FakeGit(remote_urls={"origin": "git@github.com:alice/proj.git"})
            >>> ctx = GitPrContext.for_test(git=git)
            >>> result = runner.invoke(cli, ["list"], obj=ctx)
        """
        from git_pr.gateway.browser.fake import FakeBrowserLauncher
        from git_pr.gateway.git.fake import FakeGit
        from git_pr.gateway.http.fake import FakeHttpClient

        return GitPrContext(
            git=git if git is not None else FakeGit(),
            http=http if http is not None else FakeHttpClient(),
            browser=browser if browser is not None else FakeBrowserLauncher(),
            config=(
                config
                if config is not None
                else GitPrConfig(login="bob", token="test-token", signature=None)
            ),
            config_path=(
                config_path if config_path is not None else Path("/fake/git-pr/config.toml")
            ),
            cwd=cwd if cwd is not None else Path("/fake/repo"),
        )


def create_context() -> GitPrContext:
    """Create the production context from the environment and config file.

    Raises:
        ConfigError: If the config file is invalid
    """
    config_path = default_config_path(os.environ)
    return GitPrContext(
        git=RealGit(),
        http=RealHttpClient(),
        browser=RealBrowserLauncher(),
        config=load_config(config_path, os.environ),
        config_path=config_path,
        cwd=Path.cwd(),
    )
