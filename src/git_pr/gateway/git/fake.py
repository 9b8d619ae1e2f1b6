"""Fake implementation of the Git gateway for testing."""

from pathlib import Path

from git_pr.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git queries.

    This fake accepts pre-configured state in its constructor and records
    queries for test assertions. State is not keyed by cwd: a test models
    exactly one repository.

    Constructor Injection:
    ---------------------
    - remote_urls: Mapping of remote name -> remote URL
    - refs: Names that verify_ref() accepts (e.g. "main", "origin/main")
    - current_branch: Branch returned by get_current_branch(), None for detached HEAD
    - commit_subjects: Mapping of ref -> newest commit subject
    - remote_branches: Result of list_remote_branches()

    Query Tracking:
    --------------
    - verified_refs: Refs passed to verify_ref(), in call order
    - remote_url_lookups: Remote names passed to get_remote_url(), in call order
    """

    def __init__(
        self,
        *,
        remote_urls: dict[str, str] | None = None,
        refs: set[str] | None = None,
        current_branch: str | None = None,
        commit_subjects: dict[str, str] | None = None,
        remote_branches: list[str] | None = None,
    ) -> None:
        self._remote_urls = remote_urls if remote_urls is not None else {}
        self._refs = refs if refs is not None else set()
        self._current_branch = current_branch
        self._commit_subjects = commit_subjects if commit_subjects is not None else {}
        self._remote_branches = remote_branches if remote_branches is not None else []

        self._verified_refs: list[str] = []
        self._remote_url_lookups: list[str] = []

    def get_remote_url(self, cwd: Path, remote: str) -> str | None:
        self._remote_url_lookups.append(remote)
        return self._remote_urls.get(remote)

    def verify_ref(self, cwd: Path, ref: str) -> bool:
        self._verified_refs.append(ref)
        return ref in self._refs

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branch

    def get_last_commit_subject(self, cwd: Path, ref: str) -> str | None:
        return self._commit_subjects.get(ref)

    def list_remote_branches(self, cwd: Path) -> list[str]:
        return list(self._remote_branches)

    @property
    def verified_refs(self) -> list[str]:
        """Read-only access to verify_ref() calls for test assertions."""
        return list(self._verified_refs)

    @property
    def remote_url_lookups(self) -> list[str]:
        """Read-only access to get_remote_url() calls for test assertions."""
        return list(self._remote_url_lookups)
