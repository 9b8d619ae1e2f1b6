"""Tests for PullRequestBuilder."""

import json
from pathlib import Path

import pytest

from git_pr.core.config import GitPrConfig
from git_pr.core.errors import ConfigError, PreconditionError, RefNotFoundError, SameRefError
from git_pr.core.pull_request_builder import (
    BranchSpec,
    PullRequestBuilder,
    compose_body,
    strip_quotes,
)
from git_pr.core.remote_resolver import RemoteResolver
from git_pr.gateway.git.fake import FakeGit
from tests.test_utils.context_builders import ALICE_PULLS_URL, fork_workflow_git

REPO = Path("/repo")


def _builder(
    git: FakeGit,
    *,
    login: str | None = "bob",
    signature: str | None = None,
    default_remote: str = "origin",
) -> PullRequestBuilder:
    return PullRequestBuilder(
        git=git,
        resolver=RemoteResolver(git, REPO),
        config=GitPrConfig(
            login=login, token="t", signature=signature, default_remote=default_remote
        ),
        cwd=REPO,
    )


def test_default_head_is_current_branch_on_login_remote() -> None:
    """Base alice/master with no head targets bob:feature-x -> alice:master."""
    builder = _builder(fork_workflow_git())

    request = builder.build_create_request("alice/master", None, False)

    assert request.payload.base == "alice:master"
    assert request.payload.head == "bob:feature-x"
    assert request.endpoint_url == ALICE_PULLS_URL
    assert request.attempt_merge is False


def test_title_names_both_sides() -> None:
    request = _builder(fork_workflow_git()).build_create_request("alice/master", None, False)

    assert request.payload.title == "Pull request to alice/master from bob/feature-x"


def test_body_embeds_head_commit_subject_and_signature() -> None:
    builder = _builder(fork_workflow_git(commit_subject="Fix parser"), signature="-- sent by bob")

    request = builder.build_create_request("alice/master", None, False)

    assert request.payload.body == "Latest commit: Fix parser\n\n-- sent by bob"


def test_explicit_head_is_resolved_like_base() -> None:
    git = fork_workflow_git()
    builder = _builder(git, login=None)

    request = builder.build_create_request("alice/master", "bob/feature-x", True)

    assert request.payload.head == "bob:feature-x"
    assert request.payload.base == "alice:master"
    assert request.attempt_merge is True
    assert git.verified_refs == ["alice/master", "bob/feature-x"]


def test_head_owner_comes_from_remote_url() -> None:
    """A head remote alias that differs from its owner uses the URL's owner."""
    git = FakeGit(
        remote_urls={
            "upstream": "git@github.com:alice/proj.git",
            "fork": "git@github.com:bob/proj.git",
        },
        refs={"upstream/main", "fork/topic"},
        commit_subjects={"fork/topic": "Topic work"},
    )

    request = _builder(git).build_create_request("upstream/main", "fork/topic", False)

    assert request.payload.head == "bob:topic"
    assert request.payload.base == "alice:main"


def test_bare_base_uses_default_remote() -> None:
    git = fork_workflow_git()

    request = _builder(git, default_remote="origin").build_create_request("master", None, False)

    assert request.payload.base == "alice:master"
    assert git.verified_refs == ["master"]
    assert git.remote_url_lookups[0] == "origin"


def test_branch_names_may_contain_slashes_after_the_remote() -> None:
    git = FakeGit(
        remote_urls={"origin": "git@github.com:alice/proj.git"},
        refs={"origin/release/1.2", "origin/main"},
    )

    request = _builder(git).build_create_request("origin/main", "origin/release/1.2", False)

    assert request.payload.head == "alice:release/1.2"


def test_missing_base_branch_raises_before_payload() -> None:
    git = fork_workflow_git()

    with pytest.raises(RefNotFoundError, match="alice/nope"):
        _builder(git).build_create_request("alice/nope", None, False)


def test_missing_head_branch_raises() -> None:
    with pytest.raises(RefNotFoundError, match="bob/unpushed"):
        _builder(fork_workflow_git()).build_create_request("alice/master", "bob/unpushed", False)


def test_empty_branch_part_raises() -> None:
    with pytest.raises(RefNotFoundError):
        _builder(fork_workflow_git()).build_create_request("alice/", None, False)


def test_unknown_remote_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="Remote 'carol' is not configured"):
        _builder(fork_workflow_git()).build_create_request("carol/master", None, False)


def test_same_owner_and_branch_raises() -> None:
    """origin and alice both point at alice/proj, so these are the same branch."""
    builder = _builder(fork_workflow_git())

    with pytest.raises(SameRefError, match="alice/master"):
        builder.build_create_request("alice/master", "origin/master", False)


def test_same_ref_when_current_branch_is_base() -> None:
    git = FakeGit(
        remote_urls={"bob": "git@github.com:bob/proj.git"},
        refs={"bob/main"},
        current_branch="main",
    )

    with pytest.raises(SameRefError):
        _builder(git).build_create_request("bob/main", None, False)


def test_detached_head_raises() -> None:
    with pytest.raises(RefNotFoundError, match="HEAD"):
        _builder(fork_workflow_git(current_branch=None)).build_create_request(
            "alice/master", None, False
        )


def test_missing_login_without_head_raises_precondition_error() -> None:
    with pytest.raises(PreconditionError):
        _builder(fork_workflow_git(), login=None).build_create_request("alice/master", None, False)


def test_quotes_in_commit_subject_are_removed() -> None:
    builder = _builder(fork_workflow_git(commit_subject='Say "hello" to \'world\''))

    request = builder.build_create_request("alice/master", None, False)

    assert '"' not in request.payload.body
    assert "'" not in request.payload.body
    assert request.payload.body == "Latest commit: Say hello to world"
    decoded = json.loads(request.payload.to_json())
    assert decoded["body"] == request.payload.body


def test_commit_subject_falls_back_to_local_branch() -> None:
    git = FakeGit(
        remote_urls={"alice": "git@github.com:alice/proj.git", "bob": "git@github.com:bob/x.git"},
        refs={"alice/master"},
        current_branch="topic",
        commit_subjects={"topic": "Local only"},
    )

    request = _builder(git).build_create_request("alice/master", None, False)

    assert request.payload.body == "Latest commit: Local only"


def test_payload_json_has_exactly_the_api_fields() -> None:
    request = _builder(fork_workflow_git()).build_create_request("alice/master", None, False)

    assert set(json.loads(request.payload.to_json())) == {"title", "body", "head", "base"}


def test_parse_branch_arg() -> None:
    builder = _builder(fork_workflow_git())

    assert builder.parse_branch_arg("bob/feature-x") == BranchSpec(
        remote_alias="bob", owner_login="bob", branch_name="feature-x"
    )


def test_strip_quotes() -> None:
    assert strip_quotes("it's \"done\"") == "its done"


def test_compose_body_without_signature() -> None:
    assert compose_body("Subject", None) == "Latest commit: Subject"
