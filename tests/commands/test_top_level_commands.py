"""Tests for the git-pr command group."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from git_pr.cli.cli import cli
from tests.test_utils.context_builders import build_test_context


def test_help_lists_all_commands() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["-h"], obj=build_test_context())

    assert result.exit_code == 0
    for command in ("completion", "config", "create", "list", "milestones"):
        assert command in result.output


def test_invalid_config_file_is_reported(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without an injected context the config file is loaded, and must be valid."""
    config_path = tmp_path / "config.toml"
    config_path.write_text("login = ", encoding="utf-8")
    monkeypatch.setenv("GIT_PR_CONFIG", str(config_path))
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "path"])

    assert result.exit_code == 1
    assert "Invalid config file" in result.output
