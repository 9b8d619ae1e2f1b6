"""Tests for git-pr config."""

from pathlib import Path

from click.testing import CliRunner

from git_pr.cli.cli import cli
from git_pr.core.config import GitPrConfig, load_config
from git_pr.core.context import GitPrContext


def _ctx(tmp_path: Path, config: GitPrConfig | None = None) -> GitPrContext:
    return GitPrContext.for_test(
        config=(
            config if config is not None else GitPrConfig(login=None, token=None, signature=None)
        ),
        config_path=tmp_path / "config.toml",
    )


def test_config_set_writes_file(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = _ctx(tmp_path)

    result = runner.invoke(cli, ["config", "set", "login", "bob"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert load_config(tmp_path / "config.toml", {}).login == "bob"
    assert "Set login=bob" in result.output


def test_config_set_token_is_masked_in_output(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = _ctx(tmp_path)

    result = runner.invoke(cli, ["config", "set", "token", "ghp_abcdef123456"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "ghp_abcdef123456" not in result.output
    assert "3456" in result.output
    assert load_config(tmp_path / "config.toml", {}).token == "ghp_abcdef123456"


def test_config_set_rejects_unknown_key(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "set", "password", "x"], obj=_ctx(tmp_path))

    assert result.exit_code == 2
    assert not (tmp_path / "config.toml").exists()


def test_config_show_masks_token(tmp_path: Path) -> None:
    runner = CliRunner()
    config = GitPrConfig(login="bob", token="ghp_secretvalue", signature=None)

    result = runner.invoke(cli, ["config", "show"], obj=_ctx(tmp_path, config))

    assert result.exit_code == 0, result.output
    assert "login=bob" in result.output
    assert "ghp_secretvalue" not in result.output
    assert "signature=(not set)" in result.output
    assert "default_remote=origin" in result.output


def test_config_get_prints_value(tmp_path: Path) -> None:
    runner = CliRunner()
    config = GitPrConfig(login="bob", token=None, signature=None, default_remote="upstream")

    result = runner.invoke(cli, ["config", "get", "default_remote"], obj=_ctx(tmp_path, config))

    assert result.exit_code == 0
    assert result.output.strip() == "upstream"


def test_config_get_unset_value_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "get", "signature"], obj=_ctx(tmp_path))

    assert result.exit_code == 1
    assert "'signature' is not set" in result.output


def test_config_path(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "path"], obj=_ctx(tmp_path))

    assert result.exit_code == 0
    assert result.output.strip() == str(tmp_path / "config.toml")


def test_config_keys_lists_descriptions(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["config", "keys"], obj=_ctx(tmp_path))

    assert result.exit_code == 0
    for key in ("login", "token", "signature", "default_remote"):
        assert key in result.output
