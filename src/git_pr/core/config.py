"""Account configuration: login, token, signature and default remote.

Configuration is read once per invocation into an immutable GitPrConfig and
passed explicitly to the components that need it. Values come from a TOML
file, overridden by environment variables:

    # ~/.config/git-pr/config.toml
    login = "bob"
    token = "ghp_..."
    signature = "Sent with git-pr"
    default_remote = "origin"
"""

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from git_pr.core.errors import ConfigError, PreconditionError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"

CONFIG_PATH_ENV = "GIT_PR_CONFIG"

# Setting name -> environment variables consulted, highest precedence first.
ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "login": ("GIT_PR_LOGIN",),
    "token": ("GIT_PR_TOKEN", "GITHUB_TOKEN"),
    "signature": ("GIT_PR_SIGNATURE",),
    "default_remote": ("GIT_PR_DEFAULT_REMOTE",),
}

CONFIG_KEYS: dict[str, str] = {
    "login": "GitHub account login; names the head remote and owner by default",
    "token": "GitHub token sent as a bearer token",
    "signature": "Text appended to every pull request body",
    "default_remote": f"Remote used for branch names without a remote prefix ({DEFAULT_REMOTE})",
}


@dataclass(frozen=True)
class GitPrConfig:
    """Process-wide settings, immutable for the duration of a command."""

    login: str | None
    token: str | None
    signature: str | None
    default_remote: str = DEFAULT_REMOTE


@dataclass(frozen=True)
class Credentials:
    """Login and token, both known to be present."""

    login: str
    token: str


def default_config_path(env: Mapping[str, str]) -> Path:
    """Location of the config file, honoring $GIT_PR_CONFIG."""
    override = env.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "git-pr" / "config.toml"


def _read_config_file(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def _optional_str(data: Mapping[str, object], key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' in {path} must be a string")
    return value if value else None


def load_config(path: Path, env: Mapping[str, str]) -> GitPrConfig:
    """Load configuration from path, applying environment overrides.

    Args:
        path: TOML config file; a missing file means no file settings
        env: Environment mapping (normally os.environ)

    Returns:
        GitPrConfig with every setting resolved

    Raises:
        ConfigError: If the file is not valid TOML or a value is not a string
    """
    data = _read_config_file(path)
    values = {key: _optional_str(data, key, path) for key in CONFIG_KEYS}

    for key, env_names in ENV_OVERRIDES.items():
        for env_name in env_names:
            env_value = env.get(env_name)
            if env_value:
                logger.debug("Using %s from $%s", key, env_name)
                values[key] = env_value
                break

    return GitPrConfig(
        login=values["login"],
        token=values["token"],
        signature=values["signature"],
        default_remote=values["default_remote"] or DEFAULT_REMOTE,
    )


def require_credentials(config: GitPrConfig) -> Credentials:
    """Check that login and token are configured.

    Raises:
        PreconditionError: Naming every missing setting
    """
    missing = [
        f"{key} (set with 'git-pr config set {key} ...' or ${ENV_OVERRIDES[key][0]})"
        for key in ("login", "token")
        if not getattr(config, key)
    ]
    if missing:
        raise PreconditionError("Missing configuration: " + ", ".join(missing))
    assert config.login is not None and config.token is not None
    return Credentials(login=config.login, token=config.token)


def write_config_value(path: Path, key: str, value: str) -> None:
    """Persist one setting, preserving the rest of the file.

    Uses tomlkit so existing comments and formatting survive.

    Raises:
        ConfigError: If key is not a known setting
    """
    if key not in CONFIG_KEYS:
        raise ConfigError(f"Unknown config key '{key}'")

    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        doc = tomlkit.document()

    doc[key] = value

    with path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)
    if key == "token":
        path.chmod(0o600)
