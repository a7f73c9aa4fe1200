"""Configuration loading for gotter.

Settings come from an optional JSON user config file, overridden by the
environment (``GOPATH``, ``WORKSPACE``, ``GOTTER_SSH_USER``). The result is
built once per invocation and passed to every command.

Example:
    >>> cfg = load_config({"GOPATH": "/go", "WORKSPACE": "/work"}, config_path=Path("/missing.json"))
    >>> cfg.root_dir, cfg.workspace_dir, cfg.ssh_user
    ('/go', '/work', 'git')
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping

from platformdirs import user_config_dir
from pydantic import ValidationError

from .errors import ConfigError
from .models import GotterConfig

GOTTER_APP_NAME = "gotter"
CONFIG_FILENAME = "config.json"

_ENV_OVERRIDES = {
    "GOPATH": "root_dir",
    "WORKSPACE": "workspace_dir",
    "GOTTER_SSH_USER": "ssh_user",
}


def default_config_path() -> Path:
    """Return the path to the user config file."""
    return Path(user_config_dir(GOTTER_APP_NAME)) / CONFIG_FILENAME


def load_json(path: Path) -> dict | None:
    """Load a JSON file if it exists.

    Example:
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _read_config_file(path: Path) -> dict:
    try:
        payload = load_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"failed to read config file {path}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")
    return payload


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    config_path: Path | None = None,
) -> GotterConfig:
    """Build the runtime configuration.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.
        config_path: Config file location; defaults to ``GOTTER_CONFIG`` or
            the platform user config dir.

    Returns:
        Validated ``GotterConfig``.

    Raises:
        ConfigError: The config file is invalid, or the root or workspace
            directory is not set.
    """
    env = os.environ if environ is None else environ
    if config_path is None:
        override = env.get("GOTTER_CONFIG", "").strip()
        config_path = Path(override).expanduser() if override else default_config_path()

    payload = _read_config_file(config_path)
    for env_name, field in _ENV_OVERRIDES.items():
        value = env.get(env_name, "")
        if value.strip():
            payload[field] = value

    try:
        config = GotterConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid gotter config: {exc}") from exc

    if not config.workspace_dir:
        raise ConfigError(
            "WORKSPACE environment variable not set!",
            recovery_hint="export WORKSPACE=<dir> or set workspace_dir in the config file",
        )
    if not config.root_dir:
        raise ConfigError(
            "GOPATH environment variable not set!",
            recovery_hint="export GOPATH=<dir> or set root_dir in the config file",
        )
    return config
