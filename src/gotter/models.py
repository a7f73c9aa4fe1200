"""Pydantic models for gotter configuration data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from .paths import DEFAULT_SSH_USER


class GotterConfig(BaseModel):
    """Resolved runtime configuration.

    Attributes:
        root_dir: Toolchain root (``GOPATH``); may hold several entries.
        workspace_dir: Personal workspace directory (``WORKSPACE``).
        ssh_user: User for derived SSH remote URLs.
        git_path: Git executable.
        go_path: Go executable.

    Example:
        >>> GotterConfig(root_dir="~/go", workspace_dir="~/work", ssh_user=" ").ssh_user
        'git'
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    root_dir: str = ""
    workspace_dir: str = ""
    ssh_user: str = DEFAULT_SSH_USER
    git_path: str = "git"
    go_path: str = "go"

    @field_validator("root_dir", "workspace_dir", mode="before")
    @classmethod
    def normalize_dir(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("ssh_user", mode="before")
    @classmethod
    def normalize_ssh_user(cls, value: object) -> object:
        if value is None:
            return DEFAULT_SSH_USER
        if isinstance(value, str):
            return value.strip() or DEFAULT_SSH_USER
        return value

    @field_validator("git_path", "go_path", mode="before")
    @classmethod
    def normalize_executable(cls, value: object, info: ValidationInfo) -> object:
        default = "git" if info.field_name == "git_path" else "go"
        if value is None:
            return default
        if isinstance(value, str):
            return value.strip() or default
        return value
