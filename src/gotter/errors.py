"""Failure contracts for gotter operations.

Operations return plain values on success and raise ``GotterError`` on
expected failures (link conflicts, missing origin, filesystem or process
errors). Programmer bugs raise normal exceptions. Only the CLI dispatcher
turns a ``GotterError`` into a user-facing message and a failing exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

GotterErrorCode = Literal[
    "already_linked",
    "path_occupied",
    "no_origin_found",
    "io_failed",
    "dependency_missing",
    "invalid_reference",
    "config_invalid",
]


class GotterError(Exception):
    """Expected failure of a gotter operation.

    Use ``raise GotterError(...) from exc`` to chain a causing exception; it
    is available as ``__cause__``.
    """

    def __init__(
        self,
        code: GotterErrorCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class AlreadyLinkedError(GotterError):
    """A symlink already occupies the workspace path."""

    def __init__(self, workspace_path: Path, current_target: str | None) -> None:
        super().__init__(
            "already_linked",
            "link already exists",
            recovery_hint="re-run with --update or --force to replace it",
        )
        self.workspace_path = workspace_path
        self.current_target = current_target


class PathOccupiedError(GotterError):
    """A regular file or directory blocks link creation."""

    def __init__(self, workspace_path: Path) -> None:
        super().__init__(
            "path_occupied",
            f"file/folder already exists at {workspace_path}",
            recovery_hint="re-run with --force to remove it (irreversible)",
        )
        self.workspace_path = workspace_path


class NoOriginFoundError(GotterError):
    """The remote listing had no ``origin <url> (push)`` line."""

    def __init__(self, message: str = "couldn't parse git remote origin url") -> None:
        super().__init__("no_origin_found", message)


class IoFailedError(GotterError):
    """Filesystem or process operation failed."""

    def __init__(
        self,
        message: str,
        *,
        recovery_hint: str | None = None,
        code: GotterErrorCode = "io_failed",
    ) -> None:
        super().__init__(code, message, recovery_hint=recovery_hint)


class ExternalCommandFailedError(IoFailedError):
    """External command (go, git) exited with a non-zero status."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class DependencyMissingError(IoFailedError):
    """Required executable is not installed."""

    def __init__(self, command: str) -> None:
        super().__init__(
            f"missing required command: {command}",
            recovery_hint=f"install {command} or set its path in the gotter config",
            code="dependency_missing",
        )
        self.command = command


class InvalidReferenceError(GotterError):
    """Repository reference cannot be located."""

    def __init__(self, message: str) -> None:
        super().__init__("invalid_reference", message)


class ConfigError(GotterError):
    """Configuration is missing or invalid."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("config_invalid", message, recovery_hint=recovery_hint)
