"""Git helper functions used by the gotter CLI."""

from __future__ import annotations

import re
from pathlib import Path

from . import exec as exec_util
from . import log, paths, refs
from .errors import NoOriginFoundError

_ORIGIN_PUSH_RE = re.compile(r"^\s*origin\s+(?P<url>\S+)\s+\(push\)\s*$")


def git_command(args: list[str], *, git_path: str | None = None) -> list[str]:
    """Build a git command using an optional executable path."""
    resolved = git_path.strip() if isinstance(git_path, str) else ""
    if not resolved:
        resolved = "git"
    return [resolved, *args]


def parse_origin_push_url(listing: str) -> str:
    """Extract the ``origin`` push URL from ``git remote -v`` output.

    Later matching lines override earlier ones.

    Args:
        listing: Captured output of ``git remote -v``.

    Returns:
        The push URL of ``origin``.

    Raises:
        NoOriginFoundError: No ``origin <url> (push)`` line is present.

    Example:
        >>> parse_origin_push_url(
        ...     "origin https://example.org/o/p (fetch)\\n"
        ...     "origin https://example.org/o/p (push)\\n"
        ... )
        'https://example.org/o/p'
    """
    url = None
    for line in listing.splitlines():
        match = _ORIGIN_PUSH_RE.match(line)
        if match:
            url = match.group("url")
    if url is None:
        raise NoOriginFoundError()
    return url


def rewrite_origin_to_ssh(listing: str, ssh_user: str) -> tuple[str, str, str]:
    """Derive the SSH origin URL from a remote listing.

    Returns:
        ``(current_url, canonical_path, ssh_url)``.
    """
    current_url = parse_origin_push_url(listing)
    canonical = refs.normalize(current_url)
    return current_url, canonical, paths.ssh_url_for(canonical, ssh_user)


def git_init(
    repo_dir: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Initialize a repository in ``repo_dir``."""
    exec_util.run_command(
        git_command(["init"], git_path=git_path), cwd=repo_dir, runner=runner
    )


def git_remote_add_origin(
    repo_dir: Path,
    url: str,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    exec_util.run_command(
        git_command(["remote", "add", "origin", url], git_path=git_path),
        cwd=repo_dir,
        runner=runner,
    )


def git_remote_listing(
    repo_dir: Path,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Return the captured output of ``git remote -v``."""
    return exec_util.capture_command(
        git_command(["remote", "-v"], git_path=git_path), cwd=repo_dir, runner=runner
    )


def git_remote_set_origin_url(
    repo_dir: Path,
    url: str,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    exec_util.run_command(
        git_command(["remote", "set-url", "origin", url], git_path=git_path),
        cwd=repo_dir,
        runner=runner,
    )


def update_remote(
    repo_dir: Path,
    ssh_user: str,
    *,
    git_path: str | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> str:
    """Point ``origin`` of the repository at its SSH URL.

    ``git remote set-url`` is skipped when ``origin`` already uses the SSH
    URL, and never issued when the listing has no origin.

    Returns:
        The SSH URL ``origin`` now uses.
    """
    listing = git_remote_listing(repo_dir, git_path=git_path, runner=runner)
    current_url, _canonical, ssh_url = rewrite_origin_to_ssh(listing, ssh_user)
    if not refs.needs_ssh_rewrite(current_url, ssh_url):
        log.debug(f" ----> origin already uses {ssh_url}")
        return ssh_url
    git_remote_set_origin_url(repo_dir, ssh_url, git_path=git_path, runner=runner)
    return ssh_url
