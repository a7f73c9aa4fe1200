"""Path helpers for locating a project under the toolchain root and workspace."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidReferenceError

DEFAULT_SSH_USER = "git"
SOURCE_DIRNAME = "src"


@dataclass(frozen=True)
class ResolvedLocations:
    """Filesystem and remote locations derived from one canonical path.

    Attributes:
        root_path: Import-path directory under the toolchain root.
        workspace_path: Link location inside the workspace.
        ssh_url: SCP-style SSH remote URL, or ``None`` when the path has no
            segment below the host.
    """

    root_path: Path
    workspace_path: Path
    ssh_url: str | None


def expand_path(path: str) -> Path:
    """Return an absolute path with a leading ``~`` expanded.

    Example:
        >>> expand_path("/tmp/../tmp/demo")
        PosixPath('/tmp/demo')
    """
    if path.startswith("~"):
        path = str(Path.home()) + path[1:]
    return Path(os.path.abspath(path))


def primary_root_dir(root_dir: str) -> str:
    """Return the first entry of a ``GOPATH``-style directory list.

    Example:
        >>> primary_root_dir("/go:/opt/go")
        '/go'
    """
    for entry in root_dir.split(os.pathsep):
        if entry.strip():
            return entry.strip()
    return root_dir


def leaf_name(ref: str) -> str:
    """Return the last ``/``-separated segment of a canonical path.

    Example:
        >>> leaf_name("github.com/owner/repo")
        'repo'
    """
    return ref[ref.rfind("/") + 1 :]


def root_path_for(ref: str, root_dir: str) -> Path:
    """Return the toolchain root location for a canonical path."""
    return expand_path(f"{primary_root_dir(root_dir)}/{SOURCE_DIRNAME}/{ref}")


def workspace_path_for(ref: str, workspace_dir: str) -> Path:
    """Return the workspace link location for a canonical path."""
    return expand_path(f"{workspace_dir}/{leaf_name(ref)}")


def ssh_url_for(ref: str, ssh_user: str = DEFAULT_SSH_USER) -> str:
    """Derive the SSH remote URL for a canonical path.

    Paths deeper than ``owner/repo`` are cut back to their first two
    segments, the depth hosts expect for SSH remotes.

    Args:
        ref: Canonical ``host/path``.
        ssh_user: User placed before the host.

    Returns:
        ``user@host:seg1/seg2.git``.

    Raises:
        InvalidReferenceError: ``ref`` has no path below the host.

    Example:
        >>> ssh_url_for("github.com/owner/repo")
        'git@github.com:owner/repo.git'
        >>> ssh_url_for("github.com/owner/repo/sub/pkg", "me")
        'me@github.com:owner/repo.git'
    """
    if "/" not in ref:
        raise InvalidReferenceError(f"no repository path in reference: {ref}")
    url = f"{ssh_user}@{ref}"
    while url.count("/") > 2:
        url = url[: url.rfind("/")]
    return url.replace("/", ":", 1) + ".git"


def resolve(
    ref: str,
    ssh_user: str,
    root_dir: str,
    workspace_dir: str,
) -> ResolvedLocations:
    """Resolve the root location, workspace link and SSH URL for ``ref``.

    Pure function of its inputs; the filesystem is not consulted. A host-only
    path still resolves, without an SSH URL.

    Example:
        >>> locations = resolve("github.com/o/p", "git", "/go", "/work")
        >>> str(locations.root_path), str(locations.workspace_path)
        ('/go/src/github.com/o/p', '/work/p')
        >>> locations.ssh_url
        'git@github.com:o/p.git'
        >>> resolve("example.org", "git", "/go", "/work").ssh_url is None
        True
    """
    return ResolvedLocations(
        root_path=root_path_for(ref, root_dir),
        workspace_path=workspace_path_for(ref, workspace_dir),
        ssh_url=ssh_url_for(ref, ssh_user) if "/" in ref else None,
    )
