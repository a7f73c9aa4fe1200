"""Workspace link lifecycle.

A project's workspace entry is a symlink pointing at its import-path
directory under the toolchain root. ``ensure_link`` inspects the workspace
path on every call and decides whether to create, replace or refuse to touch
it:

- an existing symlink is replaced when ``update`` or ``force`` is given;
- a real file or directory is only removed with ``force``.

Symlinks and regular files are replaced by renaming a fresh temporary link
over them. A directory has to be removed before the link is created; a
concurrent writer can slip into that window.
"""

from __future__ import annotations

import os
import shutil
import stat
import uuid
from enum import Enum
from pathlib import Path

from . import log
from .errors import AlreadyLinkedError, IoFailedError, PathOccupiedError
from .paths import ResolvedLocations


class LinkState(Enum):
    ABSENT = "absent"
    LINKED = "linked"
    LINKED_ELSEWHERE = "linked_elsewhere"
    OCCUPIED = "occupied"
    OTHER = "other"

    @property
    def is_link(self) -> bool:
        return self in (LinkState.LINKED, LinkState.LINKED_ELSEWHERE)


def read_link_target(path: Path) -> str | None:
    """Return the target of a symlink, or ``None`` if it cannot be read."""
    try:
        return os.readlink(path)
    except OSError:
        return None


def inspect_link(root_path: Path, workspace_path: Path) -> LinkState:
    """Return the on-disk state of ``workspace_path`` without following links."""
    try:
        info = os.lstat(workspace_path)
    except FileNotFoundError:
        return LinkState.ABSENT
    except OSError as exc:
        raise IoFailedError(f"failed to inspect {workspace_path}: {exc}") from exc
    if stat.S_ISLNK(info.st_mode):
        target = read_link_target(workspace_path)
        if target is not None and Path(target) == root_path:
            return LinkState.LINKED
        return LinkState.LINKED_ELSEWHERE
    if stat.S_ISDIR(info.st_mode) or stat.S_ISREG(info.st_mode):
        return LinkState.OCCUPIED
    return LinkState.OTHER


def _replace_with_link(root_path: Path, workspace_path: Path) -> None:
    temp_link = workspace_path.with_name(
        f".{workspace_path.name}.gotter-{uuid.uuid4().hex[:8]}"
    )
    temp_link.symlink_to(root_path, target_is_directory=True)
    try:
        os.replace(temp_link, workspace_path)
    except OSError:
        temp_link.unlink(missing_ok=True)
        raise


def _write_link(root_path: Path, workspace_path: Path, state: LinkState) -> None:
    if state is LinkState.ABSENT:
        workspace_path.symlink_to(root_path, target_is_directory=True)
        return
    if state is LinkState.OCCUPIED and workspace_path.is_dir():
        log.warning(f" ----> removing {workspace_path}")
        shutil.rmtree(workspace_path)
        workspace_path.symlink_to(root_path, target_is_directory=True)
        return
    if not state.is_link:
        log.warning(f" ----> removing {workspace_path}")
    _replace_with_link(root_path, workspace_path)


def ensure_link(
    root_path: Path,
    workspace_path: Path,
    *,
    update: bool = False,
    force: bool = False,
) -> LinkState:
    """Point ``workspace_path`` at ``root_path``.

    Args:
        root_path: Import-path directory the link should point at.
        workspace_path: Location of the link inside the workspace.
        update: Allow replacing an existing symlink.
        force: Allow replacing an existing symlink, file or directory.

    Returns:
        The state observed before the link was written.

    Raises:
        AlreadyLinkedError: A symlink exists and neither flag was given.
        PathOccupiedError: A non-symlink entry exists and ``force`` is false.
        IoFailedError: Removing the old entry or creating the link failed.
    """
    state = inspect_link(root_path, workspace_path)
    if state.is_link and not (update or force):
        current_target = read_link_target(workspace_path)
        log.warning("[WARNING]: Link already exists!")
        log.warning(f" ----> {workspace_path} -> {current_target or '?'}")
        raise AlreadyLinkedError(workspace_path, current_target)
    if state in (LinkState.OCCUPIED, LinkState.OTHER) and not force:
        raise PathOccupiedError(workspace_path)

    log.debug(f" ----> linking {workspace_path} -> {root_path}")
    try:
        _write_link(root_path, workspace_path, state)
    except OSError as exc:
        raise IoFailedError(f"failed to create link: {exc}") from exc
    return state


def remove_link(workspace_path: Path) -> None:
    """Remove the workspace entry, whatever it is.

    Raises:
        IoFailedError: The path is missing, is a directory, or cannot be removed.
    """
    log.debug(f" ----> removing {workspace_path}")
    try:
        workspace_path.unlink()
    except OSError as exc:
        raise IoFailedError(f"failed to remove workspace link: {exc}") from exc


def remove_root(root_path: Path) -> None:
    """Recursively remove a project directory; a missing one is not an error."""
    log.debug(f" ----> removing {root_path}")
    try:
        if root_path.is_symlink() or root_path.is_file():
            root_path.unlink()
        elif root_path.exists():
            shutil.rmtree(root_path)
    except OSError as exc:
        raise IoFailedError(f"failed to remove project folder: {exc}") from exc


def remove_project(locations: ResolvedLocations) -> None:
    """Remove the workspace link, then the project directory.

    The directory is left alone when the link cannot be removed.
    """
    remove_link(locations.workspace_path)
    remove_root(locations.root_path)
