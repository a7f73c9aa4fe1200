"""Implementation for the ``gotter link`` and ``gotter link rm`` commands."""

from __future__ import annotations

from .. import links, log
from ..models import GotterConfig
from .resolve import resolve_reference


def link_project(args: object, *, settings: GotterConfig) -> None:
    """Link the project's root directory into the workspace.

    Args:
        args: CLI argument object with ``reference``, ``update`` and ``force``.
        settings: Runtime configuration.

    Example:
        $ gotter link github.com/owner/repo --update
    """
    pkgpath, locations = resolve_reference(args, settings)
    log.info(f"Linking package {pkgpath} to {locations.workspace_path}")
    links.ensure_link(
        locations.root_path,
        locations.workspace_path,
        update=bool(getattr(args, "update", False)),
        force=bool(getattr(args, "force", False)),
    )
    log.debug(" ----> Successfully linked!")


def unlink_project(args: object, *, settings: GotterConfig) -> None:
    """Remove the project's workspace link."""
    log.info("Removing workspace link")
    _pkgpath, locations = resolve_reference(args, settings)
    links.remove_link(locations.workspace_path)
    log.debug(" ----> successfully removed workspace link")
