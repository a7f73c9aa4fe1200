"""Implementation for the ``gotter rm`` command."""

from __future__ import annotations

from .. import links, log
from ..models import GotterConfig
from .resolve import resolve_reference


def remove_project(args: object, *, settings: GotterConfig) -> None:
    """Remove both the workspace link and the project folder.

    The folder is kept when the link cannot be removed.
    """
    _pkgpath, locations = resolve_reference(args, settings)
    log.info("Removing project")
    links.remove_project(locations)
    log.debug(" ----> successfully removed project folder")
