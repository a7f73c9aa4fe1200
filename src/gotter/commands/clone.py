"""Implementation for the ``gotter clone`` command."""

from __future__ import annotations

from .. import exec as exec_util
from .. import log, toolchain
from ..models import GotterConfig
from .resolve import resolve_reference


def clone_project(
    args: object,
    *,
    settings: GotterConfig,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Fetch the package into the toolchain root with ``go get``.

    Args:
        args: CLI argument object with ``reference``, ``update`` and
            ``download_only``.
        settings: Runtime configuration.

    Example:
        $ gotter clone github.com/owner/repo -u
    """
    pkgpath, _locations = resolve_reference(args, settings)
    log.info(f"Getting package: {pkgpath}")
    toolchain.go_get(
        pkgpath,
        update=bool(getattr(args, "update", False)),
        download_only=bool(getattr(args, "download_only", False)),
        go_path=settings.go_path,
        runner=runner,
    )
    log.debug(" ----> Successfully got package!")
