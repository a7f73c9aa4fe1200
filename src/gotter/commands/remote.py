"""Implementation for the ``gotter update-remote`` command."""

from __future__ import annotations

from .. import exec as exec_util
from .. import git, log
from ..models import GotterConfig
from .resolve import resolve_reference, ssh_user_for


def update_remote(
    args: object,
    *,
    settings: GotterConfig,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Rewrite the repository's ``origin`` URL to its SSH form.

    Args:
        args: CLI argument object with ``reference`` and optional ``ssh_user``.
        settings: Runtime configuration.
    """
    pkgpath, locations = resolve_reference(args, settings)
    log.info(f"Update remote origin URL for repo: {pkgpath}")
    ssh_url = git.update_remote(
        locations.root_path,
        ssh_user_for(args, settings),
        git_path=settings.git_path,
        runner=runner,
    )
    log.debug(f" ----> Successfully updated remote origin to {ssh_url}")
